from setuptools import setup, find_packages

setup(
    name="termgrid",
    version="0.1.0",
    description="ANSI terminal canvas, function plotting and output capture",
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
