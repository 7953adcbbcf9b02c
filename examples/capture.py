# capture.py

import argparse
from termgrid import Display

def main():
    parser = argparse.ArgumentParser(description='termgrid output capture demo')
    parser.add_argument('-o', '--output', default='redirected_output.txt',
        help='File receiving the captured output')
    args = parser.parse_args()

    display = Display()
    canvas = display.create_canvas(12, 3)
    canvas.text(0, 1, 'captured', 'green')

    with display.create_capture(args.output) as capture:
        print("Everything printed here ends up in", capture.filename)
        canvas.render()
        print()
    print(f"Done; see {args.output}")

if __name__ == "__main__":
    main()
