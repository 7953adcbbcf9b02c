# plot.py

import argparse
import math
from termgrid import Display, FrameStyle

def main():
    parser = argparse.ArgumentParser(description='termgrid plotting demo')
    parser.add_argument('--width', type=int, default=60,
        help='Canvas width in columns')
    parser.add_argument('--height', type=int, default=20,
        help='Canvas height in rows')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    args = parser.parse_args()

    display = Display(logging_enabled=args.enable_logging)
    plot = display.create_plot(args.width, args.height)
    plot.set_frame(FrameStyle.BOX, 'bright-black')

    # Fit two periods horizontally and [-1.2, 1.2] vertically
    plot.set_offset(-2 * math.pi, -1.2)
    plot.set_scale(4 * math.pi / args.width, 2.4 / args.height)

    plot.draw(lambda x: 0.0, '-', 'faint')
    plot.draw(math.sin, '*', 'red,bold')
    plot.draw(math.cos, 'o', 'cyan')
    plot.text(1, 0, 'sin', 'red')
    plot.text(5, 0, 'cos', 'cyan')
    display.show(plot)

if __name__ == "__main__":
    main()
