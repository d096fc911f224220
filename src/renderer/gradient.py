# renderer/gradient.py
import argparse
import sys
from typing import Optional, TextIO
from core.vector import Vector3
from renderer.image import ImageBuffer, write_color, write_ppm_header

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256


def gradient_color(i: int, j: int, width: int, height: int) -> Vector3:
    """
    Red grows left to right, green grows top to bottom, blue stays off.
    """
    r = i / (width - 1)
    g = j / (height - 1)
    b = 0.0
    return Vector3(r, g, b)


def render(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT,
           out: Optional[TextIO] = None, log: Optional[TextIO] = None) -> ImageBuffer:
    """
    Writes a P3 gradient image to out (stdout by default) and reports
    progress on log. Nothing is reported when log is None.
    """
    if out is None:
        out = sys.stdout
    image = ImageBuffer(width, height)
    write_ppm_header(out, width, height)

    for j in range(height):
        if log is not None:
            print(f"Scanlines remaining: {height - j}", file=log)
        for i in range(width):
            rgb = write_color(out, gradient_color(i, j, width, height))
            image.set_pixel(i, j, rgb)

    if log is not None:
        print("Done", file=log)
    return image


def _dimension(value: str) -> int:
    size = int(value)
    if size < 2:
        raise argparse.ArgumentTypeError(f"must be at least 2, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Render a gradient test image as plain PPM on stdout')
    parser.add_argument('--width', type=_dimension, default=IMAGE_WIDTH,
                        help=f'Image width in pixels (default: {IMAGE_WIDTH})')
    parser.add_argument('--height', type=_dimension, default=IMAGE_HEIGHT,
                        help=f'Image height in pixels (default: {IMAGE_HEIGHT})')
    parser.add_argument('--png', metavar='PATH', default=None,
                        help='Also save the image as PNG to PATH')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print progress to stderr')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log = None if args.quiet else sys.stderr
    image = render(args.width, args.height, out=sys.stdout, log=log)
    if args.png:
        image.save_png(args.png)
        if log is not None:
            print(f"Saved PNG to {args.png}", file=log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
