# renderer/image.py
import math
from typing import TextIO
import numpy as np
from PIL import Image
from core.vector import Vector3

MAX_COLOR = 255


def color_to_rgb8(pixel_color: Vector3) -> Vector3:
    """
    Scales a color with channels in [0, 1] to integer channels in [0, 255].
    Channels are truncated, not rounded, and saturate at the ends of the
    range: NaN becomes 0 and infinities clamp.
    """
    return Vector3(*(_to_channel(c) for c in pixel_color))


def _to_channel(c: float) -> int:
    if math.isnan(c):
        return 0
    return int(min(MAX_COLOR, max(0.0, MAX_COLOR * c)))


def write_ppm_header(out: TextIO, width: int, height: int):
    print("P3", file=out)
    print(f"{width} {height}", file=out)
    print(MAX_COLOR, file=out)


def write_color(out: TextIO, pixel_color: Vector3) -> Vector3:
    """
    Writes one pixel as a line of three space-separated integers and
    returns the 8-bit color that was written.
    """
    rgb = color_to_rgb8(pixel_color)
    print(rgb, file=out)
    return rgb


class ImageBuffer:
    """
    Holds 8-bit pixels in row-major, top-to-bottom order so the rendered
    image can also be saved in a binary format.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def set_pixel(self, i: int, j: int, rgb: Vector3):
        self.pixels[j, i] = [int(c) for c in rgb]

    def save_png(self, path: str):
        Image.fromarray(self.pixels).save(path, format="PNG")

