from renderer.image import (
    MAX_COLOR,
    ImageBuffer,
    color_to_rgb8,
    write_color,
    write_ppm_header,
)

__all__ = ["MAX_COLOR", "ImageBuffer", "color_to_rgb8", "write_color", "write_ppm_header"]
