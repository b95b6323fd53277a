from __future__ import annotations

from io import BytesIO

from PIL import Image


def image_bytes(fmt: str = "PNG", size: tuple[int, int] = (64, 48), mode: str = "RGB", **save_kwargs) -> bytes:
    """Render a gradient test image and return it encoded as ``fmt``."""
    width, height = size
    image = Image.new("RGB", size)
    image.putdata(
        [((x * 255) // width, (y * 255) // height, (x * y) % 256) for y in range(height) for x in range(width)]
    )
    if mode != "RGB":
        image = image.convert(mode)
    buffer = BytesIO()
    image.save(buffer, format=fmt, **save_kwargs)
    return buffer.getvalue()


def gray_ramp(mode: str = "I;16", width: int = 256, height: int = 16) -> Image.Image:
    """Horizontal ramp over the full 16-bit range whose high byte equals the column index."""
    image = Image.new("I", (width, height))
    image.putdata([(x * 257) % 65536 for _ in range(height) for x in range(width)])
    if mode != "I":
        image = image.convert(mode)
    return image


def ramp_samples(image: Image.Image, step: int = 32) -> list[int]:
    """Grayscale values sampled along the middle row every ``step`` columns."""
    gray = image.convert("L")
    row = gray.height // 2
    return [gray.getpixel((x, row)) for x in range(0, gray.width, step)]
