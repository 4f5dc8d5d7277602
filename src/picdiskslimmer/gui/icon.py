"""Application icon drawn with Pillow."""

from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw

ICON_SIZES = [16, 32, 48, 64, 128, 256]

BG_COLOR = (39, 174, 96)
ACCENT_COLOR = (241, 196, 15)
WHITE = (255, 255, 255)


def create_icon_image(size: int = 256) -> Image.Image:
    """Draw the app icon: a picture being squeezed between two arrows.

    Args:
        size: Edge length in pixels

    Returns:
        An RGBA image
    """
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    # Circular background
    padding = size // 16
    draw.ellipse([padding, padding, size - padding, size - padding], fill=BG_COLOR)

    center_x = size // 2
    center_y = size // 2

    # Picture frame, wider than tall
    pic_half_w = int(size * 0.22)
    pic_half_h = int(size * 0.16)
    left = center_x - pic_half_w
    right = center_x + pic_half_w
    top = center_y - pic_half_h
    bottom = center_y + pic_half_h
    draw.rectangle([left, top, right, bottom], fill=WHITE)

    # Mountain inside the picture
    draw.polygon(
        [
            (left + size // 32, bottom - size // 32),
            (center_x - size // 32, top + pic_half_h // 2),
            (right - size // 32, bottom - size // 32),
        ],
        fill=BG_COLOR,
    )

    # Sun
    sun = max(1, size // 24)
    sun_x = right - pic_half_w // 3
    sun_y = top + pic_half_h // 2
    draw.ellipse([sun_x - sun, sun_y - sun, sun_x + sun, sun_y + sun], fill=ACCENT_COLOR)

    # Arrows pointing inward from left and right
    if size >= 32:
        arrow = int(size * 0.09)
        gap = size // 32
        for tip_x, direction in ((left - gap, 1), (right + gap, -1)):
            base_x = tip_x - direction * arrow
            draw.polygon(
                [(tip_x, center_y), (base_x, center_y - arrow), (base_x, center_y + arrow)],
                fill=ACCENT_COLOR,
            )

    return img


def save_icon(path: Union[str, Path]) -> Path:
    """Write a multi-size ICO file.

    Args:
        path: Destination file; parent directories are created

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Pillow builds every ICO size from the largest image
    largest = create_icon_image(max(ICON_SIZES))
    largest.save(path, format="ICO", sizes=[(s, s) for s in ICON_SIZES])
    return path
