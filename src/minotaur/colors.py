# Hex colour parsing for the CLI. Pillow does the digit work; we enforce the
# strict six-digit form ("#RRGGBB" or "RRGGBB").

from typing import Tuple

from PIL import ImageColor


def parse_hex_color(src: str) -> Tuple[int, int, int]:
    body = src[1:] if src.startswith("#") else src
    if len(body) != 6:
        raise ValueError(f"Expected a 6 character color value in hex, but got: {body!r}")
    try:
        return ImageColor.getrgb("#" + body)[:3]
    except ValueError:
        raise ValueError(f"Invalid hex color: {src!r}") from None


def to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)
