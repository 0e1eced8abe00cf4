"""Render shade scales as PNG strips."""

import io

from PIL import Image, ImageDraw

from colorlerp.color_utils import hex_to_rgb, readable_text_color


def scale_strip_image(
    shades: dict[int, str],
    swatch_width: int = 80,
    height: int = 80,
    labels: bool = True,
) -> Image.Image:
    """One block per step, lowest key on the left."""
    keys = sorted(shades)
    img = Image.new("RGB", (swatch_width * len(keys), height), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    for i, key in enumerate(keys):
        hex_str = shades[key]
        x0 = i * swatch_width
        draw.rectangle([x0, 0, x0 + swatch_width - 1, height - 1], fill=hex_to_rgb(hex_str))
        if labels:
            text_color = hex_to_rgb(readable_text_color(hex_str))
            draw.text((x0 + 6, 6), str(key), fill=text_color)
            draw.text((x0 + 6, height - 18), hex_str.lower(), fill=text_color)
    return img


def image_to_png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
