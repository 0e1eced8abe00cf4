"""Tonal shade scales built by walking HSL lightness around a base color.

Only lightness changes between steps; hue and saturation are copied from the
base color so the scale does not drift in hue.

Key layout for the default 8 steps::

    100 200 300 400 | 500 | 600 700 800 900
    <- toward white   base   toward L=5 ->

The half written to the keys above the center is historically called the
"light" half even though its lightness goes *down* toward 5, and the "dark"
half below the center goes *up* toward 100. The arithmetic and the key
direction are kept as they have always been; only the naming is inverted.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from colorlerp.color_utils import HSL, hex_to_hsl, hsl_to_hex
from colorlerp.errors import InvalidStepCount
from colorlerp.persistence import export_shades, shade_filename

log = logging.getLogger(__name__)

CENTER_KEY = 500
KEY_INTERVAL = 100
DEFAULT_STEPS = 8
# lightness the "light" half walks toward
LIGHT_FLOOR = 5
SHADES_DIR = Path(__file__).resolve().parent.parent / "shades"

DEFAULT_COLORS = {
    "SUCCESS": "#1e9e3c",
    "INFO": "#28b6d2",
    "WARN": "#9e5c1e",
    "DANGER": "#9e231e",
    "PRIMARY": "#2339c2",
    "SECONDARY": "#ffcd35",
    "GREY": "#4d5b70",
}


@dataclass
class ShadeConfig:
    """Settings for a ShadeGenerator.

    colors:     named base colors, e.g. {"PRIMARY": "#2339c2"}.
    steps:      number of generated shades, split evenly around the base.
    output_dir: where export_palette() writes one JSON file per color.
    """

    colors: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    steps: int = DEFAULT_STEPS
    output_dir: Path = SHADES_DIR


def validate_steps(steps) -> int:
    """Return *steps* if it is a positive even int, else raise InvalidStepCount."""
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise InvalidStepCount(f"Steps must be an integer, got {steps!r}.")
    if steps <= 0:
        raise InvalidStepCount(f"Steps must be positive, got {steps}.")
    if steps % 2:
        raise InvalidStepCount(f"Steps must be even, got {steps}.")
    return steps


def _light_half(base: HSL, half: int) -> dict[int, str]:
    step = (base.l - LIGHT_FLOOR) / half
    shades = {}
    key = CENTER_KEY + KEY_INTERVAL
    for i in range(1, half + 1):
        shades[key] = hsl_to_hex(HSL(base.h, base.s, base.l - step * i))
        key += KEY_INTERVAL
    return shades


def _dark_half(base: HSL, half: int) -> dict[int, str]:
    step = (100 - base.l) / half
    shades = {}
    key = CENTER_KEY - KEY_INTERVAL
    for i in range(1, half + 1):
        shades[key] = hsl_to_hex(HSL(base.h, base.s, base.l + step * i))
        key -= KEY_INTERVAL
    return shades


def generate_shades(base_hex: str, steps: int = DEFAULT_STEPS) -> dict[int, str]:
    """Return {step key: hex} for *base_hex*, sorted by key.

    The center key holds *base_hex* exactly as passed in. Raises
    InvalidColorFormat or InvalidStepCount on bad input; no partial result is
    ever returned.
    """
    half = validate_steps(steps) // 2
    base = hex_to_hsl(base_hex)
    log.debug("Generating %d shades for %s (h=%.2f s=%.2f l=%.2f)", steps, base_hex, *base)

    shades = {**_light_half(base, half), CENTER_KEY: base_hex, **_dark_half(base, half)}
    return dict(sorted(shades.items()))


class ShadeGenerator:
    """Generates shade scales for the colors in a ShadeConfig."""

    def __init__(self, config: ShadeConfig | None = None):
        self.config = config or ShadeConfig()
        validate_steps(self.config.steps)

    def generate(self, base_hex: str) -> dict[int, str]:
        return generate_shades(base_hex, self.config.steps)

    def generate_all(self) -> dict[str, dict[int, str]]:
        """Scale for every named color, in config order."""
        return {name: self.generate(hex_str) for name, hex_str in self.config.colors.items()}


def export_palette(config: ShadeConfig | None = None) -> list[Path]:
    """Write <output_dir>/<NAME>Shades.json for every color in *config*."""
    generator = ShadeGenerator(config)
    # every scale and file name is checked before any file is written
    scales = generator.generate_all()
    out_dir = Path(generator.config.output_dir)
    targets = [(out_dir / shade_filename(name), shades) for name, shades in scales.items()]
    paths = [export_shades(shades, path) for path, shades in targets]
    log.info("Exported %d palettes to %s", len(paths), out_dir)
    return paths
