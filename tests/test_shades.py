import pytest

from colorlerp.color_utils import hex_to_hsl
from colorlerp.errors import InvalidColorFormat, InvalidStepCount, ShadeError
from colorlerp.shades import (
    CENTER_KEY,
    DEFAULT_COLORS,
    ShadeConfig,
    ShadeGenerator,
    generate_shades,
    validate_steps,
)

# Pinned output for the default 8 steps. The "light" half (600-900) walks
# lightness down to 5 and the "dark" half (100-400) walks it up to 100.
SUCCESS_SCALE = {
    100: "#ffffff",
    200: "#bbf2c8",
    300: "#78e591",
    400: "#34d85b",
    500: "#1e9e3c",
    600: "#187c2f",
    700: "#115a22",
    800: "#0b3815",
    900: "#041508",
}


def test_pinned_scale_for_success_green():
    assert generate_shades("#1e9e3c") == SUCCESS_SCALE


def test_keys_ascending():
    shades = generate_shades("#2339c2", 8)
    assert list(shades) == [100, 200, 300, 400, 500, 600, 700, 800, 900]


def test_center_holds_input_verbatim():
    assert generate_shades("#1e9e3c", 8)[500] == "#1e9e3c"
    assert generate_shades("#1E9E3C", 8)[CENTER_KEY] == "#1E9E3C"
    assert generate_shades("#abc", 4)[CENTER_KEY] == "#abc"


def test_generated_shades_are_lowercase():
    shades = generate_shades("#1E9E3C", 8)
    assert shades[100] == "#ffffff"
    assert all(v == v.lower() for k, v in shades.items() if k != CENTER_KEY)


@pytest.mark.parametrize("steps", [2, 4, 6, 8, 10, 20])
def test_cardinality(steps):
    assert len(generate_shades("#4d5b70", steps)) == steps + 1


def test_generic_step_counts_extend_keys():
    assert list(generate_shades("#4d5b70", 2)) == [400, 500, 600]
    assert list(generate_shades("#4d5b70", 10)) == list(range(0, 1001, 100))


@pytest.mark.parametrize("base", list(DEFAULT_COLORS.values()))
def test_lightness_decreases_with_key(base):
    shades = generate_shades(base, 8)
    lightness = [hex_to_hsl(v).l for v in shades.values()]
    assert all(a > b for a, b in zip(lightness, lightness[1:]))


def test_hue_held_constant():
    base = hex_to_hsl("#2339c2")
    shades = generate_shades("#2339c2", 8)
    for key in (200, 300, 400, 600, 700, 800):
        assert hex_to_hsl(shades[key]).h == pytest.approx(base.h, abs=2.0)


def test_scale_ends():
    shades = generate_shades("#9e231e", 8)
    assert shades[100] == "#ffffff"
    assert hex_to_hsl(shades[900]).l == pytest.approx(5, abs=0.5)


def test_very_dark_base_light_half_moves_up_toward_5():
    # base lightness below 5: the step size flips sign, no clamping
    shades = generate_shades("#050505", 4)
    assert hex_to_hsl("#050505").l < 5
    assert hex_to_hsl(shades[700]).l > hex_to_hsl(shades[600]).l >= hex_to_hsl("#050505").l


def test_white_base_dark_half_stays_white():
    shades = generate_shades("#ffffff", 4)
    assert list(shades) == [300, 400, 500, 600, 700]
    assert shades[300] == shades[400] == "#ffffff"


@pytest.mark.parametrize("steps", [0, -2, 3, 9, 2.0, "8", True, None])
def test_invalid_steps(steps):
    with pytest.raises(InvalidStepCount):
        generate_shades("#1e9e3c", steps)


def test_invalid_color_aborts():
    with pytest.raises(InvalidColorFormat):
        generate_shades("#1e9e3", 8)


def test_validate_steps_returns_value():
    assert validate_steps(12) == 12
    assert issubclass(InvalidStepCount, ShadeError)


def test_generator_defaults():
    gen = ShadeGenerator()
    assert gen.config.steps == 8
    assert gen.generate("#1e9e3c") == SUCCESS_SCALE


def test_generator_generate_all_keeps_order():
    config = ShadeConfig(colors={"B": "#2339c2", "A": "#1e9e3c"}, steps=4)
    scales = ShadeGenerator(config).generate_all()
    assert list(scales) == ["B", "A"]
    assert scales["A"][500] == "#1e9e3c"
    assert len(scales["B"]) == 5


def test_generator_rejects_odd_steps():
    with pytest.raises(InvalidStepCount):
        ShadeGenerator(ShadeConfig(steps=9))


def test_default_config_is_not_shared():
    a, b = ShadeConfig(), ShadeConfig()
    a.colors["EXTRA"] = "#000000"
    assert "EXTRA" not in b.colors
    assert "EXTRA" not in DEFAULT_COLORS
