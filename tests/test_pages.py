from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from colorlerp import persistence
from colorlerp.shades import DEFAULT_COLORS

PAGES = Path(__file__).resolve().parent.parent / "pages"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(persistence, "DATA_DIR", tmp_path / "user_data")
    return tmp_path / "user_data"


def _picker(at, label):
    return next(cp for cp in at.color_picker if cp.label == label)


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_palette_reset_restores_edited_picker(data_dir):
    at = AppTest.from_file(str(PAGES / "2_Palette_Export.py"), default_timeout=30).run()
    assert _picker(at, "SUCCESS").value == "#1e9e3c"

    _picker(at, "SUCCESS").set_value("#000000").run()
    assert _picker(at, "SUCCESS").value == "#000000"

    _button(at, "Reset").click().run()
    assert not at.exception
    assert _picker(at, "SUCCESS").value == DEFAULT_COLORS["SUCCESS"]
    assert persistence.load_json("palette.json") == {"colors": DEFAULT_COLORS}


def test_shade_generator_rejects_bad_typed_color():
    at = AppTest.from_file(str(PAGES / "1_Shade_Generator.py"), default_timeout=30).run()
    at.text_input[0].set_value("#12").run()
    assert at.error
    assert "#RGB" in at.error[0].value
