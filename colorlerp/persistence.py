"""JSON persistence for shade scales and user data (atomic writes via Path.replace())."""

import json
import logging
import re
from pathlib import Path

from colorlerp.errors import InvalidExportName

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "user_data"


def _atomic_write(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
    tmp.replace(path)


def load_json(filename: str, default=None):
    """Load a JSON file from user_data/. Returns *default* if missing."""
    path = DATA_DIR / filename
    if not path.exists():
        return default if default is not None else {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(filename: str, data):
    """Atomically save *data* as JSON to user_data/."""
    _atomic_write(DATA_DIR / filename, json.dumps(data, indent=2))


def shades_to_json(shades: dict[int, str]) -> str:
    """Flat JSON object, keys as strings in ascending step order."""
    return json.dumps({str(k): v for k, v in sorted(shades.items())}, indent=2)


def export_shades(shades: dict[int, str], path: str | Path) -> Path:
    """Write a shade scale to *path*, creating its directory if needed."""
    path = Path(path)
    _atomic_write(path, shades_to_json(shades))
    log.info("Wrote %d shades to %s", len(shades), path)
    return path


def load_shades(path: str | Path) -> dict[int, str]:
    """Read a scale written by export_shades(), with integer keys."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return {int(k): v for k, v in sorted(data.items(), key=lambda kv: int(kv[0]))}


def shade_filename(name: str) -> str:
    """'PRIMARY' -> 'PRIMARYShades.json'. Keeps only letters, digits, '_' and '-'."""
    cleaned = re.sub(r"[^A-Za-z0-9_-]", "", name)
    if not cleaned:
        raise InvalidExportName(f"Export name {name!r} has no usable characters.")
    return f"{cleaned}Shades.json"
