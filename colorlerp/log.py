"""Logging setup shared by the CLI and the Streamlit app."""

import logging

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_default_logging(level: str = "INFO") -> None:
    """Configure the root logger unless the host (Streamlit, pytest) already did."""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")
