"""Generic project helpers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the directory holding ``logs/`` and the default ``data/``.

    ``COST_LEDGER_HOME`` wins when set. A source checkout uses the repository
    root; an installed package falls back to the working directory so nothing
    is written next to site-packages.
    """
    home = os.getenv("COST_LEDGER_HOME", "").strip()
    if home:
        return Path(home).expanduser().resolve()
    checkout = Path(__file__).resolve().parents[2]
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return Path.cwd()


__all__ = ["get_project_root"]
