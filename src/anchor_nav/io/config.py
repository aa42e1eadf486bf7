# src/anchor_nav/io/config.py
from pathlib import Path

from anchor_nav.config.models import NavigationModel


def load_config(path: str | Path) -> NavigationModel:
    return NavigationModel.model_validate_json(Path(path).read_text(encoding="utf-8"))
