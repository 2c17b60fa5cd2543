"""Configuration defaults, env vars, and runtime options for mochi."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


VERSION = "1.0.0"

DEFAULT_DATA_DIR = "data"
DEFAULT_FILE_NAME = "tasks.txt"


@dataclass
class Config:
    """Runtime configuration — CLI flags win over env vars, env vars over defaults."""

    # Storage
    data_dir: str = ""
    file_name: str = ""

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.data_dir:
            self.data_dir = os.environ.get("MOCHI_DATA_DIR") or DEFAULT_DATA_DIR
        if not self.file_name:
            self.file_name = os.environ.get("MOCHI_FILE") or DEFAULT_FILE_NAME

    @property
    def save_path(self) -> Path:
        return Path(self.data_dir) / self.file_name
