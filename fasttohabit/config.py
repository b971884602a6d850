from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Centralized configuration for the tracking core."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FASTTOHABIT_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("FASTTOHABIT_DB_PATH") or (self.data_root / "fasttohabit.db")
        ).expanduser()
        # Completed fasts further apart than this break the streak.
        self.streak_window_hours: float = float(
            os.environ.get("FASTTOHABIT_STREAK_WINDOW_HOURS") or "48"
        )
        self.extended_ratio: float = float(
            os.environ.get("FASTTOHABIT_EXTENDED_RATIO") or "1.1"
        )
        self.log_level: str = (os.environ.get("FASTTOHABIT_LOG_LEVEL") or "INFO").upper()


settings = Settings()
