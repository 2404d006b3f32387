"""
Basic settings and logging configuration for the cargofleet app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    reports_dir: Path

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "cargofleet_app_data"
        data_dir.mkdir(exist_ok=True)
        reports_dir = data_dir / "reports"
        reports_dir.mkdir(exist_ok=True)
        return cls(project_root=project_root, data_dir=data_dir, reports_dir=reports_dir)


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to console and a log file in the data dir."""
    log_file = settings.data_dir / "cargofleet.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Reports in %s", settings.reports_dir)
