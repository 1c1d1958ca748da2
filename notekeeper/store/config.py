"""Configuration for the note store and its remote service client."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_API_URL = "http://localhost:8000"


@dataclass
class NoteStoreConfig:
    """Configuration for a NoteStore backed by the HTTP note service."""

    # Remote note service
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = 10.0

    # Show the sample notes until the first successful load
    seed_sample_notes: bool = True

    # Access log directory, None disables file logging
    log_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        """Normalize the URL and ensure paths are Path objects."""
        self.api_url = self.api_url.rstrip("/")
        if self.log_dir is not None and not isinstance(self.log_dir, Path):
            self.log_dir = Path(self.log_dir)

    @classmethod
    def from_env(cls) -> "NoteStoreConfig":
        """Build a config from NOTEKEEPER_* environment variables."""
        log_dir = os.environ.get("NOTEKEEPER_LOG_DIR")
        return cls(
            api_url=os.environ.get("NOTEKEEPER_API_URL", DEFAULT_API_URL),
            timeout_seconds=float(os.environ.get("NOTEKEEPER_TIMEOUT_SECONDS", "10")),
            seed_sample_notes=os.environ.get("NOTEKEEPER_SEED_SAMPLES", "1") != "0",
            log_dir=Path(log_dir) if log_dir else None,
        )


def setup_file_logging(log_dir: Path, logger_name: str = "notekeeper") -> Path:
    """Attach a dated access log file handler to a logger.

    Args:
        log_dir: Directory for the log file, created if missing
        logger_name: Logger to attach the handler to

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"access_{datetime.now():%Y%m%d}.log"
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger = logging.getLogger(logger_name)
    logger.addHandler(file_handler)
    logger.info("Notekeeper logging initialized")
    return log_file
