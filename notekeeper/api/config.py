"""Configuration for Notekeeper API server."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class NotesServiceConfig:
    """Configuration for the in-memory note service."""

    seed_sample_notes: bool = True


@dataclass
class ServerConfig:
    """Configuration for the API server."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    debug: bool = False


@dataclass
class APIConfig:
    """Configuration for the Notekeeper API."""

    server: ServerConfig = field(default_factory=ServerConfig)
    notes: NotesServiceConfig = field(default_factory=NotesServiceConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "APIConfig":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            APIConfig instance
        """
        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = json.load(f)

        server_data = data.get("server", {})
        server = ServerConfig(
            host=server_data.get("host", "0.0.0.0"),
            port=server_data.get("port", 8000),
            cors_origins=server_data.get("cors_origins", ["*"]),
            debug=server_data.get("debug", False),
        )

        notes_data = data.get("notes", {})
        notes = NotesServiceConfig(
            seed_sample_notes=notes_data.get("seed_sample_notes", True),
        )

        return cls(server=server, notes=notes)

    @classmethod
    def default_config_path(cls) -> Path:
        """Return the default configuration file path."""
        return Path(__file__).parent.parent.parent / "configs" / "api_config.json"


def load_config() -> APIConfig:
    """Load the API configuration from the default path."""
    return APIConfig.from_file(APIConfig.default_config_path())
