"""Module for reading JSON configuration files."""

import json
import os
from typing import Any, Optional

from src.utils.exchange.errors import MalformedConfigError
from src.utils.io.logger import Logger


class JsonManager:
    """Class for handling JSON file operations."""

    @staticmethod
    def exists(filepath: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.exists(filepath)

    @staticmethod
    def load(filepath: Optional[str]) -> Any:
        """Load JSON data from a file.

        Configuration is required, so a missing or unreadable file raises
        :class:`MalformedConfigError` after being logged.
        """
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            raise MalformedConfigError("filepath is empty")
        if not JsonManager.exists(filepath):
            Logger.error(f"File not found: {filepath}")
            raise MalformedConfigError(f"File not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                return json.load(file)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error(f"Error loading JSON file {filepath}: {e}")
            raise MalformedConfigError(f"Error loading JSON file {filepath}: {e}") from e
