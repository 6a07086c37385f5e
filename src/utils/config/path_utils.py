"""Path utilities module.

Provides helper functions for resolving configuration file paths, so the market
catalog is found from any working directory.
"""

import os
import re
from pathlib import Path
from typing import List


class PathUtils:  # pylint: disable=too-few-public-methods
    """Utility class for building normalized configuration paths."""

    _PROJECT_ROOT: Path = Path(__file__).resolve().parents[3]

    @staticmethod
    def base_path() -> str:
        """Return ``CONFIG_BASEPATH`` when set, else the project root."""
        configured = os.getenv("CONFIG_BASEPATH", "").strip()
        if len(configured) > 0:
            return configured
        return str(PathUtils._PROJECT_ROOT)

    @staticmethod
    def build(*segments: str) -> str:
        """Join *segments* under :meth:`base_path`, accepting ``/`` or ``\\`` separators.

        An absolute first segment is kept as the base instead.
        """
        if segments and segments[0] and os.path.isabs(segments[0]):
            return os.path.normpath(os.path.join(*segments))
        parts: List[str] = []
        for segment in segments:
            if segment:
                parts.extend(p for p in re.split(r"[\\/]", segment) if p.strip())
        return os.path.join(PathUtils.base_path(), *parts)
