# src/uplugin_builder/services/version_detector.py
import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterator

from uplugin_builder.config import VERSION_DIR_PATTERN

logger = logging.getLogger(__name__)


class VersionDetectorService:
    """
    Finds the engine installations directly under an engine root, e.g. the
    "UE_5.2" and "UE_5.3" folders of an Epic Games install directory.
    """

    def __init__(self, pattern: str = VERSION_DIR_PATTERN):
        self.pattern = pattern.lower()

    def detect(self, engine_root: str | os.PathLike) -> Iterator[str]:
        """
        Yields the names of matching child directories, sorted by name
        (case-insensitive). Every call rescans the directory.

        A root that is missing, is not a directory or cannot be read yields nothing.
        """
        root = Path(engine_root)
        if not root.is_dir():
            logger.info(f"Engine root is not a directory: {root}")
            return

        try:
            entries = list(os.scandir(root))
        except OSError as e:
            logger.warning(f"Could not list engine root {root}: {e}")
            return

        names = sorted(
            (entry.name for entry in entries if self._matches(entry)),
            key=str.lower,
        )
        logger.info(f"Detected {len(names)} engine version(s) under {root}")
        yield from names

    def _matches(self, entry: os.DirEntry) -> bool:
        if not fnmatch.fnmatchcase(entry.name.lower(), self.pattern):
            return False
        try:
            return entry.is_dir()
        except OSError:
            return False
