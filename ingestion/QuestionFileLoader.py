# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Description: QuestionFileLoader
# -----------------------------------------------------------------------------
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import settings
from utility.logging_utils import get_class_logger


class NoSourceFound(FileNotFoundError):
    """Raised when no question JSON file can be located."""


class InvalidSource(ValueError):
    """Raised when the question source is not a JSON array."""


class QuestionFileLoader:
    """
    Locates and reads the question JSON file used for bulk ingestion.

    Provides:
      - resolve(): explicit locator, or first existing conventional location
      - load(): parse the file and check it is a list of records
    """

    def __init__(
            self,
            *,
            base_dir: str | Path | None = None,
            candidates: Optional[Sequence[str]] = None,
            logger: logging.Logger | None = None,
    ):
        self._base_dir = Path(base_dir) if base_dir else None
        self.candidates = list(candidates) if candidates is not None else list(settings.SOURCE_CANDIDATES)
        self.logger = logger or get_class_logger(self.__class__)

    @property
    def base_dir(self) -> Path:
        if self._base_dir is not None:
            return self._base_dir
        if settings.SOURCE_BASE_DIR:
            return Path(settings.SOURCE_BASE_DIR)
        return Path.cwd()

    def resolve(self, source_locator: str | None = None) -> Path:
        if source_locator:
            root = self.base_dir.resolve()
            path = (root / source_locator).resolve()
            if not path.is_relative_to(root):
                self.logger.error("Source locator escapes base directory: %s", source_locator)
                raise NoSourceFound(f"Source locator must stay under {root}: {source_locator}")
            if not path.is_file():
                self.logger.error("Source file not found: %s", path)
                raise NoSourceFound(f"No JSON file found at: {path}")
            return path

        tried: List[str] = []
        for candidate in self.candidates:
            path = self.base_dir / candidate
            tried.append(str(path))
            if path.is_file():
                self.logger.info("Found JSON file at: %s", path)
                return path

        self.logger.error("No JSON file found. Tried: %s", ", ".join(tried))
        raise NoSourceFound("No JSON file found. Tried: " + ", ".join(tried))

    def load(self, path: Path) -> List[Dict[str, Any]]:
        start_time = time.time()
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidSource(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, list):
            raise InvalidSource("JSON data must be an array of questions")

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.info("Found %d questions in JSON (%.1f ms)", len(data), elapsed)
        return data

    def load_records(self, source_locator: str | None = None) -> List[Dict[str, Any]]:
        return self.load(self.resolve(source_locator))
