# boekhouding/services/sheets.py
from __future__ import annotations

import re
import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from boekhouding.config import get_settings
from boekhouding.config.settings import SHEET_EXTENSION
from boekhouding.logging_setup import get_logger

log = get_logger(__name__)

_NOT_SLUG = re.compile(r"[^a-z0-9_-]")


def sanitize_slug(slug: Any) -> Optional[str]:
    """
    Strips everything outside [a-z0-9_-]. No case folding, so "Q1" becomes "1".
    Returns None when nothing is left.
    """
    if not isinstance(slug, str):
        return None
    clean = _NOT_SLUG.sub("", slug)
    return clean or None


class SheetRepository:
    """One flat file per sanitized slug. Writes replace the whole file."""

    def __init__(self, directory: Path, extension: str = SHEET_EXTENSION):
        self.directory = Path(directory)
        self.extension = extension
        self._lock = threading.Lock()

    def path_for(self, slug: Any) -> Optional[Path]:
        clean = sanitize_slug(slug)
        if clean is None:
            return None
        return self.directory / f"{clean}{self.extension}"

    def load(self, slug: Any) -> Optional[str]:
        path = self.path_for(slug)
        if path is None:
            return None
        try:
            # newline="" keeps \r\n untouched
            with path.open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, ValueError):
            log.error("Error reading sheet %s", path, exc_info=True)
            return None

    def save(self, slug: Any, html: Any) -> bool:
        path = self.path_for(slug)
        if path is None:
            log.warning("Rejected sheet save for invalid slug %r", slug)
            return False
        content = "" if html is None else (html if isinstance(html, str) else str(html))
        with self._lock:
            try:
                self.directory.mkdir(parents=True, exist_ok=True)
                with path.open("w", encoding="utf-8", newline="") as f:
                    f.write(content)
            except OSError:
                log.error("Error writing sheet %s", path, exc_info=True)
                return False
        log.debug("Saved sheet %s (%d chars)", path.name, len(content))
        return True


@lru_cache()
def get_sheets() -> SheetRepository:
    """Process-wide repository (FastAPI dependency)."""
    return SheetRepository(get_settings().sheets_dir)
