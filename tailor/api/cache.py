"""
Resume Cache

Holds the most recently loaded resume and the source file's modification time.
Each API request goes through ResumeCache.get(), which only re-reads the file
when it changed on disk or a reload is forced.
"""

import threading
from pathlib import Path
from typing import Callable, Optional

from tailor.api.logger import _log_debug, _log_info
from tailor.contexts.content import Resume, load_resume
from tailor.exceptions import ResumeLoadError


class ResumeCache:
    """
    One-slot cache: {empty} -> {loaded(resume, mtime)}.

    The stat, reload and replacement run as one critical section under a
    single lock, so concurrent requests in a stale window reload once.

    Args:
        path: Resume source file
        loader: Function reading a Resume from a path (default: load_resume)
    """

    def __init__(self, path: Path, loader: Callable[[Path], Resume] = load_resume):
        self.path = Path(path)
        self._loader = loader
        self._lock = threading.Lock()
        self._resume: Optional[Resume] = None
        self._mtime_ns: Optional[int] = None

    def get(self, force_reload: bool = False) -> Resume:
        """
        Return the cached resume, reloading it when stale.

        Reloads when force_reload is set, nothing is cached yet, or the file's
        modification time is strictly after the cached one.

        Raises:
            ResumeLoadError: If the file cannot be stat'd or loaded
        """
        with self._lock:
            try:
                mtime_ns = self.path.stat().st_mtime_ns
            except OSError as e:
                raise ResumeLoadError(f"failed to stat resume file ({e.strerror})", self.path) from e

            if not force_reload and self._resume is not None and mtime_ns <= self._mtime_ns:
                _log_debug("Resume cache hit")
                return self._resume

            _log_info(f"Loading resume from {self.path}")
            resume = self._loader(self.path)

            self._resume = resume
            self._mtime_ns = mtime_ns
            return resume

    def clear(self) -> None:
        """Drop the cached resume."""
        with self._lock:
            self._resume = None
            self._mtime_ns = None

    @property
    def is_loaded(self) -> bool:
        return self._resume is not None
