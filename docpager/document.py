"""
Document sources: the editing-surface side of the controller contract.

``HtmlDocument`` keeps content in memory and notifies on every ``set_html``;
``FileDocument`` follows an HTML file on disk and notifies when ``poll``
sees it change.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from .engine.interfaces import ChangeCallback, Unsubscribe
from .exceptions import ParsingError
from .parser.html_parser import extract_text

logger = logging.getLogger(__name__)


class _Subscribers:
    def __init__(self) -> None:
        self._callbacks: List[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def notify(self) -> None:
        for callback in list(self._callbacks):
            callback()

    def __len__(self) -> int:
        return len(self._callbacks)


class HtmlDocument:
    """In-memory HTML document that fires a change notification per edit."""

    def __init__(self, html: str = ""):
        self._html = html
        self._subscribers = _Subscribers()

    @property
    def html(self) -> str:
        return self._html

    def set_html(self, html: str) -> None:
        """Replace the content and notify subscribers (once per committed change)."""
        self._html = html
        self._subscribers.notify()

    def get_content(self) -> str:
        return self._html

    def get_text(self) -> str:
        return extract_text(self._html)

    def subscribe(self, callback: ChangeCallback) -> Unsubscribe:
        return self._subscribers.subscribe(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"HtmlDocument(length={len(self._html)})"


class FileDocument:
    """HTML file on disk; ``poll()`` notifies subscribers when the file changes."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self._subscribers = _Subscribers()
        self._last_mtime: Optional[float] = None
        self._html = ""
        self._load()

    def _load(self) -> None:
        try:
            self._html = self.path.read_text(encoding=self.encoding)
            self._last_mtime = self.path.stat().st_mtime
        except OSError as exc:
            raise ParsingError(f"Cannot read document {self.path}", str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ParsingError(f"Document {self.path} is not valid {self.encoding}", str(exc)) from exc

    def poll(self) -> bool:
        """
        Reload the file if it changed since the last read.

        Returns:
            True if a change was detected and subscribers were notified
        """
        try:
            mtime = self.path.stat().st_mtime
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", self.path, exc)
            return False
        if mtime == self._last_mtime:
            return False
        self._load()
        logger.info("Document changed: %s", self.path)
        self._subscribers.notify()
        return True

    def get_content(self) -> str:
        return self._html

    def get_text(self) -> str:
        return extract_text(self._html)

    def subscribe(self, callback: ChangeCallback) -> Unsubscribe:
        return self._subscribers.subscribe(callback)

    def __repr__(self) -> str:
        return f"FileDocument({str(self.path)!r})"
