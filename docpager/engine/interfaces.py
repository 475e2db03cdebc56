"""Contracts between the controller and its collaborators."""

from __future__ import annotations

from typing import Callable, Protocol, Union, runtime_checkable

from ..models.page import PaginationResult
from ..parser.html_parser import RawElement

ChangeCallback = Callable[[], None]
Unsubscribe = Callable[[], None]
DocumentContent = Union[str, RawElement, None]


@runtime_checkable
class DocumentSource(Protocol):
    """The editing surface, as seen by the pagination controller."""

    def get_content(self) -> DocumentContent:
        """Current content as HTML or a parsed element tree."""
        ...

    def get_text(self) -> str:
        """Current plain-text content (used for the word count)."""
        ...

    def subscribe(self, callback: ChangeCallback) -> Unsubscribe:
        """Call ``callback`` once per committed change; returns an unsubscribe function."""
        ...


@runtime_checkable
class RenderingSink(Protocol):
    """Receives each freshly packed page list."""

    def publish(self, result: PaginationResult) -> None:
        ...
