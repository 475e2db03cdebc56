"""Greedy line breaking over formatted text runs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..models.block import TextRun
from ..models.style import StyleRule
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

# Absorbs float noise when a line fills the width exactly
WIDTH_TOLERANCE = 0.01

_TOKEN_RE = re.compile(r"(\s+)")


@dataclass(slots=True)
class Word:
    fragments: List[Tuple[str, str]] = field(default_factory=list)
    width: float = 0.0
    space_before: float = 0.0

    @property
    def text(self) -> str:
        return "".join(fragment for fragment, _ in self.fragments)


@dataclass(slots=True)
class LineBreakResult:
    text: str
    width: float
    overflow: bool = False


class LineBreaker:
    """Simple greedy line breaker, the way a browser wraps ``white-space: normal`` text."""

    def __init__(self, metrics_engine: TextMetricsEngine) -> None:
        self.metrics_engine = metrics_engine

    def break_text(self, text: str, max_width: float, style: StyleRule) -> List[LineBreakResult]:
        return self.break_runs((TextRun(text),), max_width, style)

    def break_runs(self, runs: Sequence[TextRun], max_width: float, style: StyleRule) -> List[LineBreakResult]:
        """
        Wrap runs into lines no wider than ``max_width``.

        Hard breaks start a new line; a trailing hard break adds no line, and
        text without any words and breaks produces no lines at all.
        """
        segments: List[List[TextRun]] = [[]]
        for run in runs:
            if run.is_break:
                segments.append([])
            else:
                segments[-1].append(run)

        if len(segments) > 1 and not any(run.text.strip() for run in segments[-1]):
            segments.pop()

        lines: List[LineBreakResult] = []
        for segment in segments:
            words = self._words(segment, style)
            if not words:
                if len(segments) > 1:
                    lines.append(LineBreakResult(text="", width=0.0))
                continue
            lines.extend(self._wrap(words, max_width))
        return lines

    def _words(self, runs: Sequence[TextRun], style: StyleRule) -> List[Word]:
        font_size = style.font_size_px
        words: List[Word] = []
        current = Word()
        pending_space = 0.0
        for run in runs:
            font_name = self.metrics_engine.font_name(style, run.bold, run.italic)
            for token in _TOKEN_RE.split(run.text):
                if not token:
                    continue
                if token.isspace():
                    if current.fragments:
                        words.append(current)
                        current = Word()
                    pending_space = self.metrics_engine.string_width(" ", font_name, font_size)
                    continue
                if not current.fragments:
                    current.space_before = pending_space
                current.fragments.append((token, font_name))
                current.width += self.metrics_engine.string_width(token, font_name, font_size)
        if current.fragments:
            words.append(current)
        return words

    def _wrap(self, words: List[Word], max_width: float) -> List[LineBreakResult]:
        lines: List[LineBreakResult] = []
        line_words: List[Word] = []
        line_width = 0.0

        for word in words:
            if not line_words:
                line_words, line_width = [word], word.width
                continue
            candidate = line_width + word.space_before + word.width
            if candidate <= max_width + WIDTH_TOLERANCE:
                line_words.append(word)
                line_width = candidate
                continue
            lines.append(self._line(line_words, line_width, max_width))
            line_words, line_width = [word], word.width

        if line_words:
            lines.append(self._line(line_words, line_width, max_width))
        return lines

    @staticmethod
    def _line(words: List[Word], width: float, max_width: float) -> LineBreakResult:
        overflow = width > max_width + WIDTH_TOLERANCE
        if overflow:
            logger.debug("Word wider than the line (%.1f > %.1f px) left unbroken", width, max_width)
        return LineBreakResult(text=" ".join(word.text for word in words), width=width, overflow=overflow)
