"""Intrinsic image dimensions for block measurement (Pillow)."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from pathlib import Path
from typing import Dict, Optional, Tuple
from urllib.parse import unquote, urlparse

from PIL import Image, UnidentifiedImageError

from ..models.block import BlockNode
from ..utils.units import parse_length

logger = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<header>[^,]*),(?P<data>.*)$", re.DOTALL)

ImageSize = Tuple[float, float]


class ImageMetrics:
    """

    Reads intrinsic image sizes from data URIs or local files.

    Only the image header is decoded. Results are cached by source string for
    the lifetime of the instance. Remote URLs are not fetched.

    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir else None
        self._cache: Dict[str, Optional[ImageSize]] = {}

    def intrinsic_size(self, src: Optional[str]) -> Optional[ImageSize]:
        if not src:
            return None
        if src not in self._cache:
            self._cache[src] = self._read_size(src)
        return self._cache[src]

    def _read_size(self, src: str) -> Optional[ImageSize]:
        stream = self._open_source(src)
        if stream is None:
            return None
        try:
            with Image.open(stream) as image:
                width, height = image.size
        except Image.DecompressionBombError as exc:
            logger.warning("Image %s too large to measure: %s", _short(src), exc)
            return None
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            logger.debug("Cannot read image size for %s: %s", _short(src), exc)
            return None
        if width <= 0 or height <= 0:
            return None
        return float(width), float(height)

    def _open_source(self, src: str):
        src = src.strip()
        if src.startswith("data:"):
            match = _DATA_URI_RE.match(src)
            if not match:
                logger.debug("Malformed data URI %s", _short(src))
                return None
            payload = match.group("data")
            is_base64 = match.group("header").lower().endswith(";base64")
            try:
                raw = base64.b64decode(payload) if is_base64 else unquote(payload).encode("latin-1")
            except (binascii.Error, ValueError, UnicodeEncodeError) as exc:
                logger.debug("Cannot decode data URI %s: %s", _short(src), exc)
                return None
            return io.BytesIO(raw)

        parsed = urlparse(src)
        if parsed.scheme in ("http", "https"):
            logger.debug("Remote image %s not measured", _short(src))
            return None
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(src)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        if not path.is_file():
            logger.debug("Image file not found: %s", path)
            return None
        return path

    def rendered_size(self, block: BlockNode, available_width: float) -> Optional[ImageSize]:
        """

        Size of an image laid out as ``display: block; max-width: N%; height: auto``.

        Args:
        block: Image block
        available_width: Width of the containing block in px

        Returns:
        (width, height) in px, or None when the size cannot be determined

        """
        intrinsic = self.intrinsic_size(block.get_attribute("src"))
        width_attr = parse_length(block.get_attribute("width"))
        height_attr = parse_length(block.get_attribute("height"))

        if intrinsic is not None:
            ratio = intrinsic[1] / intrinsic[0]
            width = width_attr or intrinsic[0]
        elif width_attr and height_attr:
            ratio = height_attr / width_attr
            width = width_attr
        else:
            return None

        max_fraction = block.style.max_width if block.style.max_width is not None else 1.0
        width = min(width, max(available_width, 0.0) * max_fraction)
        return width, width * ratio

    def clear(self) -> None:
        self._cache.clear()


def _short(src: str, limit: int = 48) -> str:
    return src if len(src) <= limit else src[:limit] + "..."
