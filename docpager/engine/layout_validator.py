"""
Layout Validator - checks a pagination result against the packing invariants.

Checks:
- at least one page exists
- pages are numbered 1..N
- page blocks concatenate to the segmented document (no loss, duplication, reordering)
- pages with two or more blocks stay within capacity
- overflowing pages hold exactly one block
- the placeholder page only appears alone, for an empty document
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.block import BlockNode
from ..models.page import PaginationResult

# Absorbs float noise when summing heights
HEIGHT_TOLERANCE = 1e-6


class LayoutValidator:
    """Layout validator - checks integrity of a ``PaginationResult``."""

    def __init__(self, result: PaginationResult, document: Optional[Sequence[BlockNode]] = None):
        """
        Args:
            result: Result to validate
            document: Segmented blocks the result was packed from (enables the coverage check)
        """
        self.result = result
        self.document = list(document) if document is not None else None
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> Tuple[bool, List[str], List[str]]:
        """
        Runs all checks.

        Returns:
            Tuple (is_valid, errors, warnings)
        """
        self.errors.clear()
        self.warnings.clear()

        self._validate_pages_exist()
        self._validate_numbering()
        self._validate_coverage()
        self._validate_capacity()
        self._validate_placeholder()

        return not self.errors, self.errors.copy(), self.warnings.copy()

    def _validate_pages_exist(self) -> None:
        if not self.result.pages:
            self.errors.append("Result contains no pages")

    def _validate_numbering(self) -> None:
        for index, page in enumerate(self.result.pages, start=1):
            if page.number != index:
                self.errors.append(f"Page at position {index} is numbered {page.number}")

    def _validate_coverage(self) -> None:
        if self.document is None:
            return
        packed = list(self.result.blocks)
        if len(packed) != len(self.document):
            self.errors.append(
                f"Pages hold {len(packed)} blocks but the document has {len(self.document)}"
            )
            return
        for index, (packed_block, document_block) in enumerate(zip(packed, self.document)):
            if packed_block is not document_block:
                self.errors.append(f"Block {index} is out of document order")
                return

    def _validate_capacity(self) -> None:
        capacity = self.result.capacity
        for page in self.result.pages:
            if page.height <= capacity + HEIGHT_TOLERANCE:
                continue
            if len(page) > 1:
                self.errors.append(
                    f"Page {page.number} holds {len(page)} blocks totalling "
                    f"{page.height:.2f}px over capacity {capacity:.2f}px"
                )
            else:
                self.warnings.append(
                    f"Page {page.number}: single block of {page.height:.2f}px overflows "
                    f"capacity {capacity:.2f}px"
                )

    def _validate_placeholder(self) -> None:
        placeholders = [page for page in self.result.pages if page.is_placeholder]
        if not placeholders:
            return
        if len(self.result.pages) != 1:
            self.errors.append("Placeholder page mixed with document pages")
        if self.document:
            self.errors.append("Placeholder page emitted for a non-empty document")

    def get_summary(self) -> Dict[str, Any]:
        is_valid, errors, warnings = self.validate()
        return {
            "is_valid": is_valid,
            "total_pages": self.result.page_count,
            "total_blocks": len(self.result.blocks),
            "overflowing_pages": sum(
                1 for page in self.result.pages if page.is_overflowing(self.result.capacity)
            ),
            "errors": errors,
            "warnings": warnings,
        }
