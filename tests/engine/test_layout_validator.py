"""Tests for LayoutValidator."""

from docpager.engine.layout_validator import LayoutValidator
from docpager.engine.page_packer import PagePacker
from docpager.models.page import Page, PaginationResult


def result_for(pages, capacity=864.0):
    return PaginationResult(pages=tuple(pages), word_count=0, capacity=capacity)


class TestLayoutValidator:
    """Test cases for LayoutValidator."""

    def test_packed_result_is_valid(self, measured):
        items = measured(("A", 300), ("B", 300), ("C", 300), ("D", 1200))
        result = result_for(PagePacker(864).pack(items))

        is_valid, errors, warnings = LayoutValidator(result, [item.block for item in items]).validate()

        assert is_valid
        assert errors == []
        assert len(warnings) == 1
        assert "overflows" in warnings[0]

    def test_detects_multi_block_overflow(self, measured):
        items = measured(("A", 500), ("B", 500))
        result = result_for([Page(number=1, measured=tuple(items))])

        is_valid, errors, _ = LayoutValidator(result).validate()

        assert not is_valid
        assert "over capacity" in errors[0]

    def test_detects_bad_numbering(self, measured):
        first, second = measured(("A", 10), ("B", 10))
        result = result_for([Page(number=1, measured=(first,)), Page(number=3, measured=(second,))])

        is_valid, errors, _ = LayoutValidator(result).validate()

        assert not is_valid
        assert any("numbered 3" in error for error in errors)

    def test_detects_lost_block(self, measured):
        items = measured(("A", 10), ("B", 10))
        result = result_for([Page(number=1, measured=(items[0],))])

        is_valid, errors, _ = LayoutValidator(result, [item.block for item in items]).validate()

        assert not is_valid
        assert "document has 2" in errors[0]

    def test_detects_reordering(self, measured):
        items = measured(("A", 10), ("B", 10))
        result = result_for([Page(number=1, measured=(items[1], items[0]))])

        is_valid, errors, _ = LayoutValidator(result, [item.block for item in items]).validate()

        assert not is_valid
        assert "out of document order" in errors[0]

    def test_no_pages(self):
        is_valid, errors, _ = LayoutValidator(result_for([])).validate()

        assert not is_valid
        assert errors == ["Result contains no pages"]

    def test_placeholder_only_for_empty_document(self, measured):
        packer = PagePacker(864)
        empty = result_for(packer.pack([]))

        assert LayoutValidator(empty, []).validate()[0]

        items = measured(("A", 10))
        is_valid, errors, _ = LayoutValidator(empty, [item.block for item in items]).validate()
        assert not is_valid

    def test_summary(self, measured):
        result = result_for(PagePacker(864).pack(measured(("A", 900), ("B", 10))))

        summary = LayoutValidator(result).get_summary()

        assert summary["is_valid"]
        assert summary["total_pages"] == 2
        assert summary["total_blocks"] == 2
        assert summary["overflowing_pages"] == 1
