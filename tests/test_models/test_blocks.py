"""Tests for the block and page description models."""

import pytest
from pydantic import ValidationError

from notion_pages.models.blocks import Block, BlockType, TextRun
from notion_pages.models.page import PageDescription


def test_block_defaults():
    block = Block(block_id="b1", type="text")
    assert block.properties == []
    assert block.attributes == []
    assert block.block_ids == []


def test_block_type_compares_to_string():
    """Block.type is a plain string; BlockType members compare equal to it."""
    block = Block(block_id="b1", type="quote")
    assert block.type == BlockType.QUOTE
    assert BlockType.META.value == "_meta"


def test_block_accepts_unknown_type():
    assert Block(block_id="b1", type="bulleted_list").type == "bulleted_list"


def test_block_requires_id():
    with pytest.raises(ValidationError):
        Block(type="text")


def test_text_run_defaults():
    run = TextRun(text="hi")
    assert run.annotations == []
    assert run.href is None


def test_page_description_defaults():
    page = PageDescription(page_id="p", title="T", index_page=0, slug="0", created_at="2024-01-01T00:00:00.000Z")
    assert page.tags == []
    assert page.is_draft is False
    assert page.excerpt == ""
    assert page.page_icon == ""
    assert page.blocks == []
    assert page.images == []
    assert page.linked_pages == []


def test_page_description_lists_not_shared():
    a = PageDescription(page_id="a", title="", index_page=0, slug="0", created_at="")
    b = PageDescription(page_id="b", title="", index_page=1, slug="1", created_at="")
    a.blocks.append(Block(block_id="x", type="text"))
    assert b.blocks == []
