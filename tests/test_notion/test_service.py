"""Tests for sourcing a root page and its linked pages."""

import pytest

from notion_pages.errors import PageRetrievalError
from notion_pages.models.blocks import Block, BlockProperty, TextRun
from notion_pages.notion.service import source_pages


def _block(block_id: str, type_: str, title: str = "", block_ids: list[str] | None = None) -> Block:
    return Block(
        block_id=block_id,
        type=type_,
        properties=[BlockProperty(prop_name="title", value=[TextRun(text=title)])],
        block_ids=block_ids or [],
    )


def _site() -> list[Block]:
    """Root page linking two posts; the second post overrides its slug."""
    return [
        _block("root", "page", "Blog", ["p1", "p2"]),
        _block("p1", "page", "First post", ["p1-t"]),
        _block("p2", "page", "Second post", ["p2-q", "p2-t"]),
        _block("p1-t", "text", "Hello from one"),
        _block("p2-q", "quote", "slug: second\ndraft: 0"),
        _block("p2-t", "text", "Hello from two"),
    ]


async def test_source_pages_in_order(make_loader, reporter):
    loader = make_loader(_site())
    pages = await source_pages("root", loader, reporter)

    assert [p.page_id for p in pages] == ["root", "p1", "p2"]
    assert [p.index_page for p in pages] == [0, 1, 2]
    assert [p.slug for p in pages] == ["0", "1", "second"]
    assert loader.loaded == ["root", "p1", "p2"]


async def test_source_pages_collects_page_content(make_loader, reporter):
    pages = await source_pages("root", make_loader(_site()), reporter)
    root, first, second = pages

    assert [lp.title for lp in root.linked_pages] == ["First post", "Second post"]
    assert first.excerpt == "Hello from one"
    assert second.excerpt == "Hello from two"
    assert [b.type for b in second.blocks] == ["_meta", "text"]


async def test_source_pages_aborts_on_failure(make_loader, reporter):
    blocks = [b for b in _site() if b.block_id != "p2-t"]
    with pytest.raises(PageRetrievalError):
        await source_pages("root", make_loader(blocks), reporter)
    assert len(reporter.errors) == 1
