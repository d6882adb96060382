"""Page assembler: loaded block tree -> PageDescription.

Walks the direct children of a page once, in document order, and collects
what the site generator needs besides the blocks themselves:

- ``page`` children become linked pages
- the first non-empty ``text`` child becomes the excerpt
- the first ``quote`` child is tried as the metadata block
- ``image`` children become image descriptors
- ``ignore`` children are skipped

Metadata values (slug, date, draft, tags) override positional defaults.
"""

import logging
from datetime import datetime

from notion_pages.config import get_settings
from notion_pages.errors import MetaDateError, PageRetrievalError, PageValidationError
from notion_pages.models.blocks import Block, BlockType
from notion_pages.models.page import ImageDescriptor, LinkedPageDescriptor, PageDescription
from notion_pages.notion.loader import PageLoader, Reporter
from notion_pages.notion.meta import PageDefaults, PageMeta, merge_meta, parse_meta_block
from notion_pages.notion.text import get_attribute_as_string, get_property_as_string, get_property_text

logger = logging.getLogger(__name__)


async def load_page(
    page_id: str,
    root_page_id: str,
    index_page: int,
    loader: PageLoader,
    reporter: Reporter,
    *,
    strict_dates: bool | None = None,
    now: datetime | None = None,
) -> PageDescription:
    """Load a page through ``loader`` and describe it.

    Args:
        page_id: Page to describe.
        root_page_id: Page whose renderable blocks fill ``blocks``.
        index_page: Position among sibling pages, the default slug.
        loader: Source of the block tree.
        reporter: Receives errors before they are raised.
        strict_dates: Raise on an invalid metadata date instead of keeping
            the default. Defaults to ``Settings.strict_meta_dates``.
        now: Default creation time, current UTC time if omitted.

    Raises:
        PageRetrievalError: The page or one of its children is not in the loader.
        PageValidationError: ``page_id`` does not resolve to a page block.
        MetaDateError: Invalid metadata date with ``strict_dates``.
    """
    await loader.load_page(page_id)

    page = loader.get_block_by_id(page_id)
    if page is None:
        reporter.error(f"could not retrieve page with id: {page_id}")
        raise PageRetrievalError(page_id, "error retrieving page")

    if page.type != BlockType.PAGE:
        reporter.error(f"block {page_id} is not a page (type: {page.type})")
        raise PageValidationError(page_id, page.type)

    images: list[ImageDescriptor] = []
    linked_pages: list[LinkedPageDescriptor] = []
    meta_claimed = False
    meta: dict[str, str] = {}
    meta_block: Block | None = None
    excerpt = ""

    for block_id in page.block_ids:
        block = loader.get_block_by_id(block_id)
        if block is None:
            reporter.error(f"could not retrieve block with id: {block_id}")
            raise PageRetrievalError(block_id, "error retrieving paragraph")

        if block.type == BlockType.PAGE:
            linked_pages.append(
                LinkedPageDescriptor(
                    page_id=block.block_id,
                    title=get_property_as_string(block, "title"),
                )
            )
        elif block.type == BlockType.TEXT:
            if not excerpt:
                excerpt = get_property_as_string(block, "title").strip()
        elif block.type == BlockType.QUOTE:
            # only the first quote is a metadata candidate, parsed or not
            if not meta_claimed:
                meta_claimed = True
                text = get_property_text(block, "title")
                if text and parse_meta_block(text, meta):
                    meta_block = block.model_copy(update={"type": BlockType.META.value}, deep=True)
        elif block.type == BlockType.IMAGE:
            images.append(
                ImageDescriptor(
                    page_id=page_id,
                    notion_url=get_property_as_string(block, "source"),
                    signed_url="",
                    content_id=block.block_id,
                )
            )
        # ignore and unknown types have nothing to collect

    fields = PageDefaults.for_index(index_page, now)
    if meta_block is not None:
        fields = _apply_meta(fields, PageMeta.from_mapping(meta), page_id, reporter, strict_dates)

    item = PageDescription(
        page_id=page_id,
        title=get_property_as_string(page, "title"),
        index_page=index_page,
        slug=fields.slug,
        created_at=fields.created_at,
        tags=list(fields.tags),
        is_draft=fields.is_draft,
        excerpt=excerpt,
        page_icon=get_attribute_as_string(page, "pageIcon"),
        images=images,
        linked_pages=linked_pages,
    )
    loader.get_blocks(item.blocks, root_page_id)
    if meta_block is not None:
        item.blocks = [meta_block if b.block_id == meta_block.block_id else b for b in item.blocks]

    logger.info(
        "Assembled page %s: slug=%s images=%d linked_pages=%d",
        page_id,
        item.slug,
        len(images),
        len(linked_pages),
    )
    return item


def _apply_meta(
    defaults: PageDefaults,
    meta: PageMeta,
    page_id: str,
    reporter: Reporter,
    strict_dates: bool | None,
) -> PageDefaults:
    """Merge metadata, handling an invalid date according to the date policy."""
    if strict_dates is None:
        strict_dates = get_settings().strict_meta_dates
    try:
        return merge_meta(defaults, meta)
    except MetaDateError as exc:
        if strict_dates:
            reporter.error(f"page {page_id}: {exc}")
            raise
        reporter.warning(f"page {page_id}: {exc}, keeping {defaults.created_at}")
        return merge_meta(defaults, meta.model_copy(update={"date": None}))
