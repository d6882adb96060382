"""Sourcing of a root page and all of its linked sub-pages.

The root page is described first with index 0; each page it links to is then
described in document order, its index being its 1-based position among the
root's linked pages. Pages are loaded one after another through the same
loader.
"""

import logging

from notion_pages.models.page import PageDescription
from notion_pages.notion.assembler import load_page
from notion_pages.notion.loader import PageLoader, Reporter

logger = logging.getLogger(__name__)


async def source_pages(
    root_page_id: str,
    loader: PageLoader,
    reporter: Reporter,
    *,
    strict_dates: bool | None = None,
) -> list[PageDescription]:
    """Describe ``root_page_id`` and every page it links to.

    Any page failing to assemble aborts the whole run: the error is raised
    and no descriptions are returned.
    """
    root = await load_page(root_page_id, root_page_id, 0, loader, reporter, strict_dates=strict_dates)
    pages = [root]

    for index, linked in enumerate(root.linked_pages, start=1):
        pages.append(
            await load_page(
                linked.page_id,
                linked.page_id,
                index,
                loader,
                reporter,
                strict_dates=strict_dates,
            )
        )

    drafts = sum(1 for p in pages if p.is_draft)
    logger.info("Sourced %d pages from %s (%d drafts)", len(pages), root_page_id, drafts)
    return pages
