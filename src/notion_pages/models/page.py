"""Page description records handed to the site generator."""

from pydantic import BaseModel

from notion_pages.models.blocks import Block


class ImageDescriptor(BaseModel):
    """An image block found among a page's direct children."""

    page_id: str  # containing page
    notion_url: str  # source reference as given by Notion
    signed_url: str = ""  # filled in by a later signing stage
    content_id: str  # the image block's id


class LinkedPageDescriptor(BaseModel):
    """A sub-page block found among a page's direct children."""

    page_id: str
    title: str


class PageDescription(BaseModel):
    """Normalized description of one page, ready for page generation."""

    page_id: str
    title: str
    index_page: int  # position among sibling pages
    slug: str
    created_at: str  # ISO-8601 UTC, e.g. "2019-05-12T00:00:00.000Z"
    tags: list[str] = []
    is_draft: bool = False
    excerpt: str = ""
    page_icon: str = ""
    blocks: list[Block] = []
    images: list[ImageDescriptor] = []
    linked_pages: list[LinkedPageDescriptor] = []
