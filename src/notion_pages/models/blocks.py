"""Content block model shared by loaders and the page assembler."""

from enum import Enum

from pydantic import BaseModel


class BlockType(str, Enum):
    """Block types the page assembler gives special treatment to.

    ``Block.type`` is a plain string so loaders can pass through any other
    type (headings, lists, code...) for the rendering pass.
    """

    PAGE = "page"
    TEXT = "text"
    QUOTE = "quote"
    IMAGE = "image"
    IGNORE = "ignore"
    META = "_meta"  # quote block consumed as page metadata, never rendered


class TextRun(BaseModel):
    """One run of rich text with its formatting."""

    text: str
    annotations: list[str] = []  # e.g. ["b", "i"]
    href: str | None = None


class BlockProperty(BaseModel):
    """A named rich-text value on a block (title, source, caption...)."""

    prop_name: str
    value: list[TextRun] = []


class BlockAttribute(BaseModel):
    """A named plain string value on a block (pageIcon, format...)."""

    att: str
    value: str | None = None


class Block(BaseModel):
    """A node of the content tree."""

    block_id: str
    type: str
    properties: list[BlockProperty] = []
    attributes: list[BlockAttribute] = []
    block_ids: list[str] = []  # children, page blocks only
