"""Block loading and reporting collaborators of the page assembler.

``PageLoader`` and ``Reporter`` are the interfaces the assembler depends on.
``NotionApiLoader`` implements ``PageLoader`` on the official Notion API and
maps its block vocabulary onto ``BlockType``; ``LoggingReporter`` forwards
reports to stdlib logging.
"""

import logging
from typing import Any, Protocol

from notion_client import AsyncClient

from notion_pages.models.blocks import Block, BlockAttribute, BlockProperty, BlockType, TextRun

logger = logging.getLogger(__name__)

# Notion API block type -> assembler block type; unlisted types pass through
_API_TYPE_MAP = {
    "paragraph": BlockType.TEXT.value,
    "child_page": BlockType.PAGE.value,
    "quote": BlockType.QUOTE.value,
    "image": BlockType.IMAGE.value,
    "unsupported": BlockType.IGNORE.value,
}

_ANNOTATION_CODES = {
    "bold": "b",
    "italic": "i",
    "strikethrough": "s",
    "underline": "_",
    "code": "c",
}

# Never handed to the rendering pass
_HIDDEN_TYPES = {BlockType.IGNORE.value}


class PageLoader(Protocol):
    """Fetches pages and serves their blocks by id."""

    async def load_page(self, page_id: str) -> None: ...

    def get_block_by_id(self, block_id: str) -> Block | None: ...

    def get_blocks(self, target: list[Block], root_id: str) -> None: ...


class Reporter(Protocol):
    """Sink for user-facing build errors and warnings."""

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class LoggingReporter:
    """Reporter writing to a stdlib logger."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def error(self, message: str) -> None:
        self._log.error(message)

    def warning(self, message: str) -> None:
        self._log.warning(message)


def _rich_text_to_runs(rich_text: list[dict]) -> list[TextRun]:
    """Convert Notion API rich_text objects to TextRuns."""
    runs = []
    for item in rich_text:
        annotations = item.get("annotations", {})
        runs.append(
            TextRun(
                text=item.get("plain_text", ""),
                annotations=[code for name, code in _ANNOTATION_CODES.items() if annotations.get(name)],
                href=item.get("href"),
            )
        )
    return runs


def _image_url(image: dict) -> str:
    """Return the URL of an image block payload, hosted ("file") or "external"."""
    source = image.get(image.get("type", ""), {})
    return source.get("url", "")


def block_from_api(data: dict[str, Any]) -> Block:
    """Convert one Notion API block object into a Block.

    The block's rich text becomes its ``title`` property; image URLs become
    its ``source`` property and child page titles its ``title``.
    """
    api_type = data["type"]
    payload = data.get(api_type, {})
    properties: list[BlockProperty] = []

    if api_type == "child_page":
        properties.append(BlockProperty(prop_name="title", value=[TextRun(text=payload.get("title", ""))]))
    elif api_type == "image":
        properties.append(BlockProperty(prop_name="source", value=[TextRun(text=_image_url(payload))]))
        if payload.get("caption"):
            properties.append(BlockProperty(prop_name="caption", value=_rich_text_to_runs(payload["caption"])))
    elif "rich_text" in payload:
        properties.append(BlockProperty(prop_name="title", value=_rich_text_to_runs(payload["rich_text"])))

    return Block(
        block_id=data["id"],
        type=_API_TYPE_MAP.get(api_type, api_type),
        properties=properties,
    )


def page_block_from_api(data: dict[str, Any], child_ids: list[str]) -> Block:
    """Convert a Notion API page object plus its child ids into a page Block."""
    title: list[TextRun] = []
    for prop in data.get("properties", {}).values():
        if prop.get("type") == "title":
            title = _rich_text_to_runs(prop.get("title", []))
            break

    attributes = []
    icon = data.get("icon") or {}
    if icon.get("type") == "emoji":
        attributes.append(BlockAttribute(att="pageIcon", value=icon["emoji"]))

    return Block(
        block_id=data["id"],
        type=BlockType.PAGE.value,
        properties=[BlockProperty(prop_name="title", value=title)],
        attributes=attributes,
        block_ids=child_ids,
    )


class NotionApiLoader:
    """PageLoader backed by the Notion API.

    Loaded blocks are kept in memory for the lifetime of the instance and
    looked up by the id used to load them.
    """

    def __init__(self, client: AsyncClient):
        self._client = client
        self._blocks: dict[str, Block] = {}

    async def load_page(self, page_id: str) -> None:
        """Fetch a page and its direct children. Lets APIResponseError propagate."""
        page = await self._client.pages.retrieve(page_id=page_id)
        children = await self._list_children(page_id)

        child_ids = []
        for data in children:
            block = block_from_api(data)
            self._blocks[block.block_id] = block
            child_ids.append(block.block_id)

        # keyed by the id as requested, which may differ in dashes from the API's
        self._blocks[page_id] = page_block_from_api(page, child_ids)
        logger.info("Loaded page %s with %d blocks", page_id, len(child_ids))

    async def _list_children(self, block_id: str) -> list[dict]:
        """Return all child block objects, following pagination cursors."""
        results: list[dict] = []
        cursor: str | None = None
        while True:
            params: dict[str, Any] = {"block_id": block_id}
            if cursor:
                params["start_cursor"] = cursor
            response = await self._client.blocks.children.list(**params)
            results.extend(response["results"])
            if not response.get("has_more"):
                break
            cursor = response.get("next_cursor")
        return results

    def get_block_by_id(self, block_id: str) -> Block | None:
        return self._blocks.get(block_id)

    def get_blocks(self, target: list[Block], root_id: str) -> None:
        """Append the renderable direct children of ``root_id`` to ``target``."""
        root = self._blocks.get(root_id)
        if root is None:
            return
        for block_id in root.block_ids:
            block = self._blocks.get(block_id)
            if block is not None and block.type not in _HIDDEN_TYPES:
                target.append(block)
