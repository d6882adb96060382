"""Notion input: block loading, metadata parsing, and page assembly."""

from notion_pages.notion.assembler import load_page
from notion_pages.notion.client import get_notion_client, reset_client
from notion_pages.notion.loader import LoggingReporter, NotionApiLoader, PageLoader, Reporter
from notion_pages.notion.meta import PageDefaults, PageMeta, merge_meta, parse_meta_block
from notion_pages.notion.service import source_pages
from notion_pages.notion.text import text_runs_to_string

__all__ = [
    "get_notion_client",
    "load_page",
    "LoggingReporter",
    "merge_meta",
    "NotionApiLoader",
    "PageDefaults",
    "PageLoader",
    "PageMeta",
    "parse_meta_block",
    "Reporter",
    "reset_client",
    "source_pages",
    "text_runs_to_string",
]
