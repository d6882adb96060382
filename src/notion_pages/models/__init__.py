"""Data models for blocks and page descriptions."""

from notion_pages.models.blocks import Block, BlockAttribute, BlockProperty, BlockType, TextRun
from notion_pages.models.page import ImageDescriptor, LinkedPageDescriptor, PageDescription

__all__ = [
    "Block",
    "BlockAttribute",
    "BlockProperty",
    "BlockType",
    "TextRun",
    "ImageDescriptor",
    "LinkedPageDescriptor",
    "PageDescription",
]
