"""Tests for the cached Notion client."""

from unittest.mock import patch

from notion_pages.notion.client import get_notion_client, reset_client


@patch("notion_pages.notion.client.AsyncClient")
@patch("notion_pages.notion.client.get_settings")
async def test_client_created_once(mock_settings, mock_async_client):
    """The client is built from settings on first use and then reused."""
    reset_client()
    mock_settings.return_value.notion_api_key = "secret-key"

    first = await get_notion_client()
    second = await get_notion_client()

    assert first is second
    mock_async_client.assert_called_once_with(auth="secret-key")
    reset_client()


@patch("notion_pages.notion.client.AsyncClient")
@patch("notion_pages.notion.client.get_settings")
async def test_reset_client(mock_settings, mock_async_client):
    reset_client()
    await get_notion_client()
    reset_client()
    await get_notion_client()
    assert mock_async_client.call_count == 2
    reset_client()
