"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from notion_pages.app import app
from notion_pages.models.blocks import Block


class FakeLoader:
    """In-memory PageLoader over a fixed set of blocks."""

    def __init__(self, blocks: list[Block]):
        self.blocks = {b.block_id: b for b in blocks}
        self.loaded: list[str] = []

    async def load_page(self, page_id: str) -> None:
        self.loaded.append(page_id)

    def get_block_by_id(self, block_id: str) -> Block | None:
        return self.blocks.get(block_id)

    def get_blocks(self, target: list[Block], root_id: str) -> None:
        root = self.blocks.get(root_id)
        if root is None:
            return
        for block_id in root.block_ids:
            block = self.blocks.get(block_id)
            if block is not None and block.type != "ignore":
                target.append(block)


class RecordingReporter:
    """Reporter keeping every message for assertions."""

    def __init__(self):
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def make_loader():
    """Factory building a FakeLoader from a list of blocks."""
    return FakeLoader


@pytest.fixture
def reporter() -> RecordingReporter:
    """A fresh reporter recording errors and warnings."""
    return RecordingReporter()
