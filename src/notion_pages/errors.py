"""Exceptions raised while assembling page descriptions."""


class NotionPagesError(Exception):
    """Base class for all page assembly failures."""


class PageRetrievalError(NotionPagesError):
    """A page or one of its direct child blocks could not be found in the loader."""

    def __init__(self, block_id: str, message: str = "error retrieving block"):
        super().__init__(f"{message}: {block_id}")
        self.block_id = block_id


class PageValidationError(NotionPagesError):
    """The block resolved for a page id is not a page block."""

    def __init__(self, block_id: str, block_type: str):
        super().__init__(f"invalid page {block_id}: expected type 'page', got {block_type!r}")
        self.block_id = block_id
        self.block_type = block_type


class MetaDateError(NotionPagesError):
    """The ``date`` value of a metadata block is not a parseable date."""

    def __init__(self, value: str):
        super().__init__(f"invalid date in page metadata: {value!r}")
        self.value = value
