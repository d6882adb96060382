"""Page metadata: quote-block parsing and merging over page defaults.

A page may define its metadata in its first quote block, one ``key: value``
pair per line:

    slug: my-first-post
    date: 2019-05-12 10:30
    draft: false
    tags: python, notion

Dates must be ISO-8601 (``2019-05-12``, ``2019-05-12 10:30``,
``2019-05-12T10:30:00+02:00``). Forms such as ``2019/05/12`` or
``May 12, 2019`` are rejected with MetaDateError.

Parsing is permissive: lines that are not key/value pairs are skipped. The
parsed mapping becomes a typed ``PageMeta`` which ``merge_meta`` applies on
top of ``PageDefaults``.
"""

import re
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from notion_pages.errors import MetaDateError
from notion_pages.models.blocks import TextRun
from notion_pages.notion.text import text_runs_to_string

_META_LINE_PATTERN = re.compile(r"^\s*([A-Za-z0-9_-]+)\s*:(.*)$")


def parse_meta_block(text_runs: list[TextRun], out: dict[str, str]) -> bool:
    """Parse ``key: value`` lines from rich text into ``out``.

    Keys are lower-cased, values trimmed, and a repeated key overwrites the
    earlier value. Returns True if at least one pair was recognized. Never
    raises.
    """
    found = False
    for line in text_runs_to_string(text_runs).splitlines():
        m = _META_LINE_PATTERN.match(line)
        if m is None:
            continue
        out[m.group(1).lower()] = m.group(2).strip()
        found = True
    return found


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as ISO-8601 UTC with milliseconds, e.g. 2019-05-12T10:30:00.000Z."""
    value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def parse_meta_date(value: str) -> str:
    """Convert a metadata date to a timestamp string.

    Naive dates and date-times are read as UTC; explicit offsets are
    converted to UTC. Raises MetaDateError when the text is not ISO-8601
    or falls outside the representable range once converted to UTC.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise MetaDateError(value) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return format_timestamp(parsed)
    except OverflowError as exc:
        raise MetaDateError(value) from exc


class PageMeta(BaseModel):
    """Metadata fields a page can override. None means not set."""

    slug: str | None = None
    date: str | None = None
    draft: str | None = None
    tags: str | None = None

    @classmethod
    def from_mapping(cls, meta: dict[str, str]) -> "PageMeta":
        """Pick the known keys out of a parsed mapping. Empty values count as unset."""
        return cls(**{name: meta[name] for name in cls.model_fields if meta.get(name)})


class PageDefaults(BaseModel):
    """Values a page gets when its metadata does not override them."""

    model_config = ConfigDict(frozen=True)

    slug: str
    created_at: str
    is_draft: bool = False
    tags: tuple[str, ...] = ()

    @classmethod
    def for_index(cls, index_page: int, now: datetime | None = None) -> "PageDefaults":
        """Defaults for the page at ``index_page``: positional slug, current time."""
        return cls(
            slug=str(index_page),
            created_at=format_timestamp(now or datetime.now(timezone.utc)),
        )


def parse_draft(value: str) -> bool:
    """``false`` and ``0`` (any case) mean not a draft; anything else means draft."""
    return value.lower() not in ("false", "0")


def parse_tags(value: str) -> tuple[str, ...]:
    """Split a comma-separated list. Segments are trimmed, empty ones are kept."""
    return tuple(tag.strip() for tag in value.strip().split(","))


def merge_meta(defaults: PageDefaults, meta: PageMeta) -> PageDefaults:
    """Return ``defaults`` with every field set in ``meta`` applied.

    Pure: neither argument is modified. Raises MetaDateError if ``meta.date``
    is set but not a valid date.
    """
    updates: dict = {}
    if meta.slug:
        updates["slug"] = meta.slug
    if meta.date:
        updates["created_at"] = parse_meta_date(meta.date)
    if meta.draft:
        updates["is_draft"] = parse_draft(meta.draft)
    if meta.tags:
        updates["tags"] = parse_tags(meta.tags)
    return defaults.model_copy(update=updates)
