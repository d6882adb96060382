"""Plain-text rendering of rich text and block value accessors.

Pure functions over already-loaded blocks. Formatting annotations are
dropped: only the run texts are concatenated.
"""

from notion_pages.models.blocks import Block, TextRun


def text_runs_to_string(runs: list[TextRun]) -> str:
    """Concatenate the text of each run, ignoring formatting."""
    return "".join(run.text for run in runs)


def get_property_text(block: Block, prop_name: str) -> list[TextRun] | None:
    """Return the rich-text runs of a named property, or None if the block has none."""
    for prop in block.properties:
        if prop.prop_name == prop_name:
            return prop.value
    return None


def get_property_as_string(block: Block, prop_name: str, default: str = "") -> str:
    """Return a named property rendered as plain text, or ``default`` if absent."""
    runs = get_property_text(block, prop_name)
    if runs is None:
        return default
    return text_runs_to_string(runs)


def get_attribute_as_string(block: Block, att_name: str, default: str = "") -> str:
    """Return a named attribute value; missing or empty values give ``default``."""
    for att in block.attributes:
        if att.att == att_name:
            return att.value or default
    return default
