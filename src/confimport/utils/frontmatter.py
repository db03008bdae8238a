"""Shared utilities for frontmatter documents (skills, agents)."""

import re
from dataclasses import dataclass, field

FRONTMATTER_DELIMITER = "---"

# Canonical key -> accepted spellings, in order of preference.
KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "allowed-tools": ("allowed-tools", "allowedTools"),
    "skill-type": ("skill-type", "skillType"),
    "disable-model-invocation": (
        "disable-model-invocation",
        "disableModelInvocation",
    ),
    "argument-hint": ("argument-hint", "argumentHint"),
    "permission-mode": ("permission-mode", "permissionMode"),
}

_COMMA_SEPARATOR = re.compile(r",")
_COMMA_OR_SPACE_SEPARATOR = re.compile(r"[,\s]+")
_UNWRITABLE_VALUE = re.compile(r"[\r\n]|---")


@dataclass(frozen=True)
class Frontmatter:
    """Metadata block and trailing body of a document."""

    metadata: dict[str, str] = field(default_factory=dict)
    body: str = ""


def extract_frontmatter(text: str) -> Frontmatter | None:
    """
    Split a ``---`` delimited metadata block from the document body.

    Only flat ``key: value`` lines are understood. Lines without a colon, or
    whose key or value is empty, are skipped.

    Args:
        text: Raw document text

    Returns:
        Frontmatter, or None when the text has no complete metadata block
    """
    trimmed = text.strip()
    if not trimmed.startswith(FRONTMATTER_DELIMITER):
        return None

    start = len(FRONTMATTER_DELIMITER)
    end = trimmed.find(FRONTMATTER_DELIMITER, start)
    if end == -1:
        return None

    metadata: dict[str, str] = {}
    for line in trimmed[start:end].split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key and value:
            metadata[key] = value

    body = trimmed[end + len(FRONTMATTER_DELIMITER) :].strip()
    return Frontmatter(metadata=metadata, body=body)


def resolve_aliases(metadata: dict[str, str]) -> dict[str, str]:
    """
    Fold hyphenated and camelCase spellings onto one canonical key.

    When both spellings are present the hyphenated one wins. Keys outside the
    alias table are copied unchanged.

    Args:
        metadata: Raw metadata as found in the document

    Returns:
        New dict keyed by canonical names
    """
    aliased = {spelling for spellings in KEY_ALIASES.values() for spelling in spellings}
    resolved = {key: value for key, value in metadata.items() if key not in aliased}

    for canonical, spellings in KEY_ALIASES.items():
        for spelling in spellings:
            if spelling in metadata:
                resolved[canonical] = metadata[spelling]
                break

    return resolved


def _split(value: str | None, separator: re.Pattern[str]) -> list[str] | None:
    if value is None:
        return None
    return [item.strip() for item in separator.split(value) if item.strip()]


def split_comma_list(value: str | None) -> list[str] | None:
    """Split ``a, b, c`` into items. None stays None."""
    return _split(value, _COMMA_SEPARATOR)


def split_tool_list(value: str | None) -> list[str] | None:
    """Split on runs of commas and/or whitespace (``Read, Write Edit``)."""
    return _split(value, _COMMA_OR_SPACE_SEPARATOR)


def render_frontmatter(fields: list[tuple[str, str | None]], body: str) -> str:
    """
    Build a document from ordered metadata fields and a markdown body.

    Fields whose value is None or empty are left out. A value must fit on one
    line and must not contain the delimiter, or it would not parse back.

    Args:
        fields: Ordered (key, value) pairs
        body: Markdown body content

    Returns:
        Document text ending in a newline

    Raises:
        ValueError: If a value contains a line break or the delimiter
    """
    for key, value in fields:
        if value and _UNWRITABLE_VALUE.search(value):
            raise ValueError(f"Cannot write {key}: value must be one line without '---'")
    lines = "".join(f"{key}: {value}\n" for key, value in fields if value)
    delimiter = FRONTMATTER_DELIMITER
    return f"{delimiter}\n{lines}{delimiter}\n\n{body.strip()}\n"
