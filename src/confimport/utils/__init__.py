"""Utilities package."""

from confimport.utils.frontmatter import (
    Frontmatter,
    extract_frontmatter,
    resolve_aliases,
)
from confimport.utils.logging import setup_logging

__all__ = [
    "Frontmatter",
    "extract_frontmatter",
    "resolve_aliases",
    "setup_logging",
]
