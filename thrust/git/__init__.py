"""Git and autotag access."""

from .repository import GitRepository
from .tags import AutotagLister, TagEntry, TagLister, parse_tag_listing

__all__ = [
    "AutotagLister",
    "GitRepository",
    "TagEntry",
    "TagLister",
    "parse_tag_listing",
]
