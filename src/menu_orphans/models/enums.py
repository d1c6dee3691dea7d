from __future__ import annotations

from enum import StrEnum


class MenuItemType(StrEnum):
    CONTENT_REFERENCE = "content-reference"
    TERM_REFERENCE = "term-reference"
    CUSTOM_URL = "custom-url"
    OTHER = "other"


class ParentState(StrEnum):
    DANGLING = "dangling"
    MISSING = "missing"
    ORPHANED = "orphaned"


# WordPress nav_menu_item type names as exported by the site.
WP_ITEM_TYPES = {
    "post_type": MenuItemType.CONTENT_REFERENCE,
    "post_type_archive": MenuItemType.OTHER,
    "taxonomy": MenuItemType.TERM_REFERENCE,
    "custom": MenuItemType.CUSTOM_URL,
}

PUBLIC_STATUSES = frozenset({"published", "private"})
