from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from menu_orphans.models.enums import WP_ITEM_TYPES, MenuItemType


def _coerce_identifier(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
        return number if number > 0 else None
    return None


class MenuModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str
    slug: str


class MenuItemModel(BaseModel):
    """One navigation link entry.

    Identifiers that are missing, zero or not numeric are stored as ``None``;
    ``parent_id`` of ``None`` marks a top-level item.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    type: MenuItemType
    label: str = ""
    target_id: int | None = None
    taxonomy: str | None = None
    url: str | None = None
    parent_id: int | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> MenuItemType:
        if isinstance(value, MenuItemType):
            return value
        text = str(value or "").strip()
        if text in WP_ITEM_TYPES:
            return WP_ITEM_TYPES[text]
        try:
            return MenuItemType(text)
        except ValueError:
            return MenuItemType.OTHER

    @field_validator("target_id", "parent_id", mode="before")
    @classmethod
    def _normalize_identifier(cls, value: Any) -> int | None:
        return _coerce_identifier(value)

    @field_validator("taxonomy", mode="before")
    @classmethod
    def _normalize_taxonomy(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None
