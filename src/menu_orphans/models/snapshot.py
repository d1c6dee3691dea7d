from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from menu_orphans.models.menu import MenuItemModel


class ContentRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    status: str
    url: str | None = None
    title: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> str:
        text = str(value or "").strip()
        # WordPress stores the public status as "publish".
        return "published" if text == "publish" else text


class TermRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    taxonomy: str
    name: str | None = None


class SnapshotMenu(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    slug: str
    items: list[MenuItemModel] = Field(default_factory=list)


class SiteSnapshotModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str
    menus: list[SnapshotMenu] = Field(default_factory=list)
    contents: list[ContentRecord] = Field(default_factory=list)
    terms: list[TermRecord] = Field(default_factory=list)

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must be non-empty")
        return value

    @model_validator(mode="after")
    def _validate(self) -> "SiteSnapshotModel":
        menu_ids = [menu.id for menu in self.menus]
        if len(menu_ids) != len(set(menu_ids)):
            raise ValueError("menu id must be unique")
        for menu in self.menus:
            item_ids = [item.id for item in menu.items]
            if len(item_ids) != len(set(item_ids)):
                raise ValueError(f"menu item id must be unique within menu {menu.id}")
        content_ids = [record.id for record in self.contents]
        if len(content_ids) != len(set(content_ids)):
            raise ValueError("content id must be unique")
        return self
