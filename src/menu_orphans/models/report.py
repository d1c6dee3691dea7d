from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from menu_orphans.models.enums import ParentState
from menu_orphans.models.menu import MenuItemModel, MenuModel


class MissingTargetRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    menu: MenuModel
    item: MenuItemModel
    reason: str


class OrphanChildRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    menu: MenuModel
    item: MenuItemModel
    parent_id: int
    parent_state: ParentState
    reason: str


class SuspiciousCustomUrlRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    menu: MenuModel
    item: MenuItemModel
    reason: str


class MenuStatsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    menu: MenuModel
    total: int
    missing: int
    orphans: int
    suspicious: int


class ReportModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str
    total_menus: int = 0
    total_items: int = 0
    missing_items: tuple[MissingTargetRow, ...] = ()
    orphan_children: tuple[OrphanChildRow, ...] = ()
    suspicious_custom: tuple[SuspiciousCustomUrlRow, ...] = ()
    menus: tuple[MenuStatsModel, ...] = ()

    @property
    def finding_count(self) -> int:
        return (
            len(self.missing_items)
            + len(self.orphan_children)
            + len(self.suspicious_custom)
        )
