from __future__ import annotations

"""Menu loader and content resolver backed by a JSON site snapshot."""

from dataclasses import dataclass, field
from pathlib import Path

from menu_orphans.models.menu import MenuItemModel, MenuModel
from menu_orphans.models.snapshot import SiteSnapshotModel
from menu_orphans.sources import ResolverError
from menu_orphans.util.io import read_json
from menu_orphans.util.urls import normalize_url, query_content_id


@dataclass
class SnapshotSource:
    snapshot: SiteSnapshotModel
    _statuses: dict[int, str] = field(init=False, repr=False)
    _terms: set[tuple[int, str]] = field(init=False, repr=False)
    _urls: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._statuses = {
            record.id: record.status for record in self.snapshot.contents
        }
        self._terms = {
            (record.id, record.taxonomy) for record in self.snapshot.terms
        }
        self._urls = {}
        for record in self.snapshot.contents:
            if record.url:
                self._urls.setdefault(normalize_url(record.url), record.id)

    @classmethod
    def from_path(cls, path: Path) -> "SnapshotSource":
        return cls(read_json(path, SiteSnapshotModel))

    def list_menus(self) -> list[MenuModel]:
        return [
            MenuModel(id=menu.id, name=menu.name, slug=menu.slug)
            for menu in self.snapshot.menus
        ]

    def list_items(self, menu_id: int) -> list[MenuItemModel]:
        for menu in self.snapshot.menus:
            if menu.id == menu_id:
                return list(menu.items)
        raise ResolverError(f"Unknown menu id: {menu_id}")

    def get_content_status(self, content_id: int) -> str | None:
        return self._statuses.get(content_id)

    def get_term(self, term_id: int, taxonomy: str) -> bool:
        return (term_id, taxonomy) in self._terms

    def resolve_url_to_content_id(self, url: str) -> int | None:
        content_id = query_content_id(url)
        if content_id is not None:
            return content_id
        return self._urls.get(normalize_url(url))

    def site_base_url(self) -> str:
        return self.snapshot.base_url
