from __future__ import annotations

import json
from pathlib import Path

from menu_orphans.models.enums import MenuItemType
from menu_orphans.models.menu import MenuItemModel, MenuModel
from menu_orphans.sources import ResolverError

BASE_URL = "https://site.test"


def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"


def load_fixture_json(name: str) -> dict:
    path = fixtures_dir() / name
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def make_item(item_id: int, item_type: MenuItemType | str, **fields) -> MenuItemModel:
    fields.setdefault("label", f"item {item_id}")
    return MenuItemModel(id=item_id, type=item_type, **fields)


class FakeResolver:
    def __init__(
        self,
        statuses: dict[int, str] | None = None,
        terms: set[tuple[int, str]] | None = None,
        urls: dict[str, int] | None = None,
        base_url: str = BASE_URL,
        failing: set[int] | None = None,
        error: type[Exception] = ResolverError,
    ) -> None:
        self.statuses = statuses or {}
        self.terms = terms or set()
        self.urls = urls or {}
        self.base_url = base_url
        self.failing = failing or set()
        self.error = error
        self.failing_urls: set[str] = set()
        self.status_calls: list[int] = []
        self.url_calls: list[str] = []

    def get_content_status(self, content_id: int) -> str | None:
        self.status_calls.append(content_id)
        if content_id in self.failing:
            raise self.error(f"backend down for {content_id}")
        return self.statuses.get(content_id)

    def get_term(self, term_id: int, taxonomy: str) -> bool:
        if term_id in self.failing:
            raise self.error(f"backend down for term {term_id}")
        return (term_id, taxonomy) in self.terms

    def resolve_url_to_content_id(self, url: str) -> int | None:
        self.url_calls.append(url)
        if url in self.failing_urls:
            raise self.error(f"backend down for {url}")
        return self.urls.get(url)

    def site_base_url(self) -> str:
        return self.base_url


class FakeLoader:
    def __init__(self, menus: list[tuple[MenuModel, list[MenuItemModel]]]) -> None:
        self.menus = menus
        self.broken: set[int] = set()

    def list_menus(self) -> list[MenuModel]:
        return [menu for menu, _ in self.menus]

    def list_items(self, menu_id: int) -> list[MenuItemModel]:
        if menu_id in self.broken:
            raise ResolverError(f"menu {menu_id} unavailable")
        for menu, items in self.menus:
            if menu.id == menu_id:
                return items
        return []
