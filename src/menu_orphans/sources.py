from __future__ import annotations

"""Collaborator interfaces consumed by the classifier.

A ``MenuLoader`` supplies menus and their ordered items; a ``ContentResolver``
answers existence and status questions about content, terms and URLs. Both are
read-only. Lookups that fail raise ``ResolverError`` or whatever the backend raises
(connection errors, timeouts); the classifier treats those as "not found".
"""

import logging
from typing import Protocol

from menu_orphans.models.menu import MenuItemModel, MenuModel

LOGGER = logging.getLogger(__name__)


class ResolverError(LookupError):
    pass


class MenuLoader(Protocol):
    def list_menus(self) -> list[MenuModel]: ...

    def list_items(self, menu_id: int) -> list[MenuItemModel]: ...


class ContentResolver(Protocol):
    def get_content_status(self, content_id: int) -> str | None: ...

    def get_term(self, term_id: int, taxonomy: str) -> bool: ...

    def resolve_url_to_content_id(self, url: str) -> int | None: ...

    def site_base_url(self) -> str: ...


class CachingResolver:
    """Per-scan memo around a ``ContentResolver``.

    Lookup errors are converted to "not found" here, so the classifier only
    ever sees plain values.
    """

    def __init__(self, inner: ContentResolver) -> None:
        self.inner = inner
        self._statuses: dict[int, str | None] = {}
        self._terms: dict[tuple[int, str], bool] = {}
        self._urls: dict[str, int | None] = {}
        self._base_url: str | None = None

    def get_content_status(self, content_id: int) -> str | None:
        if content_id not in self._statuses:
            try:
                status = self.inner.get_content_status(content_id)
            except Exception as exc:
                LOGGER.warning(
                    "content %s lookup failed: %s", content_id, exc, exc_info=True
                )
                status = None
            self._statuses[content_id] = status or None
        return self._statuses[content_id]

    def get_term(self, term_id: int, taxonomy: str) -> bool:
        key = (term_id, taxonomy)
        if key not in self._terms:
            try:
                found = bool(self.inner.get_term(term_id, taxonomy))
            except Exception as exc:
                LOGGER.warning(
                    "term %s/%s lookup failed: %s",
                    taxonomy,
                    term_id,
                    exc,
                    exc_info=True,
                )
                found = False
            self._terms[key] = found
        return self._terms[key]

    def resolve_url_to_content_id(self, url: str) -> int | None:
        if url not in self._urls:
            try:
                content_id = self.inner.resolve_url_to_content_id(url)
            except Exception as exc:
                LOGGER.warning(
                    "url %s resolution failed: %s", url, exc, exc_info=True
                )
                content_id = None
            self._urls[url] = content_id or None
        return self._urls[url]

    def site_base_url(self) -> str:
        if self._base_url is None:
            self._base_url = self.inner.site_base_url().strip().rstrip("/")
        return self._base_url
