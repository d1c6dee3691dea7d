from __future__ import annotations

"""Orphan classification over navigation menus.

Every item goes through three checks: does its declared target still resolve,
does an internal custom URL look broken, and is its parent item missing or
broken. The checks return a reason string, empty when nothing is wrong, and
never raise on bad item data or failed lookups.

Custom URL findings are a best-effort guess. A URL that the resolver cannot
map to content is reported as suspicious, never as confirmed broken.
"""

from dataclasses import dataclass
from typing import Iterable
import logging

from menu_orphans.models.enums import PUBLIC_STATUSES, MenuItemType, ParentState
from menu_orphans.models.menu import MenuItemModel, MenuModel
from menu_orphans.models.report import (
    MenuStatsModel,
    MissingTargetRow,
    OrphanChildRow,
    ReportModel,
    SuspiciousCustomUrlRow,
)
from menu_orphans.sources import CachingResolver, ContentResolver, MenuLoader
from menu_orphans.util.assertx import ValidationError
from menu_orphans.util.logging import log_indent
from menu_orphans.util.urls import strip_base

LOGGER = logging.getLogger(__name__)

REASON_NO_IDENTIFIER = "no identifier recorded"
REASON_TARGET_GONE = "target no longer exists"
REASON_NO_TERM = "no term/taxonomy recorded"
REASON_TERM_GONE = "term no longer exists"
REASON_EMPTY_URL = "empty URL"
REASON_NON_PUBLIC = "resolves to a non-public target"
REASON_UNRESOLVED = "does not appear to resolve to any known target"


def status_reason(status: str) -> str:
    return f"target exists but has status {status}"


@dataclass(frozen=True)
class ParentVerdict:
    parent_id: int
    state: ParentState
    reason: str


def _guarded(resolver: ContentResolver) -> CachingResolver:
    if isinstance(resolver, CachingResolver):
        return resolver
    return CachingResolver(resolver)


def _site_base(base_url: str | None, resolver: CachingResolver) -> str:
    if base_url is not None:
        return base_url.strip().rstrip("/")
    return resolver.site_base_url()


def classify_target(item: MenuItemModel, resolver: ContentResolver) -> str:
    resolver = _guarded(resolver)
    if item.type == MenuItemType.CONTENT_REFERENCE:
        if not item.target_id:
            return REASON_NO_IDENTIFIER
        status = resolver.get_content_status(item.target_id)
        if status is None:
            return REASON_TARGET_GONE
        if status not in PUBLIC_STATUSES:
            return status_reason(status)
        return ""
    if item.type == MenuItemType.TERM_REFERENCE:
        if not item.target_id or not item.taxonomy:
            return REASON_NO_TERM
        if not resolver.get_term(item.target_id, item.taxonomy):
            return REASON_TERM_GONE
        return ""
    if item.type == MenuItemType.CUSTOM_URL:
        # Evaluated by classify_custom_url.
        return ""
    if item.type == MenuItemType.OTHER:
        return ""
    raise ValidationError(f"Unhandled menu item type: {item.type!r}")


def classify_custom_url(
    url: str | None,
    resolver: ContentResolver,
    base_url: str | None = None,
) -> str:
    resolver = _guarded(resolver)
    url = (url or "").strip()
    if not url:
        return REASON_EMPTY_URL

    relative = strip_base(url, _site_base(base_url, resolver))
    if not relative:
        # External URL or the site root.
        return ""

    content_id = resolver.resolve_url_to_content_id(url)
    if content_id is None:
        return REASON_UNRESOLVED
    if resolver.get_content_status(content_id) in PUBLIC_STATUSES:
        return ""
    return REASON_NON_PUBLIC


def classify_parent(
    item: MenuItemModel,
    index: dict[int, MenuItemModel],
    resolver: ContentResolver,
    chain_parents: bool = False,
) -> ParentVerdict | None:
    """Check the parent of ``item`` within its own menu.

    Only the immediate parent is inspected unless ``chain_parents`` is set, in
    which case a parent that is itself an orphan child also counts.
    """
    if not item.parent_id:
        return None
    resolver = _guarded(resolver)
    parent_id = item.parent_id
    parent = index.get(parent_id)
    if parent is None:
        return ParentVerdict(
            parent_id=parent_id,
            state=ParentState.DANGLING,
            reason=f"parent item {parent_id} is not in this menu",
        )
    parent_reason = classify_target(parent, resolver)
    if parent_reason:
        return ParentVerdict(
            parent_id=parent_id,
            state=ParentState.MISSING,
            reason=(
                f"parent item {parent_id} points at missing content: {parent_reason}"
            ),
        )
    if not chain_parents:
        return None

    seen = {item.id, parent.id}
    ancestor = parent
    while ancestor.parent_id and ancestor.parent_id not in seen:
        upper = index.get(ancestor.parent_id)
        if upper is None or classify_target(upper, resolver):
            return ParentVerdict(
                parent_id=parent_id,
                state=ParentState.ORPHANED,
                reason=f"parent item {parent_id} is itself an orphan",
            )
        seen.add(upper.id)
        ancestor = upper
    return None


def _select_menus(
    menus: list[MenuModel], menu_slugs: Iterable[str] | None
) -> list[MenuModel]:
    if not menu_slugs:
        return menus
    wanted = set(menu_slugs)
    return [menu for menu in menus if menu.slug in wanted]


def _load_items(loader: MenuLoader, menu: MenuModel) -> list[MenuItemModel]:
    try:
        return list(loader.list_items(menu.id) or [])
    except LookupError as exc:
        LOGGER.warning("menu %s (%s): items unavailable: %s", menu.id, menu.slug, exc)
        return []


def build_report(
    loader: MenuLoader,
    resolver: ContentResolver,
    base_url: str | None = None,
    menu_slugs: Iterable[str] | None = None,
    chain_parents: bool = False,
) -> ReportModel:
    resolver = CachingResolver(resolver)
    base = _site_base(base_url, resolver)
    menus = _select_menus(loader.list_menus(), menu_slugs)

    total_items = 0
    missing_rows: list[MissingTargetRow] = []
    orphan_rows: list[OrphanChildRow] = []
    suspicious_rows: list[SuspiciousCustomUrlRow] = []
    menu_stats: list[MenuStatsModel] = []

    LOGGER.info("Scanning %d menu(s) against %s", len(menus), base)
    with log_indent():
        for menu in menus:
            items = _load_items(loader, menu)
            if not items:
                LOGGER.debug("menu %s (%s): no items", menu.id, menu.slug)
                continue

            index = {item.id: item for item in items}
            missing = orphans = suspicious = 0
            for item in items:
                total_items += 1

                reason = classify_target(item, resolver)
                if reason:
                    missing += 1
                    missing_rows.append(
                        MissingTargetRow(menu=menu, item=item, reason=reason)
                    )

                if item.type == MenuItemType.CUSTOM_URL:
                    reason = classify_custom_url(item.url, resolver, base_url=base)
                    if reason:
                        suspicious += 1
                        suspicious_rows.append(
                            SuspiciousCustomUrlRow(menu=menu, item=item, reason=reason)
                        )

                verdict = classify_parent(item, index, resolver, chain_parents)
                if verdict is not None:
                    orphans += 1
                    orphan_rows.append(
                        OrphanChildRow(
                            menu=menu,
                            item=item,
                            parent_id=verdict.parent_id,
                            parent_state=verdict.state,
                            reason=verdict.reason,
                        )
                    )

            LOGGER.debug(
                "menu %s (%s): %d items, %d missing, %d orphans, %d suspicious",
                menu.id,
                menu.slug,
                len(items),
                missing,
                orphans,
                suspicious,
            )
            menu_stats.append(
                MenuStatsModel(
                    menu=menu,
                    total=len(items),
                    missing=missing,
                    orphans=orphans,
                    suspicious=suspicious,
                )
            )

    return ReportModel(
        base_url=base,
        total_menus=len(menus),
        total_items=total_items,
        missing_items=tuple(missing_rows),
        orphan_children=tuple(orphan_rows),
        suspicious_custom=tuple(suspicious_rows),
        menus=tuple(menu_stats),
    )
