from __future__ import annotations

"""Stage A: ingest.

Validates the site snapshot and records what it contains, so a malformed
export fails before any classification runs.
"""

from pathlib import Path

from menu_orphans.models.ingest import IngestModel
from menu_orphans.models.snapshot import SiteSnapshotModel
from menu_orphans.util.io import read_json, utc_now_iso, write_json


def run(snapshot_path: Path, out_dir: Path) -> IngestModel:
    snapshot = read_json(snapshot_path, SiteSnapshotModel)
    model = IngestModel(
        snapshot_path=str(snapshot_path),
        base_url=snapshot.base_url,
        menu_count=len(snapshot.menus),
        item_count=sum(len(menu.items) for menu in snapshot.menus),
        content_count=len(snapshot.contents),
        term_count=len(snapshot.terms),
        created_at=utc_now_iso(),
    )
    write_json(out_dir / "ingest.json", model)
    return model
