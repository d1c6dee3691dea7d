from __future__ import annotations

"""Stage B: classify.

Runs the orphan classifier over every menu in the snapshot and writes the
resulting report.
"""

from pathlib import Path
from typing import Iterable

from menu_orphans.backends.snapshot import SnapshotSource
from menu_orphans.classifier import build_report
from menu_orphans.models.report import ReportModel
from menu_orphans.util.io import write_json


def run(
    snapshot_path: Path,
    out_dir: Path,
    base_url: str | None = None,
    menu_slugs: Iterable[str] | None = None,
    chain_parents: bool = False,
) -> ReportModel:
    source = SnapshotSource.from_path(snapshot_path)
    report = build_report(
        source,
        source,
        base_url=base_url,
        menu_slugs=menu_slugs,
        chain_parents=chain_parents,
    )
    write_json(out_dir / "report.json", report)
    return report
