from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from menu_orphans.models.ingest import IngestModel
from menu_orphans.models.report import ReportModel
from menu_orphans.pipeline import STAGES, ScanOptions, run_pipeline
from menu_orphans.util.assertx import ValidationError
from menu_orphans.util.io import read_json


def test_pipeline_writes_artifacts(main_snapshot: Path, tmp_path: Path) -> None:
    report = run_pipeline(main_snapshot, tmp_path, ScanOptions())

    assert report is not None
    assert report.total_items == 4
    ingest = read_json(tmp_path / "ingest.json", IngestModel)
    assert ingest.menu_count == 1
    assert ingest.item_count == 4
    assert ingest.content_count == 2
    assert ingest.base_url == "https://site.test"

    with (tmp_path / "report.json").open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert [row["item"]["id"] for row in payload["missing_items"]] == [102]
    assert payload["orphan_children"][0]["parent_state"] == "missing"

    for stage in STAGES:
        with (tmp_path / "stage_meta" / f"{stage}.json").open("r", encoding="utf-8") as handle:
            meta = json.load(handle)
        assert meta["stage"] == stage
        assert meta["duration_ms"] >= 0


def test_ingest_stage_only(main_snapshot: Path, tmp_path: Path) -> None:
    result = run_pipeline(main_snapshot, tmp_path, ScanOptions(), stage="ingest")

    assert result is None
    assert (tmp_path / "ingest.json").is_file()
    assert not (tmp_path / "report.json").exists()


def test_classify_without_ingest_raises(main_snapshot: Path, tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        run_pipeline(main_snapshot, tmp_path, ScanOptions(), stage="classify")


def test_unknown_stage_raises(main_snapshot: Path, tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        run_pipeline(main_snapshot, tmp_path, ScanOptions(), stage="render")


def test_snapshot_mismatch_raises(
    main_snapshot: Path, wordpress_snapshot: Path, tmp_path: Path
) -> None:
    run_pipeline(main_snapshot, tmp_path, ScanOptions(), stage="ingest")
    with pytest.raises(ValidationError):
        run_pipeline(wordpress_snapshot, tmp_path, ScanOptions(), stage="classify")


def test_rerun_rebuilds_report_for_changed_snapshot(
    main_snapshot: Path, wordpress_snapshot: Path, tmp_path: Path
) -> None:
    snapshot = tmp_path / "site.json"
    out_dir = tmp_path / "out"
    shutil.copyfile(main_snapshot, snapshot)
    first = run_pipeline(snapshot, out_dir, ScanOptions())

    shutil.copyfile(wordpress_snapshot, snapshot)
    second = run_pipeline(snapshot, out_dir, ScanOptions())

    assert first is not None and second is not None
    assert first.total_items == 4
    assert second.total_items == 15
    stored = read_json(out_dir / "report.json", ReportModel)
    assert stored.model_dump(mode="json") == second.model_dump(mode="json")


def test_rerun_applies_new_options(wordpress_snapshot: Path, tmp_path: Path) -> None:
    full = run_pipeline(wordpress_snapshot, tmp_path, ScanOptions())
    filtered = run_pipeline(
        wordpress_snapshot, tmp_path, ScanOptions(menu_slugs=["social"])
    )

    assert full is not None and filtered is not None
    assert full.total_menus == 3
    assert filtered.total_menus == 1


def test_scan_options_reach_classifier(wordpress_snapshot: Path, tmp_path: Path) -> None:
    options = ScanOptions(menu_slugs=["social"])
    report = run_pipeline(wordpress_snapshot, tmp_path, options)

    assert report is not None
    assert report.total_menus == 1
    assert report.total_items == 3
