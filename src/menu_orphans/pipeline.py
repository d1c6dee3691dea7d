from __future__ import annotations

import logging
import time
from pathlib import Path

from menu_orphans.models.ingest import IngestModel
from menu_orphans.models.report import ReportModel
from menu_orphans.stages import classify as classify_stage, ingest as ingest_stage
from menu_orphans.util.assertx import ValidationError, assert_file_exists
from menu_orphans.util.io import StageMeta, read_json, utc_now_iso, write_stage_meta

LOGGER = logging.getLogger(__name__)

STAGES = [
    "ingest",
    "classify",
]

STAGE_OUTPUTS = {
    "ingest": ["ingest.json"],
    "classify": ["report.json"],
}

STAGE_INPUTS = {
    "classify": ["ingest.json"],
}


class ScanOptions:
    def __init__(
        self,
        base_url: str | None = None,
        menu_slugs: list[str] | None = None,
        chain_parents: bool = False,
    ) -> None:
        self.base_url = base_url
        self.menu_slugs = list(menu_slugs or [])
        self.chain_parents = chain_parents


def _assert_required_inputs(out_dir: Path, stage: str) -> None:
    for rel_path in STAGE_INPUTS.get(stage, []):
        path = out_dir / rel_path
        assert_file_exists(path, f"Missing required upstream artifact: {path}")


def _write_meta(
    out_dir: Path,
    stage: str,
    start_time: float,
    started_at: str,
    inputs: list[str],
    outputs: list[str],
) -> None:
    finished = time.time()
    meta = StageMeta(
        stage=stage,
        started_at=started_at,
        finished_at=utc_now_iso(),
        duration_ms=int((finished - start_time) * 1000),
        inputs=inputs,
        outputs=outputs,
    )
    write_stage_meta(out_dir, meta)


def run_pipeline(
    snapshot_path: Path,
    out_dir: Path,
    options: ScanOptions,
    stage: str | None = None,
) -> ReportModel | None:
    if stage and stage not in STAGES:
        raise ValidationError(f"Unknown stage: {stage}")
    assert_file_exists(snapshot_path, f"Snapshot file not found: {snapshot_path}")

    out_dir.mkdir(parents=True, exist_ok=True)
    selected = [stage] if stage else STAGES

    report: ReportModel | None = None
    for stage_name in selected:
        LOGGER.info("Stage start: %s", stage_name)
        if stage_name != "ingest":
            _assert_required_inputs(out_dir, stage_name)
            ingest = read_json(out_dir / "ingest.json", IngestModel)
            if Path(ingest.snapshot_path).resolve() != snapshot_path.resolve():
                raise ValidationError(
                    "ingest.json snapshot_path does not match current snapshot"
                )
        outputs = [str(out_dir / name) for name in STAGE_OUTPUTS[stage_name]]
        inputs = [str(snapshot_path)] + [
            str(out_dir / name) for name in STAGE_INPUTS.get(stage_name, [])
        ]
        start_time = time.time()
        started_at = utc_now_iso()

        if stage_name == "ingest":
            ingest_stage.run(snapshot_path, out_dir)
        elif stage_name == "classify":
            report = classify_stage.run(
                snapshot_path,
                out_dir,
                base_url=options.base_url,
                menu_slugs=options.menu_slugs,
                chain_parents=options.chain_parents,
            )

        _write_meta(out_dir, stage_name, start_time, started_at, inputs, outputs)
        LOGGER.info("Stage end: %s", stage_name)

    return report
