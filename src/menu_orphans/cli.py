from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from menu_orphans.models.report import ReportModel
from menu_orphans.pipeline import STAGES, ScanOptions, run_pipeline
from menu_orphans.util.assertx import ValidationError
from menu_orphans.util.logging import configure_logging

app = typer.Typer(add_completion=False)

EXIT_FINDINGS = 3


def format_summary(report: ReportModel) -> list[str]:
    lines = [
        f"Menus scanned: {report.total_menus}",
        f"Total menu items: {report.total_items}",
        f"Items pointing at missing content: {len(report.missing_items)}",
        f"Children with missing or broken parents: {len(report.orphan_children)}",
        f"Suspicious internal custom URLs: {len(report.suspicious_custom)}",
    ]
    for row in report.missing_items:
        lines.append(
            f"missing: [{row.menu.slug}] #{row.item.id} {row.item.label!r} "
            f"({row.item.type}): {row.reason}"
        )
    for row in report.orphan_children:
        lines.append(
            f"orphan: [{row.menu.slug}] #{row.item.id} {row.item.label!r}: {row.reason}"
        )
    for row in report.suspicious_custom:
        lines.append(
            f"suspicious: [{row.menu.slug}] #{row.item.id} {row.item.label!r} "
            f"{row.item.url}: {row.reason}"
        )
    return lines


@app.command()
def main(
    snapshot: Optional[Path] = typer.Argument(None, dir_okay=False),
    out: Optional[Path] = typer.Option(None, "--out", dir_okay=True, file_okay=False),
    stage: Optional[str] = typer.Option(None, "--stage"),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the site base URL recorded in the snapshot"
    ),
    menu: Optional[list[str]] = typer.Option(
        None, "--menu", help="Only scan menus with this slug (repeatable)"
    ),
    chain_parents: bool = typer.Option(
        False,
        "--chain-parents",
        help="Also flag children whose parent is itself an orphan",
    ),
    fail_on_findings: bool = typer.Option(False, "--fail-on-findings"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    list_stages: bool = typer.Option(False, "--list-stages"),
) -> None:
    configure_logging(verbose)
    if list_stages:
        typer.echo("\n".join(STAGES))
        raise typer.Exit(code=0)

    if snapshot is None or out is None:
        typer.echo("Error: snapshot and --out are required unless --list-stages")
        raise typer.Exit(code=2)

    options = ScanOptions(
        base_url=base_url,
        menu_slugs=menu,
        chain_parents=chain_parents,
    )
    try:
        report = run_pipeline(
            snapshot_path=snapshot,
            out_dir=out,
            options=options,
            stage=stage,
        )
    except ValidationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if report is None:
        return
    typer.echo("\n".join(format_summary(report)))
    if fail_on_findings and report.finding_count:
        raise typer.Exit(code=EXIT_FINDINGS)


if __name__ == "__main__":
    app()
