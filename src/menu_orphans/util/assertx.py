from __future__ import annotations

from pathlib import Path


class ValidationError(RuntimeError):
    pass


def assert_file_exists(path: Path, message: str | None = None) -> None:
    if not path.is_file():
        raise ValidationError(message or f"Expected file to exist: {path}")


def assert_in_out_dir(path: Path, out_dir: Path) -> None:
    resolved = path.absolute()
    base = out_dir.absolute()
    if base not in resolved.parents and resolved != base:
        raise ValidationError(f"Path must be inside out_dir: {path}")
