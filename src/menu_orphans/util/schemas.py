from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from menu_orphans.util.assertx import assert_in_out_dir
from menu_orphans.util.io import write_raw_json


def write_model_schema(out_dir: Path, name: str, model: type[BaseModel]) -> Path:
    """Write the JSON schema of ``model`` to ``schemas/<name>.schema.json``."""
    schema_path = out_dir / "schemas" / f"{name}.schema.json"
    assert_in_out_dir(schema_path, out_dir)
    write_raw_json(schema_path, model.model_json_schema(mode="serialization"))
    return schema_path
