from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class IngestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    snapshot_path: str
    base_url: str
    menu_count: int
    item_count: int
    content_count: int
    term_count: int
    created_at: str
