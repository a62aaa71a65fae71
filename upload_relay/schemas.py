from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StagedUpload(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_filename: str
    content: bytes
    content_type: str | None = None


class HealthResponse(BaseModel):
    ok: bool = True
