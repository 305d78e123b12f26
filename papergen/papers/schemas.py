from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PaperRequest(BaseModel):
    subject: str | None = None
    chapter: str | None = None
    duration: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="ignore")


class PaperResponse(BaseModel):
    paper: str

