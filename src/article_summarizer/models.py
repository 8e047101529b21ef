from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """
    An article handed over by the scraper/storage layer.

    Only `summary` and `model_name` are written by the summarizer, on this
    same instance. Unknown fields (ids, urls, scores) are kept as-is so the
    record round-trips through JSONL untouched.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        protected_namespaces=(),
    )

    title: str
    content: Optional[str] = None

    summary: Optional[str] = None
    model_name: Optional[str] = Field(default=None, alias="modelName")
