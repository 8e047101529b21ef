from __future__ import annotations

from typing import Tuple, Type

from pydantic import BaseModel, Field

REQUIRED_FIELDS: Tuple[str, ...] = ("context", "core_idea")

# Assembly order of the user-visible synopsis. 'thinking' is never included.
SUMMARY_FIELDS: Tuple[str, ...] = (
    "context",
    "core_idea",
    "insight_1",
    "insight_2",
    "insight_3",
    "insight_4",
    "insight_5",
    "author_conclusion",
)


class StructuredSummary(BaseModel):
    """
    Structured output the model must fill in for one article.
    Lives only for the duration of a single summarization call.
    """

    thinking: str = Field(
        ...,
        description="Think step-by-step to analyze the content and plan the summary.",
    )
    context: str = Field(..., description="Context of the article.")
    core_idea: str = Field(..., description="Core idea of the article.")
    insight_1: str = Field(..., description="First main insight.")
    insight_2: str = Field(..., description="Second main insight.")
    insight_3: str = Field(..., description="Third main insight.")
    insight_4: str = Field(..., description="Fourth main insight.")
    insight_5: str = Field(..., description="Fifth main insight.")
    author_conclusion: str = Field(..., description="Author's conclusion or final point.")


def ensure_summary_schema(schema: Type[BaseModel]) -> Type[BaseModel]:
    """
    Check that a substitute schema can stand in for StructuredSummary.
    Raises TypeError if it is not a pydantic model or lacks a required field.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(f"Summary schema must be a pydantic model, got {schema!r}")

    missing = [name for name in REQUIRED_FIELDS if name not in schema.model_fields]
    if missing:
        raise TypeError(f"Summary schema {schema.__name__} is missing fields: {', '.join(missing)}")

    return schema
