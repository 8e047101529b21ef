from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from article_summarizer.config import PipelineConfig
from article_summarizer.llm_schema import StructuredSummary

LONG_CONTENT = (
    "Rust's borrow checker enforces aliasing rules at compile time, which removes a whole "
    "class of memory bugs. The author walks through porting a small HTTP proxy from C to "
    "Rust, measuring latency and memory use before and after the rewrite. "
) * 4


def make_summary(**overrides: str) -> StructuredSummary:
    fields = {
        "thinking": "Plan the summary.",
        "context": "Context line.",
        "core_idea": "Core idea line.",
        "insight_1": "Insight one.",
        "insight_2": "Insight two.",
        "insight_3": "Insight three.",
        "insight_4": "Insight four.",
        "insight_5": "Insight five.",
        "author_conclusion": "Conclusion line.",
    }
    fields.update(overrides)
    return StructuredSummary(**fields)


Responder = Union[Any, Callable[[Dict[str, Any]], Any]]


class FakeBackend:
    """Records every call; replies with a fixed value or a callable(call) result."""

    def __init__(self, reply: Responder = None) -> None:
        self._reply = reply if reply is not None else make_summary()
        self.calls: List[Dict[str, Any]] = []

    def complete(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if callable(self._reply):
            return self._reply(kwargs)
        return self._reply


class RecordingProgress:
    def __init__(self) -> None:
        self.total: Optional[int] = None
        self.updates: List[int] = []
        self.stopped = False

    def start(self, total: int) -> None:
        self.total = total

    def update(self, current: int) -> None:
        self.updates.append(current)

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    return PipelineConfig(
        model="test-model",
        max_content_length=500,
        max_summary_length=256,
        context_window_size=4096,
    )


@pytest.fixture
def long_content() -> str:
    return LONG_CONTENT
