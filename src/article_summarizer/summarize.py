from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Type

from pydantic import BaseModel

from article_summarizer.assemble import assemble_summary
from article_summarizer.config import PipelineConfig, Settings, settings as default_settings
from article_summarizer.llm_client import OpenAIStructuredBackend, StructuredBackend, StructuredExtractor
from article_summarizer.llm_schema import StructuredSummary
from article_summarizer.models import Article
from article_summarizer.progress import NullProgressReporter, ProgressReporter
from article_summarizer.prompts import build_messages
from article_summarizer.sanitize import NO_SUMMARY

log = logging.getLogger("article_summarizer.summarize")


def truncate_content(content: str, max_length: int) -> Tuple[str, bool]:
    """
    Cut content to max_length characters.
    Returns (truncated content, whether anything was cut).
    """
    return content[:max_length], len(content) > max_length


class ArticleSummarizer:
    """
    Summarizes articles one at a time through a structured-output backend.
    """

    def __init__(
        self,
        backend: StructuredBackend,
        config: PipelineConfig,
        schema: Type[BaseModel] = StructuredSummary,
    ) -> None:
        self._config = config
        self._extractor: StructuredExtractor = StructuredExtractor(backend, config, schema)

    @property
    def model_name(self) -> str:
        return self._config.model

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def summarize_content(self, title: str, content: Optional[str]) -> str:
        """
        Summarize one article. Always returns text: the synopsis or NO_SUMMARY.
        """
        if not content or len(content.strip()) < self._config.min_content_length:
            log.debug("Content too short to summarize for %r", title)
            return NO_SUMMARY

        truncated_content, truncated = truncate_content(content, self._config.max_content_length)
        messages = build_messages(title, truncated_content, truncated)

        result = self._extractor.extract(messages, label=title)
        return assemble_summary(result, label=title)

    def summarize_article(self, article: Article) -> Article:
        """Write summary and model name onto the given article and return it."""
        article.summary = self.summarize_content(article.title, article.content)
        article.model_name = self.model_name
        return article

    def summarize_articles(
        self,
        articles: List[Article],
        progress: Optional[ProgressReporter] = None,
    ) -> List[Article]:
        """
        Summarize articles strictly in order, one request in flight at a time.
        The list and its elements are updated in place and the same list is returned.
        """
        progress = progress or NullProgressReporter()
        total = len(articles)
        fallback = 0

        progress.start(total)
        try:
            for idx, article in enumerate(articles, start=1):
                self.summarize_article(article)
                if article.summary == NO_SUMMARY:
                    fallback += 1
                progress.update(idx)
        finally:
            progress.stop()

        log.info(
            "Summarize finished: %s",
            {"total": total, "summarized": total - fallback, "fallback": fallback, "model": self.model_name},
        )
        return articles


def build_summarizer(
    settings: Optional[Settings] = None,
    backend: Optional[StructuredBackend] = None,
) -> ArticleSummarizer:
    """
    Wire an ArticleSummarizer from settings, defaulting to the OpenAI-compatible backend.
    """
    settings = settings or default_settings
    if backend is None:
        backend = OpenAIStructuredBackend(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout_s=settings.request_timeout_s,
        )
    return ArticleSummarizer(backend, settings.pipeline_config())
