from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List

from article_summarizer.models import Article


def iter_jsonl(path: Path) -> Iterator[Dict[str, Any]]:
    """
    Iterate JSONL as dictionaries.
    Skips empty lines.
    """
    if not path.exists():
        raise FileNotFoundError(f"JSONL file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            yield json.loads(line)


def write_jsonl(path: Path, rows: Iterable[Dict[str, Any]]) -> int:
    """
    Write rows as JSONL, replacing the file. Returns the number of rows written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
            count += 1
    return count


def load_articles(path: Path) -> List[Article]:
    return [Article.model_validate(obj) for obj in iter_jsonl(path)]


def dump_articles(path: Path, articles: Iterable[Article]) -> int:
    """
    Write enriched articles, using the external field names (modelName).
    """
    return write_jsonl(path, (a.model_dump(mode="json", by_alias=True) for a in articles))
