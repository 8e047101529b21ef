from __future__ import annotations

from typing import Dict, List

from article_summarizer.sanitize import NO_SUMMARY, sanitize_input

TRUNCATION_NOTICE = "\n[Truncated for length constraints]"


SYSTEM_PROMPT = f"""You are a helpful assistant summarizing Hacker News articles. Follow these instructions precisely:
- Use the 'thinking' field to think step-by-step about the content before generating the summary fields. This field will not be part of the final output.
- Return "{NO_SUMMARY}" if content is missing, unreadable, or you cannot extract the required fields.
- NEVER hallucinate; summarize only the provided content.
- Extract the following fields based on the content:
  * context: Provide the context.
  * core_idea: State the core idea.
  * insight_1: Detail the first main insight.
  * insight_2: Detail the second main insight.
  * insight_3: Detail the third main insight.
  * insight_4: Detail the fourth main insight.
  * insight_5: Detail the fifth main insight.
  * author_conclusion: Describe the author's conclusion.
- Use a neutral, factual tone suitable for a tech audience.
- Respond ONLY with the structured data requested.
"""


def build_summary_prompt(title: str, content: str, truncated: bool = False) -> str:
    """
    Build the per-article user payload.
    Title and content are escaped here; content is expected to be already truncated.
    """
    notice = TRUNCATION_NOTICE if truncated else ""
    return (
        f"<title>{sanitize_input(title)}</title>\n"
        f"<content>{sanitize_input(content)}{notice}</content>"
    )


def build_messages(title: str, content: str, truncated: bool = False) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT.strip()},
        {"role": "user", "content": build_summary_prompt(title, content, truncated)},
    ]
