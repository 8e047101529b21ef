from article_summarizer.llm_schema import SUMMARY_FIELDS
from article_summarizer.prompts import (
    SYSTEM_PROMPT,
    TRUNCATION_NOTICE,
    build_messages,
    build_summary_prompt,
)
from article_summarizer.sanitize import NO_SUMMARY


def test_system_prompt_lists_every_output_field() -> None:
    for name in SUMMARY_FIELDS:
        assert f"* {name}:" in SYSTEM_PROMPT
    assert "'thinking'" in SYSTEM_PROMPT
    assert f'"{NO_SUMMARY}"' in SYSTEM_PROMPT
    assert "NEVER hallucinate" in SYSTEM_PROMPT


def test_build_summary_prompt_wraps_and_escapes() -> None:
    prompt = build_summary_prompt("A <b>bold</b> title", "Body & <i>more</i>")

    assert prompt == (
        "<title>A &lt;b&gt;bold&lt;/b&gt; title</title>\n"
        "<content>Body &amp; &lt;i&gt;more&lt;/i&gt;</content>"
    )


def test_build_summary_prompt_adds_truncation_notice_inside_content() -> None:
    prompt = build_summary_prompt("Title", "Body", truncated=True)

    assert prompt.endswith(f"Body{TRUNCATION_NOTICE}</content>")


def test_build_summary_prompt_without_truncation_has_no_notice() -> None:
    assert "[Truncated" not in build_summary_prompt("Title", "Body", truncated=False)


def test_build_messages_roles() -> None:
    messages = build_messages("Title", "Body")

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == SYSTEM_PROMPT.strip()
    assert "<title>Title</title>" in messages[1]["content"]
