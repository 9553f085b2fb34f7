"""Tests for the Comments section renderer."""

from __future__ import annotations

from docsmd.render import render_comments
from docsmd.types import Comment, Reply


def test_no_comments_renders_nothing() -> None:
    assert render_comments([]) == ""


def test_single_comment() -> None:
    comment = Comment(
        author="Alice",
        content="This needs clarification.",
        created_time="2025-01-15T10:30:00Z",
    )
    assert render_comments([comment]) == (
        "## Comments\n\n**Alice** (2025-01-15): This needs clarification.\n\n"
    )


def test_quoted_text_is_blockquoted() -> None:
    comment = Comment(
        author="Alice",
        content="Why?",
        quoted_text="line one\nline two",
        created_time="2025-01-15T10:30:00Z",
    )
    assert render_comments([comment]) == (
        "## Comments\n\n"
        "> line one\n> line two\n\n"
        "**Alice** (2025-01-15): Why?\n\n"
    )


def test_resolved_marker() -> None:
    comment = Comment(
        author="Alice", content="Fixed", created_time="2025-01-15T10:30:00Z", resolved=True
    )
    assert "**Alice** (2025-01-15) ✓ resolved: Fixed\n" in render_comments([comment])


def test_replies_follow_comment() -> None:
    comment = Comment(
        author="Alice",
        content="Question",
        created_time="2025-01-15T10:30:00Z",
        replies=(
            Reply(author="Bob", content="Answer", created_time="2025-01-16T08:00:00Z"),
            Reply(author="Carol", content="Thanks", created_time="2025-01-17T08:00:00Z"),
        ),
    )
    assert render_comments([comment]) == (
        "## Comments\n\n"
        "**Alice** (2025-01-15): Question\n"
        "  ↳ **Bob** (2025-01-16): Answer\n"
        "  ↳ **Carol** (2025-01-17): Thanks\n"
        "\n"
    )


def test_threads_are_separated_by_blank_line() -> None:
    comments = [
        Comment(author="A", content="one", created_time="2025-01-01T00:00:00Z"),
        Comment(author="B", content="two", created_time="2025-01-02T00:00:00Z"),
    ]
    assert render_comments(comments) == (
        "## Comments\n\n**A** (2025-01-01): one\n\n**B** (2025-01-02): two\n\n"
    )


def test_missing_author_is_unknown() -> None:
    comment = Comment(author="", content="anon", created_time="2025-01-15T10:30:00Z")
    assert "**Unknown** (2025-01-15): anon" in render_comments([comment])


def test_author_emphasis_characters_are_escaped() -> None:
    comment = Comment(author="*jane_doe*", content="hi")
    assert "**\\*jane\\_doe\\***: hi\n" in render_comments([comment])


def test_missing_or_invalid_date_is_omitted() -> None:
    comments = [
        Comment(author="A", content="no date"),
        Comment(author="B", content="bad date", created_time="yesterday"),
    ]
    assert render_comments(comments) == (
        "## Comments\n\n**A**: no date\n\n**B**: bad date\n\n"
    )


def test_fractional_seconds_timestamp() -> None:
    comment = Comment(author="A", content="x", created_time="2025-02-03T09:15:00.000Z")
    assert "**A** (2025-02-03): x" in render_comments([comment])


def test_comment_body_is_literal() -> None:
    comment = Comment(author="A", content="use **bold** _here_")
    assert "**A**: use **bold** _here_\n" in render_comments([comment])
