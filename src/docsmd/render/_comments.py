"""Comment threads to a Markdown "Comments" section."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from docsmd.types import Comment

UNKNOWN_AUTHOR = "Unknown"
RESOLVED_MARKER = " ✓ resolved"


def _escape_author(name: str) -> str:
    """Escape emphasis characters so a display name stays literal."""
    return name.replace("*", "\\*").replace("_", "\\_")


def _format_author(name: str) -> str:
    return _escape_author(name or UNKNOWN_AUTHOR)


def _format_date(timestamp: str) -> str:
    """Date part (YYYY-MM-DD) of an RFC 3339 timestamp, empty if unparsable."""
    if not timestamp:
        return ""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return parsed.strftime("%Y-%m-%d")


def _date_suffix(timestamp: str) -> str:
    date = _format_date(timestamp)
    return f" ({date})" if date else ""


def render_comments(comments: Sequence[Comment]) -> str:
    """Render comment threads as a Markdown section.

    Returns an empty string for no comments, so the section heading is
    omitted entirely. Comment and reply bodies are emitted literally.
    """
    if not comments:
        return ""

    parts = ["## Comments\n\n"]
    for comment in comments:
        if comment.quoted_text:
            parts.append("> " + comment.quoted_text.replace("\n", "\n> ") + "\n\n")

        line = f"**{_format_author(comment.author)}**"
        line += _date_suffix(comment.created_time)
        if comment.resolved:
            line += RESOLVED_MARKER
        parts.append(f"{line}: {comment.content}\n")

        for reply in comment.replies:
            parts.append(
                f"  ↳ **{_format_author(reply.author)}**"
                f"{_date_suffix(reply.created_time)}: {reply.content}\n"
            )

        parts.append("\n")

    return "".join(parts)
