"""Inline rendering: styled text runs to Markdown."""

from __future__ import annotations

from collections.abc import Iterable

from docsmd.types import Run, TextStyle


def _format_link(text: str, url: str) -> str:
    # Trailing newlines inside the brackets would break the link
    text = text.rstrip("\n")
    return f"[{text}]({url})"


def render_run(text: str, style: TextStyle | None) -> str:
    """Apply Markdown inline formatting to a run of text.

    The link is applied first so that emphasis wraps it
    (``**[text](url)**``); strikethrough is always the outermost wrap.
    """
    if not text:
        return ""
    if style is None:
        return text

    if style.link_url:
        text = _format_link(text, style.link_url)

    if style.bold and style.italic:
        text = f"***{text}***"
    elif style.bold:
        text = f"**{text}**"
    elif style.italic:
        text = f"*{text}*"

    if style.strikethrough:
        text = f"~~{text}~~"

    return text


def render_runs(runs: Iterable[Run]) -> str:
    """Concatenate the rendered runs of one paragraph."""
    return "".join(render_run(run.text, run.style) for run in runs)
