"""Tests for inline run rendering."""

from __future__ import annotations

import pytest

from docsmd.render import render_run, render_runs
from docsmd.types import Run, TextStyle


class TestRenderRun:
    @pytest.mark.parametrize("text", ["plain", "with\nnewline\n", "  spaced  "])
    def test_no_style_is_identity(self, text: str) -> None:
        assert render_run(text, None) == text

    def test_default_style_is_identity(self) -> None:
        assert render_run("plain", TextStyle()) == "plain"

    def test_empty_text(self) -> None:
        assert render_run("", TextStyle(bold=True)) == ""

    def test_bold(self) -> None:
        assert render_run("text", TextStyle(bold=True)) == "**text**"

    def test_italic(self) -> None:
        assert render_run("text", TextStyle(italic=True)) == "*text*"

    def test_bold_italic_uses_triple_asterisks(self) -> None:
        assert render_run("text", TextStyle(bold=True, italic=True)) == "***text***"

    def test_strikethrough(self) -> None:
        assert render_run("text", TextStyle(strikethrough=True)) == "~~text~~"

    def test_strikethrough_is_outermost(self) -> None:
        style = TextStyle(bold=True, italic=True, strikethrough=True)
        assert render_run("text", style) == "~~***text***~~"

    def test_link(self) -> None:
        style = TextStyle(link_url="https://example.com")
        assert render_run("site", style) == "[site](https://example.com)"

    def test_link_strips_trailing_newlines(self) -> None:
        style = TextStyle(link_url="https://example.com")
        assert render_run("site\n\n", style) == "[site](https://example.com)"

    def test_bold_link_wraps_link(self) -> None:
        style = TextStyle(bold=True, link_url="https://example.com")
        assert render_run("site\n", style) == "**[site](https://example.com)**"

    def test_empty_link_url_ignored(self) -> None:
        assert render_run("site", TextStyle(link_url="")) == "site"

    def test_struck_italic_link(self) -> None:
        style = TextStyle(italic=True, strikethrough=True, link_url="https://x.y")
        assert render_run("a", style) == "~~*[a](https://x.y)*~~"


class TestRenderRuns:
    def test_concatenates_in_order(self) -> None:
        runs = [
            Run("Hello "),
            Run("bold", TextStyle(bold=True)),
            Run(" and "),
            Run("italic", TextStyle(italic=True)),
            Run("\n"),
        ]
        assert render_runs(runs) == "Hello **bold** and *italic*\n"

    def test_runs_without_text_contribute_nothing(self) -> None:
        runs = [Run("a"), Run("", TextStyle(bold=True)), Run("b")]
        assert render_runs(runs) == "ab"

    def test_no_runs(self) -> None:
        assert render_runs([]) == ""
