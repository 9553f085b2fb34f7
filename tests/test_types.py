"""Tests for the document model."""

from __future__ import annotations

import dataclasses

import pytest

from docsmd.types import Document, FlatBody, Paragraph, Run, Tab, TextStyle


def test_document_defaults_to_empty_flat_body() -> None:
    doc = Document()
    assert doc.title == ""
    assert doc.content == FlatBody(body=())


def test_model_is_immutable() -> None:
    paragraph = Paragraph(runs=(Run("x"),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        paragraph.runs = ()  # type: ignore[misc]


def test_equal_values_compare_equal() -> None:
    a = Tab(tab_id="t.0", title="A", body=(Paragraph(runs=(Run("x", TextStyle(bold=True)),)),))
    b = Tab(tab_id="t.0", title="A", body=(Paragraph(runs=(Run("x", TextStyle(bold=True)),)),))
    assert a == b
    assert hash(a) == hash(b)
