"""Google Docs API v1 types read by the renderer.

Pydantic models for the subset of the ``Document`` resource that reaches the
Markdown output. Unknown fields are kept (``extra="allow"``) so newer API
payloads validate unchanged. Enum-valued fields are plain strings: values
this tool does not know about must not fail validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """A reference to another portion of a document or an external URL resource."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    bookmark_id: str | None = Field(None, alias="bookmarkId")
    heading_id: str | None = Field(None, alias="headingId")
    tab_id: str | None = Field(None, alias="tabId")
    url: str | None = Field(None)


class TextStyle(BaseModel):
    """Represents the styling that can be applied to text."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    bold: bool | None = Field(None)
    italic: bool | None = Field(None)
    link: Link | None = Field(None)
    small_caps: bool | None = Field(None, alias="smallCaps")
    strikethrough: bool | None = Field(None)
    underline: bool | None = Field(None)


class TextRun(BaseModel):
    """A ParagraphElement that represents a run of text that all has the same styling."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: str | None = Field(None)
    text_style: TextStyle | None = Field(None, alias="textStyle")


class ParagraphElement(BaseModel):
    """A ParagraphElement describes content within a Paragraph."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    end_index: int | None = Field(None, alias="endIndex")
    start_index: int | None = Field(None, alias="startIndex")
    text_run: TextRun | None = Field(None, alias="textRun")


class ParagraphStyle(BaseModel):
    """Styles that apply to a whole paragraph."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    heading_id: str | None = Field(None, alias="headingId")
    named_style_type: str | None = Field(None, alias="namedStyleType")


class Bullet(BaseModel):
    """Describes the bullet of a paragraph."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    list_id: str | None = Field(None, alias="listId")
    nesting_level: int | None = Field(None, alias="nestingLevel")


class Paragraph(BaseModel):
    """A StructuralElement representing a paragraph."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    bullet: Bullet | None = Field(None)
    elements: list[ParagraphElement] | None = Field(None)
    paragraph_style: ParagraphStyle | None = Field(None, alias="paragraphStyle")


class TableCell(BaseModel):
    """The contents and style of a cell in a Table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: list[StructuralElement] | None = Field(None)
    end_index: int | None = Field(None, alias="endIndex")
    start_index: int | None = Field(None, alias="startIndex")


class TableRow(BaseModel):
    """The contents and style of a row in a Table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    end_index: int | None = Field(None, alias="endIndex")
    start_index: int | None = Field(None, alias="startIndex")
    table_cells: list[TableCell] | None = Field(None, alias="tableCells")


class Table(BaseModel):
    """A StructuralElement representing a table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    columns: int | None = Field(None)
    rows: int | None = Field(None)
    table_rows: list[TableRow] | None = Field(None, alias="tableRows")


class StructuralElement(BaseModel):
    """A StructuralElement describes content that provides structure to the document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    end_index: int | None = Field(None, alias="endIndex")
    paragraph: Paragraph | None = Field(None)
    start_index: int | None = Field(None, alias="startIndex")
    table: Table | None = Field(None)


class Body(BaseModel):
    """The document body."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: list[StructuralElement] | None = Field(None)


class TabProperties(BaseModel):
    """Properties of a tab."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    index: int | None = Field(None)
    nesting_level: int | None = Field(None, alias="nestingLevel")
    parent_tab_id: str | None = Field(None, alias="parentTabId")
    tab_id: str | None = Field(None, alias="tabId")
    title: str | None = Field(None)


class DocumentTab(BaseModel):
    """A tab with document contents."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    body: Body | None = Field(None)


class Tab(BaseModel):
    """A tab in a document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    child_tabs: list[Tab] | None = Field(None, alias="childTabs")
    document_tab: DocumentTab | None = Field(None, alias="documentTab")
    tab_properties: TabProperties | None = Field(None, alias="tabProperties")


class Document(BaseModel):
    """A Google Docs document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    body: Body | None = Field(None)
    document_id: str | None = Field(None, alias="documentId")
    revision_id: str | None = Field(None, alias="revisionId")
    tabs: list[Tab] | None = Field(None)
    title: str | None = Field(None)
