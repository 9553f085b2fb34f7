"""YAML frontmatter block for the rendered document."""

from __future__ import annotations

from typing import Any

import yaml

from docsmd.render._exceptions import FrontmatterError

DELIMITER = "---\n"


def generate_frontmatter(title: str, tab_title: str | None = None) -> str:
    """Build the ``---`` delimited YAML header.

    Args:
        title: Document title, always present
        tab_title: Title of the rendered tab; emitted as ``tab`` only when
            non-empty and different from the document title

    Raises:
        FrontmatterError: If the values cannot be serialized as YAML
    """
    data: dict[str, Any] = {"title": title}
    if tab_title and tab_title != title:
        data["tab"] = tab_title

    try:
        body = yaml.safe_dump(
            data,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=float("inf"),
        )
    except yaml.YAMLError as e:
        raise FrontmatterError(f"failed to generate frontmatter: {e}") from e

    return DELIMITER + body + DELIMITER
