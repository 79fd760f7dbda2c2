"""Sample document used by the CLI: a page header and a one-row table."""

from __future__ import annotations

from .dom import ElementNode, TextNode


def build_header() -> ElementNode:
    header = ElementNode("h1", "block", "closing")
    header.add_child(TextNode("Welcome to my page!"))
    return header


def build_table() -> ElementNode:
    table = ElementNode("table", "block", "closing", ["styled-table"])
    row = ElementNode("tr", "block", "closing")
    table.add_child(row)
    for label in ("Cell 1", "Cell 2"):
        cell = ElementNode("td", "inline", "closing")
        cell.add_child(TextNode(label))
        row.add_child(cell)
    return table


def build_sample_document() -> ElementNode:
    """A body element holding the header and the table."""
    body = ElementNode("body", "block", "closing")
    body.add_child(build_header())
    body.add_child(build_table())
    return body
