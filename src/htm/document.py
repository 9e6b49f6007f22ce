# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - a doctype followed by elements and stylesheets."""

from __future__ import annotations

import logging
from typing import Iterable

from .entries import DOC_KINDS, DocEntry, Element, Style, ensure_kind
from .node import Node
from .stylesheet import StyleBlock

logger = logging.getLogger(__name__)

DOCTYPE = '<!DOCTYPE html>'


class Document:
    """A complete page: the doctype, then each entry in insertion order.

    No whitespace is inserted between entries.

    Usage:
        >>> doc = Document().add_style(StyleBlock()).add_element(Node('p'))
        >>> doc.serialize()
        '<!DOCTYPE html><style></style><p></p>'
    """

    __slots__ = ('entries',)

    def __init__(self, entries: Iterable[DocEntry] | None = None) -> None:
        self.entries: list[DocEntry] = []
        for entry in entries or ():
            self.add_entry(entry)

    def __repr__(self) -> str:
        return f"Document(entries={len(self.entries)})"

    def __str__(self) -> str:
        return self.serialize()

    def add_entry(self, entry: DocEntry) -> Document:
        """Append an Element or Style entry and return self."""
        ensure_kind(entry, DOC_KINDS, 'Element or Style')
        if isinstance(entry, Element):
            ensure_kind(entry.node, Node, 'Node')
        else:
            ensure_kind(entry.block, StyleBlock, 'StyleBlock')
        self.entries.append(entry)
        return self

    def add_element(self, node: Node) -> Document:
        """Append a top-level element and return self."""
        return self.add_entry(Element(node))

    def add_style(self, block: StyleBlock) -> Document:
        """Append an embedded stylesheet and return self."""
        return self.add_entry(Style(block))

    def serialize(self) -> str:
        """Return the doctype followed by every entry's serialization."""
        parts = [DOCTYPE]
        for entry in self.entries:
            if isinstance(entry, Element):
                parts.append(entry.node.serialize())
            else:
                parts.append(entry.block.serialize())
        html = "".join(parts)
        logger.debug(
            "serialized document: %d entries, %d chars", len(self.entries), len(html)
        )
        return html
