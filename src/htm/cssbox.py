# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DeclarationBox - a CSS rule or nested at-rule block."""

from __future__ import annotations

from typing import Iterable, Iterator

from .entries import (
    PROPERTY_KINDS,
    Declaration,
    Nested,
    PropertyEntry,
    ensure_kind,
)
from .exceptions import CyclicTreeError


class DeclarationBox:
    """A selector (or at-rule header) with its declarations.

    Nested boxes are emitted straight inside the parent's braces, which is
    how media queries and other block at-rules are written.

    Example:
        >>> media = DeclarationBox('@media (min-width: 801px)').nested_box(
        ...     DeclarationBox('body').declaration('color', 'red'))
        >>> media.serialize()
        '@media (min-width: 801px) {body {color: red;}}'
    """

    __slots__ = ('selector', 'properties')

    def __init__(
        self,
        selector: str,
        properties: Iterable[PropertyEntry] | None = None,
    ) -> None:
        """Initialize a DeclarationBox.

        Args:
            selector: Selector list or at-rule header, emitted verbatim.
            properties: Optional initial Declaration/Nested entries.
        """
        self.selector = selector
        self.properties: list[PropertyEntry] = []
        for entry in properties or ():
            self.add_property(entry)

    def __repr__(self) -> str:
        return f"DeclarationBox({self.selector!r}, properties={len(self.properties)})"

    def __str__(self) -> str:
        return self.serialize()

    def add_property(self, entry: PropertyEntry) -> DeclarationBox:
        """Append a Declaration or Nested entry and return self.

        Raises:
            InvalidEntryError: If entry is neither, or a Nested entry does
                not hold a DeclarationBox.
            CyclicTreeError: If a nested box contains self.
        """
        ensure_kind(entry, PROPERTY_KINDS, 'Declaration or Nested')
        if isinstance(entry, Nested):
            ensure_kind(entry.box, DeclarationBox, 'DeclarationBox')
            if any(box is self for box in entry.box.walk()):
                raise CyclicTreeError(
                    f"cannot nest {self.selector!r} inside itself"
                )
        self.properties.append(entry)
        return self

    def declaration(self, key: str, value: str) -> DeclarationBox:
        """Append a ``key: value;`` declaration and return self."""
        return self.add_property(Declaration(key, value))

    def nested_box(self, box: DeclarationBox) -> DeclarationBox:
        """Append a nested box and return self."""
        return self.add_property(Nested(box))

    def walk(self) -> Iterator[DeclarationBox]:
        """Yield this box and every nested box, depth first."""
        stack = [self]
        while stack:
            box = stack.pop()
            yield box
            stack.extend(reversed([
                entry.box for entry in box.properties if isinstance(entry, Nested)
            ]))

    def serialize(self) -> str:
        """Return ``selector {...}`` with every property in order.

        Nested boxes are serialized recursively, so nesting deeper than the
        interpreter's recursion limit raises RecursionError.
        """
        parts = [f"{self.selector} {{"]
        for entry in self.properties:
            if isinstance(entry, Declaration):
                parts.append(f"{entry.key}: {entry.value};")
            else:
                parts.append(entry.box.serialize())
        parts.append("}")
        return "".join(parts)
