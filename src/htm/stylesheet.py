# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleBlock - embedded CSS wrapped in a ``<style>`` element.

Example:
    Using an @import and two rules::

        from htm import DeclarationBox, StyleBlock

        sheet = (
            StyleBlock()
            .add_raw_statement("@import 'custom.css'")
            .add_box(DeclarationBox('.my-class')
                     .declaration('height', '250vh')
                     .declaration('width', '100px'))
            .add_box(DeclarationBox('.my-second-class')
                     .declaration('color', 'red'))
        )
        sheet.serialize()
        # "<style>@import 'custom.css';.my-class {height: 250vh;width: 100px;}"
        # ".my-second-class {color: red;}</style>"
"""

from __future__ import annotations

from typing import Iterable

from .cssbox import DeclarationBox
from .entries import STYLE_KINDS, Box, RawStatement, StyleEntry, ensure_kind


class StyleBlock:
    """An ordered list of rules and raw statements.

    Raw statements get a ``;`` appended on output, so callers pass them
    without one.
    """

    __slots__ = ('entries',)

    def __init__(self, entries: Iterable[StyleEntry] | None = None) -> None:
        self.entries: list[StyleEntry] = []
        for entry in entries or ():
            self.add_entry(entry)

    def __repr__(self) -> str:
        return f"StyleBlock(entries={len(self.entries)})"

    def __str__(self) -> str:
        return self.serialize()

    def add_entry(self, entry: StyleEntry) -> StyleBlock:
        """Append a Box or RawStatement entry and return self."""
        ensure_kind(entry, STYLE_KINDS, 'Box or RawStatement')
        if isinstance(entry, Box):
            ensure_kind(entry.box, DeclarationBox, 'DeclarationBox')
        self.entries.append(entry)
        return self

    def add_box(self, box: DeclarationBox) -> StyleBlock:
        """Append a declaration box and return self."""
        return self.add_entry(Box(box))

    def add_raw_statement(self, text: str) -> StyleBlock:
        """Append a raw statement (e.g. ``@import 'a.css'``) and return self."""
        return self.add_entry(RawStatement(text))

    def serialize(self) -> str:
        """Return ``<style>...</style>``, even when there are no entries."""
        parts = ["<style>"]
        for entry in self.entries:
            if isinstance(entry, Box):
                parts.append(entry.box.serialize())
            else:
                parts.append(f"{entry.text};")
        parts.append("</style>")
        return "".join(parts)
