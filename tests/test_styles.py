# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for DeclarationBox and StyleBlock."""

import pytest

from htm import (
    Box,
    CyclicTreeError,
    Declaration,
    DeclarationBox,
    InvalidEntryError,
    Nested,
    RawStatement,
    StyleBlock,
)


class TestDeclarationBox:
    """Tests for DeclarationBox."""

    def test_single_declaration(self):
        """Test a class with one declaration."""
        box = DeclarationBox('.p', [Declaration('height', '250 px')])
        assert box.serialize() == '.p {height: 250 px;}'

    def test_empty_box(self):
        """Test a box with no properties."""
        assert DeclarationBox('div').serialize() == 'div {}'

    def test_chained_declarations(self):
        """Test declarations keep insertion order."""
        box = (
            DeclarationBox('.my-class')
            .declaration('height', '250vh')
            .declaration('width', '100px')
        )
        assert box.serialize() == '.my-class {height: 250vh;width: 100px;}'

    def test_nested_media_query(self):
        """Test a nested box sits directly inside the parent's braces."""
        media = DeclarationBox('@media (min-width: 801px)').nested_box(
            DeclarationBox('body').declaration('color', 'red')
        )
        assert media.serialize() == '@media (min-width: 801px) {body {color: red;}}'

    def test_nested_between_declarations(self):
        """Test nested boxes and declarations interleave without separators."""
        box = (
            DeclarationBox('.card')
            .declaration('color', 'red')
            .nested_box(DeclarationBox('&:hover').declaration('color', 'blue'))
            .declaration('margin', '0')
        )
        assert box.serialize() == '.card {color: red;&:hover {color: blue;}margin: 0;}'

    def test_initial_nested_entries(self):
        """Test Nested entries passed to the constructor."""
        box = DeclarationBox('@supports (display: grid)', [
            Nested(DeclarationBox('.grid', [Declaration('display', 'grid')])),
        ])
        assert box.serialize() == '@supports (display: grid) {.grid {display: grid;}}'

    def test_multiple_selectors(self):
        """Test a selector list is emitted verbatim."""
        box = DeclarationBox('#my-id, .my-class, p.my-second-class').declaration(
            'color', 'red'
        )
        assert box.serialize() == '#my-id, .my-class, p.my-second-class {color: red;}'

    def test_builders_return_self(self):
        """Test builder methods return the same box."""
        box = DeclarationBox('a')
        assert box.declaration('color', 'red') is box
        assert box.nested_box(DeclarationBox('b')) is box
        assert box.add_property(Declaration('x', 'y')) is box

    def test_invalid_property_raises(self):
        """Test non-property entries are rejected."""
        with pytest.raises(InvalidEntryError, match='Declaration or Nested'):
            DeclarationBox('a').add_property(('color', 'red'))

    def test_nested_non_box_raises(self):
        """Test Nested must hold a DeclarationBox."""
        with pytest.raises(InvalidEntryError):
            DeclarationBox('a').add_property(Nested('b {}'))

    def test_nest_in_itself_raises(self):
        """Test a box cannot be nested inside itself."""
        outer = DeclarationBox('@media print')
        inner = DeclarationBox('body')
        outer.nested_box(inner)
        with pytest.raises(CyclicTreeError):
            inner.nested_box(outer)

    def test_walk(self):
        """Test walk yields self and nested boxes."""
        inner = DeclarationBox('b')
        outer = DeclarationBox('a').declaration('x', 'y').nested_box(inner)
        assert list(outer.walk()) == [outer, inner]

    def test_walk_deep_chain_built_bottom_up(self):
        """Test a few hundred nested boxes attached one parent at a time."""
        box = DeclarationBox('p').declaration('color', 'red')
        for i in range(300):
            box = DeclarationBox(f'@layer l{i}').nested_box(box)
        boxes = list(box.walk())
        assert len(boxes) == 301
        assert boxes[-1].selector == 'p'
        assert box.serialize().endswith('p {color: red;}' + '}' * 300)

    def test_walk_order_with_siblings(self):
        """Test walk visits nested boxes depth first in insertion order."""
        a = DeclarationBox('a').nested_box(DeclarationBox('a1'))
        b = DeclarationBox('b')
        root = DeclarationBox('root').nested_box(a).declaration('x', 'y').nested_box(b)
        assert [box.selector for box in root.walk()] == ['root', 'a', 'a1', 'b']

    def test_repr_and_str(self):
        """Test string representations."""
        box = DeclarationBox('.a').declaration('color', 'red')
        assert repr(box) == "DeclarationBox('.a', properties=1)"
        assert str(box) == '.a {color: red;}'


class TestStyleBlock:
    """Tests for StyleBlock."""

    def test_empty(self):
        """Test an empty block still has one style pair."""
        assert StyleBlock().serialize() == '<style></style>'

    def test_initial_entries_and_chaining(self):
        """Test constructor entries followed by chained boxes."""
        sheet = StyleBlock([
            Box(DeclarationBox('.my-class', [
                Declaration('height', '250 vh'),
                Declaration('width', '100 px'),
            ])),
        ]).add_box(DeclarationBox('.my-second-class').declaration('color', 'red'))
        assert sheet.serialize() == (
            '<style>.my-class {height: 250 vh;width: 100 px;}'
            '.my-second-class {color: red;}</style>'
        )

    def test_raw_statement_gets_semicolon(self):
        """Test raw statements are followed by a semicolon."""
        sheet = (
            StyleBlock()
            .add_raw_statement("@import 'custom.css'")
            .add_box(DeclarationBox('.my-class')
                     .declaration('height', '250vh')
                     .declaration('width', '100px'))
            .add_box(DeclarationBox('.my-second-class').declaration('color', 'red'))
        )
        assert sheet.serialize() == (
            "<style>@import 'custom.css';"
            ".my-class {height: 250vh;width: 100px;}"
            ".my-second-class {color: red;}</style>"
        )

    def test_raw_statement_semicolon_is_not_deduplicated(self):
        """Test a trailing semicolon supplied by the caller is doubled."""
        sheet = StyleBlock([RawStatement("@charset 'utf-8';")])
        assert sheet.serialize() == "<style>@charset 'utf-8';;</style>"

    def test_media_query(self):
        """Test a nested media query inside a block."""
        sheet = StyleBlock().add_box(
            DeclarationBox('@media (min-width: 801px)')
            .nested_box(DeclarationBox('body').declaration('color', 'red'))
        )
        assert sheet.serialize() == (
            '<style>@media (min-width: 801px) {body {color: red;}}</style>'
        )

    def test_builders_return_self(self):
        """Test builder methods return the same block."""
        sheet = StyleBlock()
        assert sheet.add_box(DeclarationBox('a')) is sheet
        assert sheet.add_raw_statement('@import "a.css"') is sheet
        assert sheet.add_entry(RawStatement('@x')) is sheet

    def test_invalid_entry_raises(self):
        """Test unsupported entries are rejected."""
        with pytest.raises(InvalidEntryError, match='Box or RawStatement'):
            StyleBlock([DeclarationBox('a')])

    def test_box_must_hold_declaration_box(self):
        """Test Box must wrap a DeclarationBox."""
        with pytest.raises(InvalidEntryError):
            StyleBlock().add_entry(Box('a {}'))

    def test_idempotent(self):
        """Test repeated serialization gives identical output."""
        sheet = StyleBlock().add_raw_statement("@import 'a.css'")
        assert sheet.serialize() == sheet.serialize()
        assert repr(sheet) == 'StyleBlock(entries=1)'
