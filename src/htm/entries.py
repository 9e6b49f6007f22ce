# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Entry variants stored inside htm trees.

Each tree keeps an ordered list of entries drawn from a closed set of
variants. The variants are small frozen dataclasses; the unions below name
the set each tree accepts:

- ``AttributeEntry``: ``KeyValue`` | ``Flag`` | ``EventBinding``
- ``ChildEntry``: ``Element`` | ``Text``
- ``PropertyEntry``: ``Declaration`` | ``Nested``
- ``StyleEntry``: ``Box`` | ``RawStatement``
- ``DocEntry``: ``Element`` | ``Style``

Example:
    >>> render_attribute(KeyValue('id', 'main'))
    "id='main'"
    >>> render_attribute(Flag('required'))
    'required'
    >>> render_attribute(EventBinding('onclick', 'go()'))
    'onclick=go()'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING, Union

from .exceptions import InvalidEntryError

if TYPE_CHECKING:
    from .cssbox import DeclarationBox
    from .node import Node
    from .stylesheet import StyleBlock


# Attribute values are always wrapped in single quotes, never escaped.
QUOTE = "'"


# === Attributes ===

@dataclass(frozen=True, slots=True)
class KeyValue:
    """A ``key='value'`` attribute."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Flag:
    """A bare boolean attribute such as ``required`` or ``controls``."""

    name: str


@dataclass(frozen=True, slots=True)
class EventBinding:
    """An event handler attribute; the handler is emitted unquoted."""

    event: str
    handler: str


# === Element children and document entries ===

@dataclass(frozen=True, slots=True)
class Element:
    """A nested markup element."""

    node: Node


@dataclass(frozen=True, slots=True)
class Text:
    """A literal text run, emitted verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Style:
    """An embedded stylesheet inside a document."""

    block: StyleBlock


# === CSS properties ===

@dataclass(frozen=True, slots=True)
class Declaration:
    """A single ``key: value;`` declaration."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Nested:
    """A declaration box nested inside another (e.g. under ``@media``)."""

    box: DeclarationBox


# === Stylesheet entries ===

@dataclass(frozen=True, slots=True)
class Box:
    """A full selector/declaration box."""

    box: DeclarationBox


@dataclass(frozen=True, slots=True)
class RawStatement:
    """A raw statement such as ``@import 'x.css'``; ``;`` is appended."""

    text: str


AttributeEntry = Union[KeyValue, Flag, EventBinding]
ChildEntry = Union[Element, Text]
PropertyEntry = Union[Declaration, Nested]
StyleEntry = Union[Box, RawStatement]
DocEntry = Union[Element, Style]

ATTRIBUTE_KINDS = (KeyValue, Flag, EventBinding)
CHILD_KINDS = (Element, Text)
PROPERTY_KINDS = (Declaration, Nested)
STYLE_KINDS = (Box, RawStatement)
DOC_KINDS = (Element, Style)


def ensure_kind(obj: Any, kinds: type | tuple[type, ...], expected: str) -> Any:
    """Return ``obj`` if it is an instance of ``kinds``.

    Args:
        obj: The object about to be stored in a tree.
        kinds: Accepted class or tuple of classes.
        expected: Human readable name of the accepted kinds, for the message.

    Raises:
        InvalidEntryError: If ``obj`` is of any other type.
    """
    if not isinstance(obj, kinds):
        raise InvalidEntryError(
            f"expected {expected}, got {type(obj).__name__}: {obj!r}"
        )
    return obj


def render_attribute(entry: AttributeEntry) -> str:
    """Return the serialized form of an attribute, without leading space."""
    if isinstance(entry, KeyValue):
        return f"{entry.key}={QUOTE}{entry.value}{QUOTE}"
    if isinstance(entry, Flag):
        return entry.name
    if isinstance(entry, EventBinding):
        return f"{entry.event}={entry.handler}"
    raise InvalidEntryError(f"not an attribute entry: {entry!r}")
