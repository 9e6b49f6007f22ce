# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""htm - Fluent builders for HTML markup and embedded CSS.

Trees of elements, declaration boxes and stylesheets are assembled with
chained calls and flattened to a single string on demand. There is no DOM,
no parsing and no escaping.
"""

__version__ = "0.1.0"

from .cssbox import DeclarationBox
from .document import DOCTYPE, Document
from .entries import (
    AttributeEntry,
    Box,
    ChildEntry,
    Declaration,
    DocEntry,
    Element,
    EventBinding,
    Flag,
    KeyValue,
    Nested,
    PropertyEntry,
    RawStatement,
    Style,
    StyleEntry,
    Text,
    render_attribute,
)
from .exceptions import CyclicTreeError, HtmError, InvalidEntryError
from .node import VOID_ELEMENTS, Node
from .stylesheet import StyleBlock

__all__ = [
    # Trees
    "Node",
    "DeclarationBox",
    "StyleBlock",
    "Document",
    # Entry variants
    "KeyValue",
    "Flag",
    "EventBinding",
    "Element",
    "Text",
    "Declaration",
    "Nested",
    "Box",
    "RawStatement",
    "Style",
    # Entry unions
    "AttributeEntry",
    "ChildEntry",
    "PropertyEntry",
    "StyleEntry",
    "DocEntry",
    "render_attribute",
    # Constants
    "VOID_ELEMENTS",
    "DOCTYPE",
    # Exceptions
    "HtmError",
    "InvalidEntryError",
    "CyclicTreeError",
]
