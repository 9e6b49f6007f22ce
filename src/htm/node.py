# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - a markup element and its serializer.

A Node owns a tag name, an ordered list of attributes and an ordered list of
children (nested Nodes or text runs). Builder methods append in place and
return the node itself, so a whole fragment can be written as one chained
expression.

Example:
    Building a form::

        from htm import Node

        form = (
            Node('form')
            .kv_attr('action', '')
            .add_child(Node('label').add_text('Enter name: '))
            .add_child(Node('input').flag_attr('required'))
        )
        form.serialize()
        # "<form action=''><label>Enter name: </label><input required></form>"

Nothing is escaped or validated: attribute values and text are emitted
exactly as given.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .entries import (
    ATTRIBUTE_KINDS,
    AttributeEntry,
    CHILD_KINDS,
    ChildEntry,
    Element,
    EventBinding,
    Flag,
    KeyValue,
    Text,
    ensure_kind,
    render_attribute,
)
from .exceptions import CyclicTreeError

logger = logging.getLogger(__name__)


# Elements that never get a closing tag. Matched exactly (case-sensitive).
VOID_ELEMENTS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img',
    'input', 'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})


class Node:
    """A markup element.

    Attributes:
        tag: The element's tag name, emitted verbatim.
        attributes: Attribute entries in insertion order. Duplicate keys
            are kept and all emitted.
        children: Child entries (``Element`` or ``Text``) in insertion order.

    Example:
        >>> p = Node('p', [KeyValue('id', 'my-id')]).add_text('Hello')
        >>> p.serialize()
        "<p id='my-id'>Hello</p>"
    """

    __slots__ = ('tag', 'attributes', 'children')

    def __init__(
        self,
        tag: str,
        attributes: Iterable[AttributeEntry] | None = None,
    ) -> None:
        """Initialize a Node.

        Args:
            tag: The tag name (e.g. 'div', 'input').
            attributes: Optional initial attribute entries.
        """
        self.tag = tag
        self.attributes: list[AttributeEntry] = []
        self.children: list[ChildEntry] = []
        for entry in attributes or ():
            self.add_attribute(entry)

    def __repr__(self) -> str:
        return (
            f"Node({self.tag!r}, attributes={len(self.attributes)}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.serialize()

    @property
    def is_void(self) -> bool:
        """True if this element is rendered without a closing tag."""
        return self.tag in VOID_ELEMENTS

    # === Attributes ===

    def add_attribute(self, entry: AttributeEntry) -> Node:
        """Append an attribute entry and return self."""
        self.attributes.append(
            ensure_kind(entry, ATTRIBUTE_KINDS, 'KeyValue, Flag or EventBinding')
        )
        return self

    def kv_attr(self, key: str, value: str) -> Node:
        """Append a ``key='value'`` attribute and return self."""
        return self.add_attribute(KeyValue(key, value))

    def flag_attr(self, name: str) -> Node:
        """Append a bare boolean attribute and return self."""
        return self.add_attribute(Flag(name))

    def event_attr(self, event: str, handler: str) -> Node:
        """Append an unquoted event handler attribute and return self.

        Example:
            >>> Node('button').event_attr('onclick', 'submit()').serialize()
            '<button onclick=submit()></button>'
        """
        return self.add_attribute(EventBinding(event, handler))

    # === Children ===

    def add_child(self, child: Node) -> Node:
        """Append a child element and return self.

        The child becomes part of this tree; callers should not keep
        mutating it through another reference.

        Raises:
            InvalidEntryError: If child is not a Node.
            CyclicTreeError: If self is child or one of its descendants.
        """
        ensure_kind(child, Node, 'Node')
        if any(node is self for node in child.walk()):
            raise CyclicTreeError(f"cannot attach <{self.tag}> inside itself")
        if self.is_void:
            logger.debug(
                "child <%s> added to void element <%s>; "
                "it will be rendered with no closing tag",
                child.tag, self.tag,
            )
        self.children.append(Element(child))
        return self

    def add_text(self, text: str) -> Node:
        """Append a text run and return self. Empty text is kept as an entry."""
        self.children.append(Text(text))
        return self

    def add_entry(self, entry: ChildEntry) -> Node:
        """Append an Element or Text entry and return self.

        Element entries go through add_child, so the same checks apply.

        Raises:
            InvalidEntryError: If entry is neither, or an Element entry does
                not hold a Node.
            CyclicTreeError: If the Element's node contains self.
        """
        ensure_kind(entry, CHILD_KINDS, 'Element or Text')
        if isinstance(entry, Element):
            return self.add_child(entry.node)
        return self.add_text(entry.text)

    def walk(self) -> Iterator[Node]:
        """Yield this node and every descendant element, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed([
                entry.node for entry in node.children if isinstance(entry, Element)
            ]))

    # === Serialization ===

    def serialize(self) -> str:
        """Return the markup for this element and its subtree.

        Reads the tree without changing it; repeated calls give the same
        string until the tree is mutated again. Text runs are emitted with
        str(), like attribute values.

        Each nesting level uses one Python stack frame, so trees deeper than
        the interpreter's recursion limit (about 1000) raise RecursionError.
        """
        parts = [f"<{self.tag}"]
        for entry in self.attributes:
            parts.append(f" {render_attribute(entry)}")
        parts.append(">")
        for entry in self.children:
            if isinstance(entry, Element):
                parts.append(entry.node.serialize())
            else:
                parts.append(f"{entry.text}")
        if not self.is_void:
            parts.append(f"</{self.tag}>")
        return "".join(parts)
