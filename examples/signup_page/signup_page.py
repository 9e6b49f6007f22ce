# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Signup page - Example document built with htm.

A didactic example combining a stylesheet with a media query, a form with
key/value, flag and event attributes, and a video with void source
elements.
"""

from __future__ import annotations

from htm import DeclarationBox, Document, Node, StyleBlock


def build_styles() -> StyleBlock:
    """Stylesheet with an @import, a plain rule and a media query."""
    return (
        StyleBlock()
        .add_raw_statement("@import 'custom.css'")
        .add_box(DeclarationBox('.form-example')
                 .declaration('margin', '0 auto')
                 .declaration('width', '400px'))
        .add_box(DeclarationBox('@media (min-width: 801px)')
                 .nested_box(DeclarationBox('body')
                             .declaration('color', 'red')))
    )


def field(name: str, kind: str, label: str) -> Node:
    """A labelled required input wrapped in a div."""
    return (
        Node('div').kv_attr('class', 'form-example')
        .add_child(Node('label').kv_attr('for', name).add_text(label))
        .add_child(Node('input')
                   .kv_attr('type', kind)
                   .kv_attr('name', name)
                   .kv_attr('id', name)
                   .flag_attr('required'))
    )


def build_form() -> Node:
    """The signup form."""
    return (
        Node('form')
        .kv_attr('action', '')
        .kv_attr('method', 'get')
        .kv_attr('class', 'form-example')
        .event_attr('onsubmit', 'validate()')
        .add_child(field('name', 'text', 'Enter your name: '))
        .add_child(field('email', 'email', 'Enter your email: '))
        .add_child(Node('div').kv_attr('class', 'form-example')
                   .add_child(Node('input')
                              .kv_attr('type', 'submit')
                              .kv_attr('value', 'Subscribe!')))
    )


def build_video() -> Node:
    """A video element with two sources and fallback text."""
    return (
        Node('video')
        .flag_attr('controls')
        .kv_attr('width', '250')
        .add_child(Node('source')
                   .kv_attr('src', '/media/examples/flower.webm')
                   .kv_attr('type', 'video/webm'))
        .add_child(Node('source')
                   .kv_attr('src', '/media/examples/flower.mp4')
                   .kv_attr('type', 'video/mp4'))
        .add_text("Sorry, your browser doesn't support embedded videos.")
    )


def build_page() -> Document:
    """Assemble the whole page."""
    return (
        Document()
        .add_style(build_styles())
        .add_element(build_form())
        .add_element(build_video())
    )


def main() -> None:
    print(build_page().serialize())


if __name__ == "__main__":
    main()
