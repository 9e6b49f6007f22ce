# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""htm exceptions.

Serialization never fails. These are raised only when a builder is handed
something that cannot be part of a tree.
"""

from __future__ import annotations


class HtmError(Exception):
    """Base exception for htm errors."""

    pass


class InvalidEntryError(HtmError, TypeError):
    """Raised when an object of the wrong kind is added to a tree."""

    pass


class CyclicTreeError(HtmError, ValueError):
    """Raised when a tree would be attached inside itself."""

    pass
