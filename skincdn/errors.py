# -*- coding: utf-8 -*-
"""Error types raised by skincdn."""

from __future__ import annotations

from typing import Optional


class CatalogError(RuntimeError):
    pass


class CatalogIntegrityError(CatalogError):
    """A required catalog section is missing or malformed.

    This is the only fatal error of the engine: a snapshot is never built from
    an invalid catalog.
    """

    def __init__(self, message: str, *, section: Optional[str] = None):
        super().__init__(message)
        self.section = section
