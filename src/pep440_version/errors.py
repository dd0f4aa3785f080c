# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings."""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Raised when a string is not a valid PEP 440 version.

    Attributes:
        version: The input exactly as it was passed in (not stripped)
        message: Human readable description of the failure
        segment: Name of the segment that failed integer conversion, if any
        lexeme: The raw text of that segment, if any
    """

    def __init__(
        self,
        version: str,
        message: str = "",
        segment: Optional[str] = None,
        lexeme: Optional[str] = None,
    ):
        self.version = version
        self.segment = segment
        self.lexeme = lexeme
        if not message:
            if segment is not None:
                message = f"Invalid integer value for {segment}: {lexeme}"
            else:
                message = f"Unable to parse version string: '{version}'"
        self.message = message
        super().__init__(self.message)
