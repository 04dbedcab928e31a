# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how version strings are accepted.

    Attributes:
        allow_v_prefix: Accept a single leading ``v`` (e.g. ``v1.2.3``)
        strip_whitespace: Strip surrounding whitespace before matching
    """

    allow_v_prefix: bool = True
    strip_whitespace: bool = True

    def prepare(self, version_string: str) -> str:
        """Apply whitespace and prefix handling to a raw version string."""
        if self.strip_whitespace:
            version_string = version_string.strip()
        if self.allow_v_prefix and version_string.startswith("v"):
            version_string = version_string[1:]
        return version_string


DEFAULT_CONFIG = ParserConfig()
