# SPDX-License-Identifier: MIT
"""Conversion between Version objects and stored string columns.

Persistence layers call these at their boundary; the canonical version
string is the only storage format.
"""

from __future__ import annotations

from typing import Optional, Union

from .semver import Version, parse_version


def decode_version(stored: Optional[str]) -> Optional[Version]:
    """Turn a stored value back into a Version.

    Returns:
        None for a missing or empty value, otherwise the parsed Version

    Raises:
        InvalidVersionError: If the stored text is not a valid version
    """
    if stored is None or stored == "":
        return None
    return parse_version(stored)


def encode_version(value: Union[Version, str, None]) -> Optional[str]:
    """Render a value for storage in canonical form.

    Strings are validated and re-rendered, so "v1.2.3" is stored as "1.2.3".

    Raises:
        InvalidVersionError: If ``value`` is a string that is not a valid version
    """
    if value is None:
        return None
    if isinstance(value, Version):
        return str(value)
    return str(parse_version(value))
