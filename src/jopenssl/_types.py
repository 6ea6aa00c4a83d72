# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Types used by jopenssl."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from typing_extensions import NamedTuple

if TYPE_CHECKING:
    from typing_extensions import Any, TypeIs

__all__ = (
    'PROVIDER_VERSION_PATTERN',
    'SEMANTIC_VERSION_PATTERN',
    'VersionInfo',
    'is_provider_version',
    'is_semantic_version',
)

# Semantic Versioning 2.0.0, with ASCII digits only.  (`\d` would also
# accept other Unicode decimal digits.)
SEMANTIC_VERSION_PATTERN = re.compile(
    r"""
    (?:0|[1-9][0-9]*) \. (?:0|[1-9][0-9]*) \. (?:0|[1-9][0-9]*)
    (?:
        -
        (?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)
        (?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*
    )?
    (?:\+[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?
    """,
    re.VERBOSE,
)
PROVIDER_VERSION_PATTERN = re.compile(r'[0-9]+\.[0-9]+(?:\.[0-9]+)?')


class VersionInfo(NamedTuple):
    """Library and provider version, as a record.

    Attributes:
        library_version:
            The semantic version of this binding's release.
        provider_version:
            The version of the external cryptographic provider (Bouncy
            Castle) that this release targets.

    """

    library_version: str
    """"""
    provider_version: str
    """"""


def is_semantic_version(obj: Any, /) -> TypeIs[str]:  # noqa: ANN401
    """Check if `obj` is a semantic version string.

    Args:
        obj: The object to test.

    Returns:
        True if `obj` is a string of the form `MAJOR.MINOR.PATCH`,
        optionally followed by pre-release and build metadata, as per
        Semantic Versioning 2.0.0.  False otherwise.

    Examples:
        >>> is_semantic_version('0.10.4')
        True
        >>> is_semantic_version('1.0.0-rc.1+build.5')
        True
        >>> is_semantic_version('1.61')
        False
        >>> is_semantic_version(b'0.10.4')
        False

    """
    return (
        isinstance(obj, str)
        and SEMANTIC_VERSION_PATTERN.fullmatch(obj) is not None
    )


def is_provider_version(obj: Any, /) -> TypeIs[str]:  # noqa: ANN401
    """Check if `obj` is a provider version string.

    Provider versions use two or three numeric components, e.g. `1.61`
    or `1.61.1`.

    Args:
        obj: The object to test.

    Returns:
        True if `obj` is a well-formed provider version string, else
        false.

    """
    return (
        isinstance(obj, str)
        and PROVIDER_VERSION_PATTERN.fullmatch(obj) is not None
    )
