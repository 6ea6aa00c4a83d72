# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Version descriptor of the JOpenSSL binding.

The binding's own release version and the version of the Bouncy Castle
provider it targets are process-wide constants.  They are checked for
well-formedness once, when this module is imported; a malformed
constant makes the import fail.

The module is additionally reachable as `jopenssl.Jopenssl`, the old
spelling of its name.  That alias is deprecated.

"""

from __future__ import annotations

from jopenssl import _types

__all__ = (
    'BOUNCY_CASTLE_VERSION',
    'LIBRARY_VERSION',
    'PROVIDER_VERSION',
    'VERSION',
    'InvalidVersionError',
    'get_library_version',
    'get_provider_version',
    'validate_version_info',
    'version_info',
)

VERSION = '0.10.4'
BOUNCY_CASTLE_VERSION = '1.61'

LIBRARY_VERSION = VERSION
PROVIDER_VERSION = BOUNCY_CASTLE_VERSION


class InvalidVersionError(ValueError):
    """A version string is not well-formed.

    Attributes:
        field: The name of the offending `VersionInfo` field.
        value: The offending value.

    """

    def __init__(self, field: str, value: object) -> None:
        super().__init__(field, value)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        return f'Invalid {self.field}: {self.value!r}'


def get_library_version() -> str:
    """Return the release version of this binding."""
    return VERSION


def get_provider_version() -> str:
    """Return the Bouncy Castle version this release targets."""
    return BOUNCY_CASTLE_VERSION


def version_info() -> _types.VersionInfo:
    """Return the library and provider versions as a record.

    Returns:
        A [`VersionInfo`][_types.VersionInfo] whose fields are the very
        same string objects as [`VERSION`][] and
        [`BOUNCY_CASTLE_VERSION`][].

    """
    return _types.VersionInfo(
        library_version=VERSION,
        provider_version=BOUNCY_CASTLE_VERSION,
    )


def validate_version_info(info: _types.VersionInfo, /) -> _types.VersionInfo:
    """Check that both versions in `info` are well-formed.

    Args:
        info: The version record to check.

    Returns:
        The record, unchanged.

    Raises:
        InvalidVersionError:
            The library version is not a semantic version, or the
            provider version is not of the form `MAJOR.MINOR` or
            `MAJOR.MINOR.PATCH`.

    """
    if not _types.is_semantic_version(info.library_version):
        raise InvalidVersionError('library_version', info.library_version)
    if not _types.is_provider_version(info.provider_version):
        raise InvalidVersionError('provider_version', info.provider_version)
    return info


validate_version_info(version_info())
