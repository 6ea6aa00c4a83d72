# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Version descriptor of the JOpenSSL cryptography binding."""

from __future__ import annotations

import warnings

from jopenssl import version
from jopenssl.version import (
    BOUNCY_CASTLE_VERSION,
    VERSION,
    get_library_version,
    get_provider_version,
    version_info,
)

__all__ = (
    'BOUNCY_CASTLE_VERSION',
    'VERSION',
    'get_library_version',
    'get_provider_version',
    'version',
    'version_info',
)
__author__ = 'Marco Ricci <software@the13thletter.info>'
__distribution_name__ = 'jopenssl'
__version__ = VERSION

# Old spelling of the namespace name; resolves to the `jopenssl.version`
# module object itself.
_LEGACY_ALIASES = {'Jopenssl': 'jopenssl.version'}


def __getattr__(name: str) -> object:
    if name in _LEGACY_ALIASES:
        warnings.warn(
            f'{__name__}.{name} is deprecated; '
            f'use {_LEGACY_ALIASES[name]} instead',
            DeprecationWarning,
            stacklevel=2,
        )
        return version
    msg = f'module {__name__!r} has no attribute {name!r}'
    raise AttributeError(msg)
