# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib
"""Run [`jopenssl.cli.jopenssl`][] on import."""

import sys

if __name__ == '__main__':
    from jopenssl.cli import jopenssl

    sys.exit(jopenssl())
