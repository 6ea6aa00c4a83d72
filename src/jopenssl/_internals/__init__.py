# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""jopenssl internals.

Warning:
    Non-public package (implementation detail), provided for didactical
    and educational purposes only. Subject to change without notice,
    including removal.

"""

import jopenssl

__all__ = ()

PROG_NAME = jopenssl.__distribution_name__
VERSION = jopenssl.__version__
AUTHOR = jopenssl.__author__
