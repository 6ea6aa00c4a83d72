# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import hypothesis
from hypothesis import strategies
from typing_extensions import NamedTuple, Self

__all__ = ()

if TYPE_CHECKING:
    import click.testing

hypothesis_settings_coverage_compatible = (
    hypothesis.settings(
        # The Python tracer used by coverage slows everything down
        # considerably; relax the deadline accordingly.
        deadline=(
            40 * deadline
            if (deadline := hypothesis.settings().deadline) is not None
            else None
        ),
        suppress_health_check=(hypothesis.HealthCheck.too_slow,),
    )
    if sys.gettrace() is not None
    else hypothesis.settings()
)

# Numeric version components, as rendered by `str(int)` (no leading
# zeros).
version_components = strategies.integers(min_value=0, max_value=10**9)

# Pre-release identifiers that Semantic Versioning 2.0.0 accepts.
prerelease_identifiers = strategies.from_regex(
    r'(?:[1-9][0-9]{0,3}|[a-zA-Z-][0-9a-zA-Z-]{0,5})', fullmatch=True
)

# Characters never valid anywhere in a version string.
forbidden_version_characters = strategies.sampled_from(
    ' \t\n!#$%&*,/:;<=>?@_~é٣１'
)


class ReadableResult(NamedTuple):
    """Helper class for formatting and testing click.testing.Result objects."""

    exception: BaseException | None
    exit_code: int
    output: str
    stderr: str

    @classmethod
    def parse(cls, r: click.testing.Result, /) -> Self:
        try:
            stderr = r.stderr
        except ValueError:
            stderr = r.output
        return cls(r.exception, r.exit_code, r.output or '', stderr or '')

    def clean_exit(
        self, *, output: str = '', empty_stderr: bool = False
    ) -> bool:
        """Return whether the invocation exited cleanly.

        Args:
            output:
                An expected output string.
            empty_stderr:
                If true, additionally require standard error to be
                empty.

        """
        return (
            (
                not self.exception
                or (
                    isinstance(self.exception, SystemExit)
                    and self.exit_code == 0
                )
            )
            and (not output or output in self.output)
            and (not empty_stderr or not self.stderr)
        )

    def error_exit(
        self, *, error: str | type[BaseException] = BaseException
    ) -> bool:
        """Return whether the invocation exited uncleanly.

        Args:
            error:
                An expected error message, or an expected exception
                type.

        """
        if isinstance(error, str):
            return (
                isinstance(self.exception, SystemExit)
                and self.exit_code > 0
                and (not error or error in self.stderr)
            )
        else:  # noqa: RET505
            return isinstance(self.exception, error)
