# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib


"""Command-line machinery for jopenssl.

Warning:
    Non-public module (implementation detail), provided for didactical and
    educational purposes only. Subject to change without notice, including
    removal.

"""

from __future__ import annotations

import collections
import importlib.metadata
import logging
import warnings
from typing import TYPE_CHECKING, Callable, Literal, TextIO, TypeVar

import click
from typing_extensions import Any, ParamSpec

from jopenssl import _internals, version

if TYPE_CHECKING:
    import types
    from collections.abc import MutableSequence

    from typing_extensions import Self, TypeAlias

    _ShowWarning: TypeAlias = Callable[
        [str | Warning, type[Warning], str, int, TextIO | None, str | None],
        None,
    ]
    _ExitFunc: TypeAlias = Callable[
        [
            type[BaseException] | None,
            BaseException | None,
            types.TracebackType | None,
        ],
        None,
    ]

PROG_NAME = _internals.PROG_NAME
VERSION = _internals.VERSION
PROVIDER_NAME = 'Bouncy Castle'
VERSION_OUTPUT_WRAPPING_WIDTH = 72

# Help texts
VERSION_OPTION_HELP_TEXT = 'Show applicable version information, then exit.'
DEBUG_OPTION_HELP_TEXT = 'Also emit debug information.  Implies --verbose.'
VERBOSE_OPTION_HELP_TEXT = 'Emit extra/progress information to standard error.'
QUIET_OPTION_HELP_TEXT = 'Suppress even warnings; emit only errors.'


# Logging
# =======


class ClickEchoStderrHandler(logging.Handler):
    """A [`logging.Handler`][] writing to standard error via `click`."""

    def emit(self, record: logging.LogRecord) -> None:
        """Format the record, then [`click.echo`][] it to standard error."""
        click.echo(
            self.format(record),
            err=True,
            color=getattr(record, 'color', None),
        )


class CLIofPackageFormatter(logging.Formatter):
    """A [`logging.LogRecord`][] formatter for the CLI of a Python package.

    Records are rendered as console diagnostics: every line of the
    message is prefixed with the program name and a label derived from
    the record's level.  Keep this formatter for standard error output
    only; log files deserve their own formatter.

    """

    def __init__(
        self,
        *,
        prog_name: str = PROG_NAME,
        package_name: str | None = None,
    ) -> None:
        super().__init__()
        self.prog_name = prog_name
        self.package_name = (
            package_name
            if package_name is not None
            else prog_name.lower().replace(' ', '_').replace('-', '_')
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record for standard error console output.

        Each line of the message becomes `"PROG_NAME: LABEL" + line`.
        `LABEL` is `"Debug: "` for [`logging.DEBUG`][], `"Warning: "`
        for [`logging.WARNING`][] (or `"Deprecation warning: "` if the
        logger is named `PKG.deprecation`), and empty for
        [`logging.INFO`][], [`logging.ERROR`][] and
        [`logging.CRITICAL`][].  Warning labels are highlighted.

        Args:
            record: A log record.

        Returns:
            A formatted log record.

        Raises:
            AssertionError:
                The log level is not supported.

        """
        preliminary_result = record.getMessage()
        prefix = f'{self.prog_name}: '
        if record.levelname == 'DEBUG':
            level_indicator = 'Debug: '
        elif record.levelname == 'INFO':
            level_indicator = ''
        elif record.levelname == 'WARNING':
            level_indicator = (
                f'{click.style("Deprecation warning", bold=True)}: '
                if record.name.endswith('.deprecation')
                else f'{click.style("Warning", bold=True)}: '
            )
        elif record.levelname in {'ERROR', 'CRITICAL'}:
            level_indicator = ''
        else:  # pragma: no cover [failsafe]
            msg = f'Unsupported logging level: {record.levelname}'
            raise AssertionError(msg)
        parts = [
            ''.join(
                prefix + level_indicator + line
                for line in preliminary_result.splitlines(True)  # noqa: FBT003
            )
        ]
        if record.exc_info:
            parts.append(self.formatException(record.exc_info) + '\n')
        return ''.join(parts)


class StandardCLILogging:
    """The CLI's logging handlers, shared across invocations."""

    prog_name = PROG_NAME
    package_name = PROG_NAME.lower().replace(' ', '_').replace('-', '_')
    cli_formatter = CLIofPackageFormatter(
        prog_name=prog_name, package_name=package_name
    )
    cli_handler = ClickEchoStderrHandler()
    cli_handler.addFilter(logging.Filter(name=package_name))
    cli_handler.setFormatter(cli_formatter)
    cli_handler.setLevel(logging.WARNING)
    warnings_handler = ClickEchoStderrHandler()
    warnings_handler.addFilter(logging.Filter(name='py.warnings'))
    warnings_handler.setFormatter(cli_formatter)
    warnings_handler.setLevel(logging.WARNING)

    @classmethod
    def ensure_standard_logging(cls) -> StandardLoggingContextManager:
        """Return a context manager to ensure standard logging is set up."""
        return StandardLoggingContextManager(
            handler=cls.cli_handler,
            root_logger=cls.package_name,
        )

    @classmethod
    def ensure_standard_warnings_logging(
        cls,
    ) -> StandardWarningsLoggingContextManager:
        """Return a context manager to ensure warnings logging is set up."""
        return StandardWarningsLoggingContextManager(
            handler=cls.warnings_handler,
        )


class StandardLoggingContextManager:
    """A reentrant context manager installing a logging handler.

    Adds `handler` to the named logger (the root logger by default)
    unless it is already attached, and removes it again on exit only if
    this context added it.

    Reentrant, but not thread safe, because it temporarily modifies
    global state.

    """

    def __init__(
        self,
        handler: logging.Handler,
        root_logger: str | None = None,
    ) -> None:
        self.handler = handler
        self.root_logger_name = root_logger
        self.base_logger = logging.getLogger(self.root_logger_name)
        self.action_required: MutableSequence[bool] = collections.deque()

    def __enter__(self) -> Self:
        self.action_required.append(
            self.handler not in self.base_logger.handlers
        )
        if self.action_required[-1]:
            self.base_logger.addHandler(self.handler)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> Literal[False]:
        if self.action_required[-1]:
            self.base_logger.removeHandler(self.handler)
        self.action_required.pop()
        return False


class StandardWarningsLoggingContextManager(StandardLoggingContextManager):
    """A reentrant context manager diverting warnings into logging.

    Within the context, [`warnings.showwarning`][] logs to the
    `py.warnings` logger, and `handler` is attached to that logger (if
    not already attached).  The previous warnings state is restored on
    exit.

    Reentrant, but not thread safe, because it temporarily modifies
    global state.

    """

    def __init__(
        self,
        handler: logging.Handler,
    ) -> None:
        super().__init__(handler=handler, root_logger='py.warnings')
        self.stack: MutableSequence[tuple[_ExitFunc, _ShowWarning]] = (
            collections.deque()
        )

    def __enter__(self) -> Self:
        def showwarning(  # noqa: PLR0913,PLR0917
            message: str | Warning,
            category: type[Warning],
            filename: str,
            lineno: int,
            file: TextIO | None = None,
            line: str | None = None,
        ) -> None:
            if file is not None:  # pragma: no cover [external-api]
                self.stack[0][1](
                    message, category, filename, lineno, file, line
                )
            else:
                logging.getLogger('py.warnings').warning(
                    str(
                        warnings.formatwarning(
                            message, category, filename, lineno, line
                        )
                    )
                )

        ctx = warnings.catch_warnings()
        exit_func = ctx.__exit__
        ctx.__enter__()
        self.stack.append((exit_func, warnings.showwarning))
        warnings.showwarning = showwarning
        return super().__enter__()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> Literal[False]:
        ret = super().__exit__(exc_type, exc_value, exc_tb)
        val = self.stack.pop()[0](exc_type, exc_value, exc_tb)
        assert not val
        return ret


P = ParamSpec('P')
R = TypeVar('R')


def adjust_logging_level(
    ctx: click.Context,
    /,
    param: click.Parameter | None = None,
    value: int | None = None,
) -> None:
    """Change which log records are emitted to standard error.

    Sets the level of the [`StandardCLILogging`][] handler and of the
    package logger to `value`.

    """
    # Several options share this callback, so it may run more than once
    # per invocation.  Each run must be idempotent.  Unset flags arrive
    # as `None` or `False`, depending on the click version, and must not
    # override a level set by a parent command.
    if param is None or not value or ctx.resilient_parsing:
        return
    StandardCLILogging.cli_handler.setLevel(value)
    logging.getLogger(StandardCLILogging.package_name).setLevel(value)


# Top-level command
# =================


class TopLevelCLIEntryPoint(click.Group):
    """A [`click.Group`][] that sets up logging when called as a function.

    Calling the group installs the standard CLI logging handler and
    diverts Python warnings to the logging subsystem for the duration
    of the call.  Calling `.main` directly bypasses this setup.

    """

    def __call__(  # pragma: no cover [external-api]
        self,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        """"""  # noqa: D419
        # click.testing drives `.main`, not `__call__`, so coverage
        # never sees this.
        with (
            StandardCLILogging.ensure_standard_logging(),
            StandardCLILogging.ensure_standard_warnings_logging(),
        ):
            return self.main(*args, **kwargs)


# Version output
# ==============


def common_version_output(
    ctx: click.Context,
    param: click.Parameter,
    value: bool,  # noqa: FBT001
) -> None:
    del param, value
    major_dependencies = [f'click {importlib.metadata.version("click")}']
    click.echo(
        ' '.join([
            click.style(PROG_NAME, bold=True),
            VERSION,
        ]),
        color=ctx.color,
    )
    for dependency in major_dependencies:
        click.echo(f'Using {dependency}', color=ctx.color)


def print_version_info_types(
    version_info_types: dict[str, list[str]],
    /,
    *,
    ctx: click.Context,
) -> None:
    for label, item_list in version_info_types.items():
        if item_list:
            current_length = len(label)
            formatted_item_list_pieces: list[str] = []
            n = len(item_list)
            for i, item in enumerate(item_list, start=1):
                space = ' '
                punctuation = '.' if i == n else ','
                if (
                    current_length + len(space) + len(item) + len(punctuation)
                    <= VERSION_OUTPUT_WRAPPING_WIDTH
                ):
                    current_length += len(space) + len(item) + len(punctuation)
                    piece = f'{space}{item}{punctuation}'
                else:
                    space = '    '
                    current_length = len(space) + len(item) + len(punctuation)
                    piece = f'\n{space}{item}{punctuation}'
                formatted_item_list_pieces.append(piece)
            click.echo(
                ''.join([
                    click.style(label, bold=True),
                    ''.join(formatted_item_list_pieces),
                ]),
                color=ctx.color,
            )


def jopenssl_version_option_callback(
    ctx: click.Context,
    param: click.Parameter,
    value: bool,  # noqa: FBT001
) -> None:
    if value and not ctx.resilient_parsing:
        common_version_output(ctx, param, value)
        click.echo()
        version_info_types: dict[str, list[str]] = {
            'Targeted provider:': [
                f'{PROVIDER_NAME} {version.get_provider_version()}'
            ],
        }
        print_version_info_types(version_info_types, ctx=ctx)
        ctx.exit()


def version_option(
    version_option_callback: Callable[
        [click.Context, click.Parameter, Any], Any
    ],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    return click.option(
        '--version',
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=version_option_callback,
        help=VERSION_OPTION_HELP_TEXT,
    )


# Logging options
# ===============


debug_option = click.option(
    '--debug',
    'logging_level',
    is_flag=True,
    flag_value=logging.DEBUG,
    expose_value=False,
    callback=adjust_logging_level,
    help=DEBUG_OPTION_HELP_TEXT,
)
verbose_option = click.option(
    '-v',
    '--verbose',
    'logging_level',
    is_flag=True,
    flag_value=logging.INFO,
    expose_value=False,
    callback=adjust_logging_level,
    help=VERBOSE_OPTION_HELP_TEXT,
)
quiet_option = click.option(
    '-q',
    '--quiet',
    'logging_level',
    is_flag=True,
    flag_value=logging.ERROR,
    expose_value=False,
    callback=adjust_logging_level,
    help=QUIET_OPTION_HELP_TEXT,
)


def standard_logging_options(f: Callable[P, R]) -> Callable[P, R]:
    """Decorate the function with standard logging click options.

    Adds the three click options `-v`/`--verbose`, `-q`/`--quiet` and
    `--debug`, which call back into [`adjust_logging_level`][] with
    different level values.

    Args:
        f: A callable to decorate.

    Returns:
        The decorated callable.

    """
    return debug_option(verbose_option(quiet_option(f)))
