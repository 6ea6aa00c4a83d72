# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Command-line interface for jopenssl."""

from __future__ import annotations

import json
import logging

import click

from jopenssl import _internals, _types, version
from jopenssl._internals import cli_machinery

__all__ = ('jopenssl',)

PROG_NAME = _internals.PROG_NAME
VERSION = _internals.VERSION

FIELDS = _types.VersionInfo._fields


@click.group(
    context_settings={'help_option_names': ['-h', '--help']},
    invoke_without_command=True,
    cls=cli_machinery.TopLevelCLIEntryPoint,
)
@cli_machinery.version_option(
    cli_machinery.jopenssl_version_option_callback
)
@cli_machinery.standard_logging_options
@click.pass_context
def jopenssl(ctx: click.Context, /) -> None:
    """Report the version of the JOpenSSL binding and its provider.

    This is a [`click`][CLICK]-powered command-line interface function,
    and not intended for programmatic use.  Use
    [`jopenssl.version`][] from Python code instead.

    [CLICK]: https://pypi.org/package/click/

    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), color=ctx.color)


@jopenssl.command(
    'info',
    context_settings={'help_option_names': ['-h', '--help']},
)
@click.option(
    '--json',
    'as_json',
    is_flag=True,
    help='Emit the version record as a JSON object.',
)
@click.option(
    '--field',
    type=click.Choice(FIELDS),
    default=None,
    help='Emit only the value of this field.',
)
@cli_machinery.version_option(
    cli_machinery.jopenssl_version_option_callback
)
@cli_machinery.standard_logging_options
@click.pass_context
def jopenssl_info(
    ctx: click.Context,
    /,
    *,
    as_json: bool = False,
    field: str | None = None,
) -> None:
    """Print the library and provider versions.

    This is a [`click`][CLICK]-powered command-line interface function,
    and not intended for programmatic use.

    [CLICK]: https://pypi.org/package/click/

    """
    logger = logging.getLogger(PROG_NAME)
    if as_json and field is not None:
        msg = '--json and --field are mutually exclusive'
        raise click.UsageError(msg, ctx=ctx)
    info = version.version_info()
    logger.debug('Version record: %r', info)
    if field is not None:
        click.echo(getattr(info, field), color=ctx.color)
    elif as_json:
        click.echo(
            json.dumps(info._asdict(), indent=2, sort_keys=True),
            color=ctx.color,
        )
    else:
        for name, value in zip(FIELDS, info):
            click.echo(f'{name}: {value}', color=ctx.color)
