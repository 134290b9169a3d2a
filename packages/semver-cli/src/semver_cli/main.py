# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from semver_version import InvalidVersionError, Operator, Version, parse_version

from .config import ConfigError, SemverConfig, load_config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


class VersionParamType(click.ParamType):
    """Click parameter that parses a semantic version."""

    name = "version"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> Version:
        if isinstance(value, Version):
            return value
        try:
            return parse_version(value)
        except InvalidVersionError as e:
            self.fail(f"{e.message} ({value!r} is not a valid semantic version)", param, ctx)


class OperatorParamType(click.ParamType):
    """Click parameter that accepts any operator spelling."""

    name = "operation"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> Operator:
        if isinstance(value, Operator):
            return value
        try:
            return Operator.from_token(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


VERSION = VersionParamType()
OPERATOR = OperatorParamType()


class DefaultCommandGroup(click.Group):
    """Group that runs a default command when no command is named.

    The default command name is inserted after any leading group options, so
    options meant for the default command (``semver --output-format json 1.2.3``)
    reach it instead of being rejected by the group.
    """

    def __init__(self, *args: Any, default_command: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if self.default_command:
            args = self._with_default_command(ctx, args)
        return super().parse_args(ctx, args)

    def _with_default_command(self, ctx: click.Context, args: list[str]) -> list[str]:
        # Maps each group option spelling to whether it consumes a value
        takes_value: dict[str, bool] = {}
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                for opt in (*param.opts, *param.secondary_opts):
                    takes_value[opt] = not param.is_flag and not param.count

        index = 0
        while index < len(args):
            arg = args[index]
            name = arg.split("=", 1)[0]
            if name in takes_value:
                index += 2 if takes_value[name] and "=" not in arg else 1
            elif not arg.startswith("--") and takes_value.get(arg[:2]):
                # Short option with its value attached, e.g. -Cproject
                index += 1
            else:
                break

        if index < len(args) and self.get_command(ctx, args[index]) is None:
            return [*args[:index], self.default_command, *args[index:]]
        return args


@click.group(cls=DefaultCommandGroup, default_command="parse")
@click.version_option(package_name="semver-tools")
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look for pyproject.toml configuration starting in this directory.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic messages.",
)
@pass_context
def cli(ctx: Context, directory: Optional[Path], log_level: str) -> None:
    """A utility for performing various operations on semantic versions.

    Running semver with a version and no command parses the version.

    \b
    Examples:
        semver 1.2.3-rc.1+build.5
        semver --output-format json 1.2.3
        semver compare 1.0.0-alpha lt 1.0.0
        semver compare --strict 1.0.0+a gt 1.0.0
    """
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(log_level.upper())
    ctx.project_dir = directory


# Import and register commands
from .commands import compare, parse

cli.add_command(parse.parse)
cli.add_command(compare.compare)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
