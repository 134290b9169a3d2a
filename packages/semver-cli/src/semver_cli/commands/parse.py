# SPDX-License-Identifier: MIT
"""Parse a semantic version and print its components."""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from semver_version import Version

from ..config import OUTPUT_FORMATS, ConfigError
from ..main import VERSION, Context, echo_error, echo_info, pass_context

# sysexits.h EX_UNAVAILABLE
EXIT_UNAVAILABLE = 69


def format_normal(version: Version) -> str:
    """Render a version as a human-readable component listing.

    Each identifier list is printed tab-indented, one per line; an empty list
    still prints a single tab line.
    """
    lines = [
        f"Major version: {version.major}",
        f"Minor version: {version.minor}",
        f"Patch level:   {version.patch}",
        "Prerelease identifiers:",
        "\t" + "\n\t".join(version.prerelease),
        "Build metadata identifiers:",
        "\t" + "\n\t".join(version.build),
    ]
    return "\n".join(lines)


def format_json(version: Version) -> str:
    """Render a version as pretty-printed JSON."""
    return json.dumps(version.to_dict(), indent=2)


@click.command()
@click.argument("version", type=VERSION)
@click.option(
    "--output-format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="The format of the output (default: normal, or [tool.semver] output-format).",
)
@pass_context
def parse(ctx: Context, version: Version, output_format: Optional[str]) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semver parse 1.2.3-rc.1+build.5
        semver parse --output-format json 2.0.0
    """
    if output_format is None:
        try:
            output_format = ctx.load_config().output_format
        except ConfigError as e:
            echo_error(f"Configuration error: {e}")
            sys.exit(1)

    if output_format == "json":
        echo_info(format_json(version))
    elif output_format == "xml":
        echo_info("Not implemented.")
        sys.exit(EXIT_UNAVAILABLE)
    else:
        echo_info(format_normal(version))
