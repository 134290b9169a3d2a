# SPDX-License-Identifier: MIT
"""Compare two semantic versions."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from semver_version import CompareMode, Comparison, Operator, Version, explain

from ..config import ConfigError
from ..main import OPERATOR, VERSION, Context, echo_error, echo_info, pass_context

# Phrases used in "<first> is <phrase> <second>"
_NORMAL_DESCRIPTIONS = {
    Operator.EQ: "the same as",
    Operator.NE: "different from",
    Operator.LT: "older than",
    Operator.LE: "no newer than",
    Operator.GT: "newer than",
    Operator.GE: "no older than",
}

# Questions used by the verbose output
_VERBOSE_DESCRIPTIONS = {
    Operator.EQ: "are the two versions the same",
    Operator.NE: "are the two versions different",
    Operator.LT: "is the first version older than the second",
    Operator.LE: "is the second version at least as new as the first",
    Operator.GT: "is the first version newer than the second",
    Operator.GE: "is the second version at least as old as the first",
}


def _components(label: str, version: Version) -> list[str]:
    return [
        f"Parsed components of {label} version:",
        f"\tMajor: {version.major}",
        f"\tMinor: {version.minor}",
        f"\tPatch: {version.patch}",
        f"\tPrerelease identifiers: [{', '.join(version.prerelease)}]",
        f"\tBuild metadata identifiers: [{', '.join(version.build)}]",
        "",
    ]


def _compared_identifiers(label: str, version: Version) -> list[str]:
    return [
        f"Identifier components of {label} version as compared according to chosen mode "
        "and operation:",
        f"\tPrerelease identifiers: [{', '.join(version.prerelease)}]",
        f"\tBuild metadata identifiers: [{', '.join(version.build)}]",
        "",
    ]


def format_result(comparison: Comparison) -> str:
    """Render the one-line summary of a comparison."""
    verb = "is" if comparison.result else "is not"
    return (
        f"{comparison.left} {verb} {_NORMAL_DESCRIPTIONS[comparison.operator]} "
        f"{comparison.right}"
    )


def format_verbose(comparison: Comparison) -> str:
    """Render an explanation of which operands were compared and how."""
    return "\n".join(
        [
            f'{comparison.left} was compared as if it were "{comparison.compared_left}".',
            f'{comparison.right} was compared as if it were "{comparison.compared_right}".',
            f'The comparison operation was "{_VERBOSE_DESCRIPTIONS[comparison.operator]}?"',
            f"Mode: {comparison.mode.value}; result inverted: "
            f"{'yes' if comparison.inverted else 'no'}.",
            f"The result was: {'yes' if comparison.result else 'no'}.",
        ]
    )


def format_debug(comparison: Comparison) -> str:
    """Render every parsed component along with the verbose explanation."""
    left, right = comparison.left, comparison.right
    lines = [
        *_components("left", left),
        *_components("right", right),
        *_compared_identifiers("left", comparison.compared_left),
        *_compared_identifiers("right", comparison.compared_right),
    ]
    if (left.major, left.minor, left.patch) != (right.major, right.minor, right.patch):
        lines += ["The comparison did not depend on any identifiers.", ""]
    lines.append(format_verbose(comparison))
    return "\n".join(lines)


_MODE_KEY = "semver.compare.mode"
_OUTPUT_KEY = "semver.compare.output"

_MODE_FLAGS = [
    (
        ("--traditional",),
        CompareMode.TRADITIONAL,
        "Ignore pre-release identifiers and build metadata.",
    ),
    (("--precedence",), CompareMode.PRECEDENCE, "Use SemVer 2.0.0 precedence (the default)."),
    (
        ("--strict-equality-only",),
        CompareMode.STRICT_EQUALITY,
        "Respect build metadata for == and != only.",
    ),
    (
        ("--strict", "--build-metadata-is-significant"),
        CompareMode.STRICT,
        "Respect build metadata for every operator.",
    ),
]

_OUTPUT_FLAGS = [
    (("-s", "-q", "--silent"), "silent", "Suppress all output; consult the exit status."),
    (("-v", "--verbose"), "verbose", "Explain which operands were compared and how."),
    (("--debug",), "debug", "Show every parsed component and enable debug logging."),
    (("--show-result",), "normal", "Show the one-line result (the default)."),
]


def _remember(key: str, choices: list[str]):
    """Build a callback that stores a given flag's value in ``ctx.meta[key]``.

    Click processes options in the order they appear on the command line, so
    when several flags share a key the last one given wins. Absent flags
    arrive with a value outside ``choices`` and are ignored.
    """

    def callback(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> None:
        if value in choices:
            ctx.meta[key] = value

    return callback


def mode_options(f):
    """Attach ``--mode`` and the per-mode flags to a command."""
    remember_mode = _remember(_MODE_KEY, [mode.value for mode in CompareMode])
    for names, mode, help_text in reversed(_MODE_FLAGS):
        f = click.option(
            *names,
            is_flag=True,
            flag_value=mode.value,
            expose_value=False,
            callback=remember_mode,
            help=help_text,
        )(f)
    return click.option(
        "--mode",
        type=click.Choice([mode.value for mode in CompareMode]),
        expose_value=False,
        callback=remember_mode,
        help="Which identifiers take part in the comparison.",
    )(f)


def output_options(f):
    """Attach the output behavior flags to a command."""
    remember_output = _remember(_OUTPUT_KEY, [behavior for _, behavior, _ in _OUTPUT_FLAGS])
    for names, behavior, help_text in reversed(_OUTPUT_FLAGS):
        f = click.option(
            *names,
            is_flag=True,
            flag_value=behavior,
            expose_value=False,
            callback=remember_output,
            help=help_text,
        )(f)
    return f


@click.command()
@click.argument("first", type=VERSION)
@click.argument("operation", type=OPERATOR)
@click.argument("second", type=VERSION)
@mode_options
@click.option(
    "-r",
    "--reverse",
    "--invert",
    "invert",
    is_flag=True,
    help="Invert the comparison result.",
)
@output_options
@pass_context
def compare(
    ctx: Context,
    first: Version,
    operation: Operator,
    second: Version,
    invert: bool,
) -> None:
    """Compare FIRST and SECOND using OPERATION.

    The exit status is 0 when the comparison holds and 1 otherwise.

    \b
    Operations (alphabetic names avoid shell metacharacter trouble):
      ==, eq, equal     the versions have equal precedence
      !=, ne, unequal   the versions do not have equal precedence
      <, lt, older      the second version has higher precedence
      <=, le, notNewer  the second version's precedence isn't lower
      >, gt, newer      the first version has higher precedence
      >=, ge, notOlder  the first version's precedence isn't higher

    \b
    Modes (--mode NAME or the flag of the same name):
      traditional           ignore pre-release identifiers and build metadata
      precedence            SemVer 2.0.0 precedence (default)
      strict-equality-only  == and != respect build metadata
      strict                every operator respects build metadata

    When several mode flags or output flags are given, the last one wins.
    """
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(f"Configuration error: {e}")
        sys.exit(1)

    meta = click.get_current_context().meta
    compare_mode = CompareMode(meta.get(_MODE_KEY, config.mode))
    output = meta.get(_OUTPUT_KEY, config.output)

    if output == "debug":
        logging.getLogger().setLevel(logging.DEBUG)

    comparison = explain(first, second, operation, compare_mode, invert)

    if output == "normal":
        echo_info(format_result(comparison))
    elif output == "verbose":
        echo_info(format_verbose(comparison))
    elif output == "debug":
        echo_info(format_debug(comparison))

    sys.exit(0 if comparison.result else 1)
