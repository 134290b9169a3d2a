# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, parse

__all__ = ["compare", "parse"]
