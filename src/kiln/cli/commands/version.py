# topmark:header:start
#
#   project      : Kiln
#   file         : version.py
#   file_relpath : src/kiln/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Kiln `version` command.

Prints the current Kiln version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from kiln.cli.cli_types import EnumChoiceParam
from kiln.cli.cmd_common import get_console
from kiln.constants import KILN_VERSION
from kiln.core.formats import OutputFormat, is_machine_format


@click.command(
    name="version",
    help="Show the current version of Kiln.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (json for machine output; anything else prints plain text).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Show the current version of Kiln."""
    console = get_console(ctx)
    if is_machine_format(output_format):
        console.print(json.dumps({"version": KILN_VERSION}))
    else:
        console.print(console.styled(KILN_VERSION, bold=True))
