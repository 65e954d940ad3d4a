# topmark:header:start
#
#   project      : Kiln
#   file         : __main__.py
#   file_relpath : src/kiln/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Kiln via ``python -m kiln``.

Delegates to :func:`kiln.cli.main.cli`, the same entry point as the ``kiln``
console script.

Examples:
    Show the resolved configuration of the current project::

        python -m kiln config dump --project-root .
"""

from __future__ import annotations

from kiln.cli.main import cli

if __name__ == "__main__":
    cli()
