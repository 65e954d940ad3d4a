# topmark:header:start
#
#   project      : Kiln
#   file         : __init__.py
#   file_relpath : src/kiln/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Kiln package.

Kiln is a build tool. This distribution provides its layered configuration
system (system, user and project INI files merged with command-line
overrides), the install event records, and a small CLI to inspect the
resolved configuration.
"""

from __future__ import annotations
