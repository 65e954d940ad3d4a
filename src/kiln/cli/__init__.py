# topmark:header:start
#
#   project      : Kiln
#   file         : __init__.py
#   file_relpath : src/kiln/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for Kiln."""
