# topmark:header:start
#
#   project      : LitDoc
#   file         : __main__.py
#   file_relpath : src/litdoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LitDoc via ``python -m litdoc``.

It delegates directly to :func:`litdoc.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how LitDoc is launched.

Examples:
    Convert a JavaScript file using the module interface::

        python -m litdoc convert src/index.js
"""

from __future__ import annotations

from litdoc.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
