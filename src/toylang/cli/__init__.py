"""
toylang Command-Line Interface
==============================

- **toyc**: build front end (``toyc build``)

The tool is a Click-based CLI application with help text and
consistent exit codes (see toylang.cli.errors).
"""

__all__ = ["toyc"]
