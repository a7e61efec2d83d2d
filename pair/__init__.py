"""
pair

Manage Git commit co-authors through a commit message template.
"""

__version__ = "1.0.0"

# Template format - shared by the parser and the writer
TRAILER_PREFIX = "Co-authored-by:"
TEMPLATE_MARKER = "# Co-authors:"


class PairError(Exception):
    """Base class for errors that abort a command."""
    pass
