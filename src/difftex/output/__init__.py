"""Document output."""

from difftex.output.writer import OutputError, write_document

__all__ = ["OutputError", "write_document"]
