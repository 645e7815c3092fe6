"""Reader: text to value trees."""

from mlisp.reader.parser import lex, read, read_all, TokenStream

__all__ = ["lex", "read", "read_all", "TokenStream"]
