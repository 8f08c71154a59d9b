"""A text stream that tracks an indentation level."""

from __future__ import annotations

import sys
from typing import TextIO


class IndentedStream:
    """Writes text and numbers, indenting with tabs after each line break."""

    def __init__(self, stream: TextIO | None = None, indentation: int = 0):
        self._stream = stream if stream is not None else sys.stdout
        self.indentation = indentation

    def write(self, value) -> IndentedStream:
        """Write a string as is, or a number in the shortest general form."""
        if isinstance(value, str):
            self._stream.write(value)
        else:
            self._stream.write(f"{float(value):g}")
        return self

    def increase_indent(self) -> IndentedStream:
        self.indentation += 1
        return self

    def decrease_indent(self) -> IndentedStream:
        if self.indentation:
            self.indentation -= 1
        return self

    def indent(self) -> IndentedStream:
        self._stream.write("\t" * self.indentation)
        return self

    def indent_once(self) -> IndentedStream:
        self._stream.write("\t")
        return self

    def endl(self) -> IndentedStream:
        """End the line and indent the next one to the current level."""
        self._stream.write("\n")
        return self.indent()