"""StringBuilder for O(n) output accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The PostScript renderer writes the
preamble and one statement per node through it.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.statement("body_pad", "next_line")
            >>> _ = sb.statement("(hi )", "wshow")
            >>> sb.build()
            'body_pad next_line\\n(hi ) wshow\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def statement(self, *words: str) -> StringBuilder:
        """Append one PostScript statement: words joined by spaces, then newline.

        Returns:
            self for method chaining
        """
        return self.append_line(" ".join(words))

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
