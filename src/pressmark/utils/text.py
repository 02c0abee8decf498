"""Text helpers for PostScript output.

Example:
    >>> from pressmark.utils.text import escape_ps_string
    >>> escape_ps_string("f(x)")
    'f\\\\(x\\\\)'
"""

from __future__ import annotations

from pressmark.utils.logger import get_logger

logger = get_logger(__name__)

_PS_ESCAPES = {
    "\\": "\\\\",
    "(": "\\(",
    ")": "\\)",
}


def escape_ps_string(text: str) -> str:
    """Escape text for use inside a PostScript ``(...)`` string literal.

    - ``\\``, ``(`` and ``)`` are backslash-escaped
    - Latin-1 runes above ASCII become three-digit octal escapes
    - Runes outside Latin-1 become ``?``

    Args:
        text: Raw word text

    Returns:
        Text safe to place between ``(`` and ``)``

    Examples:
        >>> escape_ps_string("a\\\\b")
        'a\\\\\\\\b'
        >>> escape_ps_string("café")
        'caf\\\\351'
    """
    if not text:
        return ""

    out: list[str] = []
    for rune in text:
        code = ord(rune)
        if rune in _PS_ESCAPES:
            out.append(_PS_ESCAPES[rune])
        elif code < 0x80:
            out.append(rune)
        elif code <= 0xFF:
            out.append(f"\\{code:03o}")
        else:
            logger.warning("cannot encode U+%04X in a Latin-1 string, using '?'", code)
            out.append("?")
    return "".join(out)


def format_number(value: float) -> str:
    """Format a number in the shortest PostScript-friendly form.

    Examples:
        >>> format_number(12.0)
        '12'
        >>> format_number(-0.75)
        '-0.75'
    """
    if value == 0:
        return "0"
    return f"{value:g}"


# Characters that end a PostScript name token
_PS_DELIMITERS = frozenset("()<>[]{}/%")


def _is_name_rune(rune: str) -> bool:
    return "!" <= rune <= "~" and rune not in _PS_DELIMITERS


def is_ps_name(name: str) -> bool:
    """Whether name can follow ``/`` as a single PostScript name token.

    Examples:
        >>> is_ps_name("Times-Roman")
        True
        >>> is_ps_name("Times Roman")
        False
    """
    return bool(name) and all(_is_name_rune(rune) for rune in name)


def clean_ps_name(name: str) -> str:
    """Drop every rune that cannot appear in a PostScript name token.

    Examples:
        >>> clean_ps_name("Go Sans (Bold)")
        'GoSansBold'
    """
    return "".join(rune for rune in name if _is_name_rune(rune))
