"""Bracket character tables.

Pure helpers over the three supported bracket pairs.
"""

PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
}

OPENING_BRACKETS = frozenset(PAIRS)
CLOSING_BRACKETS = frozenset(PAIRS.values())
BRACKETS = OPENING_BRACKETS | CLOSING_BRACKETS


def closing_bracket_for(opening: str) -> str:
    """Return the closing bracket of the same type as ``opening``.

    Args:
        opening: One of ``(``, ``[`` or ``{``

    Returns:
        The matching closing bracket.

    Raises:
        ValueError: If ``opening`` is not an opening bracket. Callers only
            pass characters already known to be opening brackets, so this
            signals a programming error.
    """
    try:
        return PAIRS[opening]
    except KeyError:
        raise ValueError(f"Unsupported opening bracket: {opening!r}") from None


def bracket_stream(text: str) -> str:
    """Return the bracket characters of ``text`` in their original order."""
    return "".join(c for c in text if c in BRACKETS)
