"""Escape- and quote-aware delimiter splitting.

Backs the three splits an IMC line needs: semicolons (type and
parameters, structured values), commas (parameter and value lists) and
the first colon (left side vs. value).
"""


def _find_delim(text: str, delim: str) -> int | None:
    """Index of the first delimiter that is neither quoted nor escaped."""
    in_quotes = False
    escaped = False

    for i, char in enumerate(text):
        if char == '"' and not escaped:
            in_quotes = not in_quotes
        if char == delim and not in_quotes and not escaped:
            return i
        escaped = char == "\\"

    return None


def split_by_delim(text: str, delim: str, recurse: bool = True) -> list[str]:
    """Split text at unescaped, unquoted occurrences of delim.

    Both sides of every split point are trimmed. Without ``recurse`` only
    the first split point is used and at most two parts come back. Text
    with no split point is returned unchanged as a single part.

    An unbalanced double quote keeps the scanner "inside quotes" for the
    rest of the segment, so no later delimiter is matched.
    """
    parts: list[str] = []

    while True:
        pos = _find_delim(text, delim)
        if pos is None:
            parts.append(text)
            return parts

        parts.append(text[:pos].strip())
        text = text[pos + 1 :].strip()

        if not recurse:
            parts.append(text)
            return parts


def split_by_semi(text: str, recurse: bool = True) -> list[str]:
    return split_by_delim(text, ";", recurse)


def split_by_comma(text: str, recurse: bool = True) -> list[str]:
    return split_by_delim(text, ",", recurse)


def split_by_colon(text: str, recurse: bool = False) -> list[str]:
    """Split a line into its left side and its value.

    Non-recursive by default: values such as times and URLs contain
    colons of their own.
    """
    return split_by_delim(text, ":", recurse)
