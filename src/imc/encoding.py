"""Quoted-printable decoding of property values.

QUOTED-PRINTABLE is a vCard 2.1 encoding, but it is decoded whenever a
line asks for it, whatever version the document claims.
"""

import codecs
import logging
import quopri

logger = logging.getLogger(__name__)

QUOTED_PRINTABLE = "QUOTED-PRINTABLE"


def wants_quoted_printable(params: dict[str, list[str]]) -> bool:
    """True if an ENCODING parameter lists QUOTED-PRINTABLE."""
    for name, values in params.items():
        if name.strip().upper() != "ENCODING":
            continue
        if any(v.strip().upper() == QUOTED_PRINTABLE for v in values):
            return True
    return False


def _charset(params: dict[str, list[str]]) -> str | None:
    for name, values in params.items():
        if name.strip().upper() == "CHARSET" and values:
            return values[0]
    return None


def decode_quoted_printable(text: str, charset: str | None = None) -> str:
    """Decode ``=XX`` escapes and soft line breaks.

    The decoded bytes are read with ``charset`` when Python knows it,
    otherwise as UTF-8. Undecodable bytes are replaced, never raised.
    """
    encoding = "utf-8"
    if charset:
        try:
            encoding = codecs.lookup(charset).name
        except LookupError:
            logger.debug("unknown charset %r, decoding as utf-8", charset)

    # literal characters must round-trip through the same codec as the escapes
    decoded = quopri.decodestring(text.encode(encoding, errors="replace"))
    return decoded.decode(encoding, errors="replace")


def decode_value(params: dict[str, list[str]], text: str) -> str:
    """Apply quoted-printable decoding to text when params ask for it."""
    if not wants_quoted_printable(params):
        return text
    return decode_quoted_printable(text, _charset(params))
