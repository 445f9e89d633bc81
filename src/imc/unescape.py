"""Final pass that turns IMC escape sequences back into plain text."""

from typing import Any

from .model import Block

# A literal "\\" next to one of these is not protected.
ESCAPES = {
    "\\:": ":",
    "\\;": ";",
    "\\,": ",",
    "\\n": "\n",
}


def unescape(text: str) -> str:
    for escaped, plain in ESCAPES.items():
        text = text.replace(escaped, plain)
    return text


def unescape_value(value: Any) -> Any:
    """Unescape every string leaf of a (possibly nested) value."""
    if isinstance(value, str):
        return unescape(value)
    if isinstance(value, list):
        return [unescape_value(v) for v in value]
    return value


def unescape_block(block: Block) -> Block:
    """Unescape the values of every property in the tree, in place."""
    for entries in block.entries.values():
        for entry in entries:
            if isinstance(entry, Block):
                unescape_block(entry)
            else:
                entry.value = unescape_value(entry.value)
    return block
