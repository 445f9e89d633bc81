"""Decompose the left side of a content line into group, type and params."""

from .splitter import split_by_semi


def get_group(tokens: list[str]) -> str:
    """Group prefix of the type token (``item1`` in ``item1.ADR``), or ""."""
    group, dot, _ = tokens[0].partition(".")
    return group if dot else ""


def get_type_name(tokens: list[str]) -> str:
    """Type name without its group prefix (``ADR`` in ``item1.ADR``)."""
    group, dot, type_name = tokens[0].partition(".")
    return type_name if dot else group


def decompose(left: str) -> tuple[str, str, list[str]]:
    """Split ``GROUP.TYPE;PARAM;PARAM`` into (group, type name, raw params)."""
    tokens = split_by_semi(left)
    return get_group(tokens), get_type_name(tokens), tokens[1:]
