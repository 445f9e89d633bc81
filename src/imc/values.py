"""Value parsers and the registry the block parser dispatches through.

A value parser turns the raw text after the colon into the value shape
shared by every property: a list of components, each a list of leaves.
Parsers are looked up by uppercased type name; names without a parser
get the registry default, which keeps the text whole.

Example:
    from imc import Parser, ValueParserRegistry, StructuredValueParser

    registry = ValueParserRegistry()
    registry.register("n", StructuredValueParser())
    block = Parser(registry).parse_text("BEGIN:VCARD\\nN:Doe;John\\nEND:VCARD")
    block["VCARD"][0]["N"][0].value  # [["Doe"], ["John"]]
"""

from typing import Any, Protocol

from .errors import ConfigError
from .splitter import split_by_comma, split_by_semi

Value = list[list[Any]]


class ValueParser(Protocol):
    def parse(self, text: str) -> Value: ...


class RawValueParser:
    """Keep the text whole: ``[[text]]``."""

    def parse(self, text: str) -> Value:
        return [[text]]


class ListValueParser:
    """One comma-separated component: ``a,b`` -> ``[["a", "b"]]``."""

    def parse(self, text: str) -> Value:
        return [split_by_comma(text)]


class StructuredValueParser:
    """Semicolon-separated components, each optionally a comma list.

    ``;;123 Main St;Anytown`` -> ``[[""], [""], ["123 Main St"], ["Anytown"]]``
    """

    def __init__(self, split_lists: bool = True):
        self.split_lists = split_lists

    def parse(self, text: str) -> Value:
        components = split_by_semi(text)
        if not self.split_lists:
            return [[c] for c in components]
        return [split_by_comma(c) for c in components]


class ValueParserRegistry:
    """Uppercased type name -> value parser, with a registered default."""

    def __init__(
        self,
        parsers: dict[str, ValueParser] | None = None,
        default: ValueParser | None = None,
    ):
        self.default: ValueParser = default or RawValueParser()
        self._parsers: dict[str, ValueParser] = {}
        for name, parser in (parsers or {}).items():
            self.register(name, parser)

    def register(self, name: str, parser: ValueParser) -> None:
        self._parsers[name.upper()] = parser

    def unregister(self, name: str) -> None:
        self._parsers.pop(name.upper(), None)

    def get(self, name: str) -> ValueParser:
        return self._parsers.get(name.upper(), self.default)

    def parse(self, name: str, text: str) -> Value:
        return self.get(name).parse(text)

    def names(self) -> list[str]:
        return sorted(self._parsers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._parsers


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------
# Structural splitting only; nothing here interprets dates or field meaning.


def _vcard_parsers() -> dict[str, ValueParser]:
    return {
        "N": StructuredValueParser(),
        "ADR": StructuredValueParser(),
        "ORG": StructuredValueParser(split_lists=False),
        "GENDER": StructuredValueParser(split_lists=False),
        "NICKNAME": ListValueParser(),
        "CATEGORIES": ListValueParser(),
    }


def _icalendar_parsers() -> dict[str, ValueParser]:
    return {
        "GEO": StructuredValueParser(split_lists=False),
        "REQUEST-STATUS": StructuredValueParser(split_lists=False),
        "CATEGORIES": ListValueParser(),
        "RESOURCES": ListValueParser(),
        "EXDATE": ListValueParser(),
        "RDATE": ListValueParser(),
    }


PROFILES = {
    "generic": dict,
    "vcard": _vcard_parsers,
    "icalendar": _icalendar_parsers,
}


def registry_for(profile: str) -> ValueParserRegistry:
    """Fresh registry preloaded with the parsers of a named profile."""
    try:
        factory = PROFILES[profile.lower()]
    except KeyError:
        raise ConfigError(
            f"unknown profile {profile!r} (expected one of {sorted(PROFILES)})"
        ) from None
    return ValueParserRegistry(factory())
