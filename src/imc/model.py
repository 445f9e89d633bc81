"""Parse tree nodes: blocks (BEGIN/END structures) and properties."""

from typing import Annotated, Any
from typing import Literal as TypingLiteral

from pydantic import BaseModel, Field


class Property(BaseModel):
    """One content line, e.g. ``item1.TEL;TYPE=WORK:555-1234``.

    ``value`` is always a list of components, each a list of leaves, so
    plain and structured properties share one shape: ``[["555-1234"]]``.
    Leaves are strings, or lists when a value parser nests deeper.
    """

    kind: TypingLiteral["property"] = "property"
    group: str = ""
    params: dict[str, list[str]] = {}
    value: list[list[Any]] = []

    def to_dict(self) -> dict[str, Any]:
        return {"group": self.group, "params": self.params, "value": self.value}


class Block(BaseModel):
    """A BEGIN/END structure: type name -> entries in input order.

    Every name maps to a list, even with a single occurrence. Entries are
    properties or nested blocks, filed under the BEGIN value
    (``VCARD``, ``VEVENT``, ...).
    """

    kind: TypingLiteral["block"] = "block"
    entries: dict[str, list["Entry"]] = {}

    def add(self, name: str, entry: "Property | Block") -> None:
        self.entries.setdefault(name, []).append(entry)

    def get(self, name: str) -> list["Property | Block"]:
        return self.entries.get(name, [])

    def keys(self):
        return self.entries.keys()

    def __getitem__(self, name: str) -> list["Property | Block"]:
        return self.entries[name]

    def __iter__(self):
        """Iterate over type names, like a mapping."""
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Plain nested dicts and lists, ready for ``json.dumps``."""
        return {
            name: [entry.to_dict() for entry in entries]
            for name, entries in self.entries.items()
        }


Entry = Annotated[Property | Block, Field(discriminator="kind")]

# Rebuild models for forward references
Block.model_rebuild()
