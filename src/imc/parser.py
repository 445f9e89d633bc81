"""Recursive descent parser for IMC files (vCard, vCalendar, iCalendar).

Grammar (simplified):
    document    = line*
    line        = blank | begin | end | property
    begin       = "BEGIN" ":" NAME          ; opens a nested block
    end         = "END" ":" NAME            ; closes the current block
    property    = [GROUP "."] TYPE (";" param)* ":" value
    param       = NAME "=" value ("," value)* | VALUE   ; 3.0 | 2.1 style

The parser is permissive: lines without a colon are dropped and blocks
left open at the end of input are returned as they are. Pass a config
with ``strict=True`` to get a ParseError instead.

Blocks nested deeper than ``Parser.MAX_DEPTH`` always raise ParseError,
in either mode, since each level is one Python call frame.
"""

import logging
from pathlib import Path

from .config import ParserConfig
from .encoding import decode_value
from .errors import ParseError
from .lines import SourceLines
from .model import Block, Property
from .params import resolve_params
from .properties import decompose
from .splitter import split_by_colon
from .unescape import unescape_block
from .values import ValueParserRegistry, registry_for

logger = logging.getLogger(__name__)


class Parser:
    """Parse IMC text into a tree of Blocks and Properties.

    A Parser holds no per-parse state; every call builds its own
    SourceLines, so one instance can be reused for many documents.
    """

    MAX_DEPTH = 200

    def __init__(
        self,
        registry: ValueParserRegistry | None = None,
        config: ParserConfig | None = None,
    ):
        self.config = config or ParserConfig()
        if registry is None:
            registry = registry_for(self.config.profile)
        self.registry = registry

    def parse_text(self, text: str) -> Block:
        return self.parse_lines(SourceLines.from_text(text))

    def parse_lines(self, source: SourceLines) -> Block:
        """Parse already-normalized lines, then unescape every value."""
        block = self._parse_block(source, None, 0)
        return unescape_block(block)

    def _parse_block(self, source: SourceLines, opener: str | None, depth: int) -> Block:
        """Collect lines into a block until its END line or end of input.

        On return the cursor sits on the END line; the caller's own
        ``advance()`` moves past it.
        """
        block = Block()
        begin_line = source.line_number
        if depth > self.MAX_DEPTH:
            raise ParseError(f"blocks nested deeper than {self.MAX_DEPTH} levels", begin_line)

        while source.advance():
            line = source.current
            if not line.strip():
                continue

            parts = split_by_colon(line)
            if len(parts) < 2:
                self._report(source.line_number, f"no colon, skipped {line!r}")
                continue
            left, right = parts

            group, type_name, raw_params = decompose(left)
            keyword = type_name.upper()

            if keyword == "BEGIN":
                block.add(right, self._parse_block(source, right, depth + 1))
            elif keyword == "END":
                if opener is None:
                    self._report(
                        source.line_number,
                        f"END:{right} without matching BEGIN, stopped parsing",
                    )
                return block
            else:
                block.add(
                    type_name,
                    self._parse_property(group, type_name, raw_params, right),
                )

        if opener is not None:
            self._report(begin_line, f"BEGIN:{opener} has no matching END")

        return block

    def _parse_property(
        self, group: str, type_name: str, raw_params: list[str], text: str
    ) -> Property:
        params = resolve_params(raw_params)
        if self.config.decode_quoted_printable:
            text = decode_value(params, text)
        value = self.registry.parse(type_name, text)
        return Property(group=group, params=params, value=value)

    def _report(self, line: int, msg: str) -> None:
        """Raise in strict mode, otherwise log and carry on."""
        if self.config.strict:
            raise ParseError(msg, line)
        logger.debug("line %d: %s", line, msg)


def parse(
    text: str,
    registry: ValueParserRegistry | None = None,
    config: ParserConfig | None = None,
) -> Block:
    """Parse IMC text into a Block."""
    return Parser(registry, config).parse_text(text)


def parse_file(
    filepath: str | Path,
    registry: ValueParserRegistry | None = None,
    config: ParserConfig | None = None,
    encoding: str = "utf-8",
) -> Block:
    """Parse an IMC file (.vcf, .vcs, .ics)."""
    filepath = Path(filepath)
    # newline="" keeps CR and CRLF for the parser's own normalization
    with open(filepath, encoding=encoding, errors="replace", newline="") as f:
        source = f.read()
    return parse(source, registry, config)
