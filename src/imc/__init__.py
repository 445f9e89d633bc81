"""IMC: parse vCard, vCalendar and iCalendar text into nested blocks.

Pipeline: normalize line endings and unfold -> recursive BEGIN/END descent
-> unescape values.

Example:
    from imc import parse

    block = parse(open("contacts.vcf").read())
    card = block["VCARD"][0]
    card["TEL"][0].params  # {"TYPE": ["WORK", "VOICE"]}
    card["TEL"][0].value   # [["555-1234"]]
"""

__version__ = "0.1.0"

from .config import ParserConfig, load_config
from .encoding import decode_quoted_printable, wants_quoted_printable
from .errors import ConfigError, IMCError, ParseError
from .lines import SourceLines, normalize_line_endings, split_lines, unfold
from .model import Block, Property
from .params import ENCODING_TOKENS, TYPE_TOKENS, VALUE_TOKENS, param_name, resolve_params
from .parser import Parser, parse, parse_file
from .properties import decompose
from .splitter import split_by_colon, split_by_comma, split_by_delim, split_by_semi
from .unescape import unescape, unescape_block, unescape_value
from .values import (
    ListValueParser,
    RawValueParser,
    StructuredValueParser,
    ValueParser,
    ValueParserRegistry,
    registry_for,
)

__all__ = [
    # Parse
    "parse",
    "parse_file",
    "Parser",
    "ParseError",
    # Tree
    "Block",
    "Property",
    # Lines
    "SourceLines",
    "normalize_line_endings",
    "unfold",
    "split_lines",
    # Splitting
    "split_by_delim",
    "split_by_semi",
    "split_by_comma",
    "split_by_colon",
    # Properties and parameters
    "decompose",
    "resolve_params",
    "param_name",
    "TYPE_TOKENS",
    "VALUE_TOKENS",
    "ENCODING_TOKENS",
    # Encoding and escapes
    "wants_quoted_printable",
    "decode_quoted_printable",
    "unescape",
    "unescape_value",
    "unescape_block",
    # Value parsers
    "ValueParser",
    "RawValueParser",
    "ListValueParser",
    "StructuredValueParser",
    "ValueParserRegistry",
    "registry_for",
    # Config and errors
    "ParserConfig",
    "load_config",
    "IMCError",
    "ConfigError",
]
