"""Exceptions raised by the IMC parser.

The parser is permissive by default and raises nothing for malformed
content. ParseError is only raised in strict mode.
"""


class IMCError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(IMCError):
    def __init__(self, msg: str, line: int):
        super().__init__(f"line {line}: {msg}")
        self.line = line


class ConfigError(IMCError):
    pass
