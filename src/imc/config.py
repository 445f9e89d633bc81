"""Parser configuration, optionally loaded from a YAML file.

Example config.yaml:
    profile: vcard
    decode_quoted_printable: true
    strict: false
"""

from pathlib import Path
from typing import Literal as TypingLiteral

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError


class ParserConfig(BaseModel):
    """Options for one parse.

    The defaults reproduce the permissive behavior: lines without a colon
    are dropped, unclosed blocks are returned as-is, and quoted-printable
    values are decoded whenever a line asks for it.
    """

    model_config = ConfigDict(extra="forbid")

    profile: TypingLiteral["generic", "vcard", "icalendar"] = "generic"
    decode_quoted_printable: bool = True
    strict: bool = False


def load_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from YAML. An empty file gives the defaults."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    try:
        return ParserConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
