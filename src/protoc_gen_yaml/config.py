"""Plugin options carried in CodeGeneratorRequest.parameter.

protoc passes everything before the ':' in ``--yaml_out=OPTIONS:DIR`` as a
single string, e.g. ``response=per_file,scope=all,verbose``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from protoc_gen_yaml.errors import ConfigError

RESPONSE_SINGLE = "single"
RESPONSE_PER_FILE = "per_file"
RESPONSE_MODES = (RESPONSE_SINGLE, RESPONSE_PER_FILE)

SCOPE_TARGETS = "targets"
SCOPE_ALL = "all"
SCOPES = (SCOPE_TARGETS, SCOPE_ALL)

_TRUE_VALUES = {"", "1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PluginOptions:
    # single: one response per invocation; per_file: one response per input file
    response: str = RESPONSE_SINGLE
    # targets: only file_to_generate; all: every proto_file in the request
    scope: str = SCOPE_TARGETS
    verbose: bool = False


def _split_parameter(parameter: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for chunk in parameter.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, _, value = chunk.partition("=")
        key = key.strip()
        if not key:
            raise ConfigError(f"Malformed plugin option '{chunk}': missing key")
        if key in values:
            raise ConfigError(f"Plugin option '{key}' given more than once")
        values[key] = value.strip()
    return values


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Plugin option '{key}' expects a boolean, got '{value}'")


def _parse_choice(key: str, value: str, choices) -> str:
    if value not in choices:
        raise ConfigError(
            f"Plugin option '{key}' must be one of {', '.join(choices)}; got '{value}'"
        )
    return value


def parse_options(parameter: str) -> PluginOptions:
    """Parse the comma-separated ``key=value`` parameter string.

    Raises ConfigError for unknown keys or invalid values.
    """
    values = _split_parameter(parameter or "")

    response = RESPONSE_SINGLE
    scope = SCOPE_TARGETS
    verbose = False

    for key, value in values.items():
        if key == "response":
            response = _parse_choice(key, value, RESPONSE_MODES)
        elif key == "scope":
            scope = _parse_choice(key, value, SCOPES)
        elif key == "verbose":
            verbose = _parse_bool(key, value)
        else:
            raise ConfigError(f"Unknown plugin option '{key}'")

    return PluginOptions(response=response, scope=scope, verbose=verbose)
