from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import yaml

from protoc_gen_yaml.errors import SerializationError
from protoc_gen_yaml.models import SimplifiedSchema


def schema_to_dict(schema: SimplifiedSchema) -> Dict[str, Any]:
    """Convert a schema to plain dicts/lists, keys in declaration order."""
    return asdict(schema)


def generate_yaml(schema: SimplifiedSchema) -> str:
    """Render a SimplifiedSchema as a YAML document.

    Top-level keys are ``messages`` then ``services``; keys inside each entry
    keep the order of the model's fields, so the same schema always renders to
    the same bytes.
    """
    try:
        return yaml.safe_dump(
            schema_to_dict(schema),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"marshaling: {e}") from e
