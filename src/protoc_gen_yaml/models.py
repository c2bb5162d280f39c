from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Field:
    name: str
    number: int


@dataclass
class Message:
    name: str
    fields: List[Field] = field(default_factory=list)


@dataclass
class Method:
    name: str
    input_type: str
    output_type: str


@dataclass
class Service:
    name: str
    methods: List[Method] = field(default_factory=list)


@dataclass
class SimplifiedSchema:
    """Flattened, sorted view of one .proto file: messages first, then services."""

    messages: List[Message] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)
