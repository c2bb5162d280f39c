"""Deterministic ordering for messages, fields and services.

Names are compared on their UTF-8 bytes. Python's sort is stable, so names
that compare equal (only possible for a malformed schema) keep source order.
"""

from __future__ import annotations

from typing import Iterable, List

from google.protobuf import descriptor_pb2 as d2


def _name_key(name: str) -> bytes:
    return name.encode("utf-8")


def qualify(package: str, name: str) -> str:
    """Prefix a name with its package and a '.' separator."""
    return f"{package}.{name}"


def sort_messages(messages: Iterable[d2.DescriptorProto]) -> List[d2.DescriptorProto]:
    """Sort flattened messages by their unqualified (pre-package) name."""
    return sorted(messages, key=lambda m: _name_key(m.name))


def sort_fields(fields: Iterable[d2.FieldDescriptorProto]) -> List[d2.FieldDescriptorProto]:
    return sorted(fields, key=lambda f: _name_key(f.name))


def sort_services(
    services: Iterable[d2.ServiceDescriptorProto],
    package: str,
) -> List[d2.ServiceDescriptorProto]:
    """Sort services by their package-qualified name."""
    return sorted(services, key=lambda s: _name_key(qualify(package, s.name)))
