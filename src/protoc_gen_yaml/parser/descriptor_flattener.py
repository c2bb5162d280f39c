"""Flatten nested message descriptors into a single dotted namespace."""

from __future__ import annotations

from typing import List

from google.protobuf import descriptor_pb2 as d2


def flatten_messages(file: d2.FileDescriptorProto) -> List[d2.DescriptorProto]:
    """Return every message of a file, nested ones included, with no nesting left.

    Nested messages are renamed to ``Parent.Child`` (``Grandparent.Parent.Child``
    for deeper levels). Children are emitted before the message that contained
    them. The descriptors in ``file`` are not modified: the result holds copies
    with ``nested_type`` cleared.
    """
    result: List[d2.DescriptorProto] = []
    for msg in file.message_type:
        _flatten_message(msg, msg.name, result)
    return result


def _flatten_message(
    node: d2.DescriptorProto,
    qualified_name: str,
    out: List[d2.DescriptorProto],
) -> None:
    for nested in node.nested_type:
        _flatten_message(nested, f"{qualified_name}.{nested.name}", out)

    flat = d2.DescriptorProto()
    flat.CopyFrom(node)
    flat.name = qualified_name
    flat.ClearField("nested_type")
    out.append(flat)
