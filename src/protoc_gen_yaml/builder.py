"""Build the SimplifiedSchema for one FileDescriptorProto."""

from __future__ import annotations

import logging
from typing import List

from google.protobuf import descriptor_pb2 as d2

from protoc_gen_yaml.errors import TypeReferenceError
from protoc_gen_yaml.models import Field, Message, Method, Service, SimplifiedSchema
from protoc_gen_yaml.parser.descriptor_flattener import flatten_messages
from protoc_gen_yaml.sorter import qualify, sort_fields, sort_messages, sort_services

logger = logging.getLogger(__name__)

# protoc writes fully qualified type references with a leading '.'
TYPE_MARKER = "."


def strip_type_marker(reference: str) -> str:
    """Remove the leading '.' from a fully qualified type reference.

    Raises TypeReferenceError if the marker is missing, since dropping the
    first character of an unmarked name would corrupt it.
    """
    if not reference.startswith(TYPE_MARKER):
        raise TypeReferenceError(
            f"Type reference '{reference}' does not start with '{TYPE_MARKER}'"
        )
    return reference[len(TYPE_MARKER):]


def _build_message(msg: d2.DescriptorProto, package: str) -> Message:
    fields = [
        Field(name=f.name, number=f.number)
        for f in sort_fields(msg.field)
    ]
    return Message(name=qualify(package, msg.name), fields=fields)


def _build_service(svc: d2.ServiceDescriptorProto, package: str) -> Service:
    service_name = qualify(package, svc.name)
    methods: List[Method] = []
    for method in svc.method:
        try:
            input_type = strip_type_marker(method.input_type)
            output_type = strip_type_marker(method.output_type)
        except TypeReferenceError as e:
            raise TypeReferenceError(f"{service_name}.{method.name}: {e}") from e
        methods.append(
            Method(name=method.name, input_type=input_type, output_type=output_type)
        )
    return Service(name=service_name, methods=methods)


def build_schema(file: d2.FileDescriptorProto) -> SimplifiedSchema:
    """Flatten, sort and map a file descriptor into a SimplifiedSchema.

    Message and service names are prefixed with the file's package. Field
    numbers are copied verbatim. Methods keep their declaration order.
    """
    package = file.package

    messages = [
        _build_message(msg, package)
        for msg in sort_messages(flatten_messages(file))
    ]
    services = [
        _build_service(svc, package)
        for svc in sort_services(file.service, package)
    ]

    logger.debug(
        "Built schema for %s: %d message(s), %d service(s)",
        file.name,
        len(messages),
        len(services),
    )
    return SimplifiedSchema(messages=messages, services=services)
