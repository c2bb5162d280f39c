"""Read and decode the CodeGeneratorRequest protoc sends on stdin."""

from __future__ import annotations

from typing import BinaryIO, Dict, List

from google.protobuf import descriptor_pb2 as d2
from google.protobuf import message as pb_message
from google.protobuf.compiler import plugin_pb2

from protoc_gen_yaml.config import SCOPE_ALL
from protoc_gen_yaml.errors import (
    DecodeError,
    EmptyInputError,
    InputReadError,
    MissingDescriptorError,
)


def read_request(stream: BinaryIO) -> bytes:
    """Read the whole request from a binary stream."""
    try:
        return stream.read()
    except OSError as e:
        raise InputReadError(f"reading request: {e}") from e


def decode_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Decode request bytes; rejects requests that name no files to generate."""
    request = plugin_pb2.CodeGeneratorRequest()
    try:
        request.ParseFromString(data)
    except pb_message.DecodeError as e:
        raise DecodeError(f"parsing request: {e}") from e

    if not request.file_to_generate:
        raise EmptyInputError("no input file")
    return request


def select_files(
    request: plugin_pb2.CodeGeneratorRequest,
    scope: str,
) -> List[d2.FileDescriptorProto]:
    """Return the file descriptors to process, in request order.

    With scope "all" every proto_file is returned, dependencies included.
    Otherwise only the files named in file_to_generate are returned.
    """
    if scope == SCOPE_ALL:
        return list(request.proto_file)

    files_by_name: Dict[str, d2.FileDescriptorProto] = {
        f.name: f for f in request.proto_file
    }
    selected: List[d2.FileDescriptorProto] = []
    for name in request.file_to_generate:
        file = files_by_name.get(name)
        if file is None:
            raise MissingDescriptorError(
                f"File '{name}' is listed in file_to_generate but has no descriptor "
                f"in proto_file. Available: {sorted(files_by_name)}"
            )
        selected.append(file)
    return selected
