"""Wrap generated YAML documents in a CodeGeneratorResponse and write it out."""

from __future__ import annotations

from typing import BinaryIO, Iterable, Tuple

from google.protobuf import message as pb_message
from google.protobuf.compiler import plugin_pb2

from protoc_gen_yaml.errors import EncodeError, OutputWriteError

OUTPUT_SUFFIX = ".yaml"


def output_file_name(file_name: str) -> str:
    """Append the .yaml suffix, keeping the full original path and extension."""
    return file_name + OUTPUT_SUFFIX


def build_response(
    documents: Iterable[Tuple[str, str]],
) -> plugin_pb2.CodeGeneratorResponse:
    """Build a response with one generated file per (proto file name, YAML) pair."""
    response = plugin_pb2.CodeGeneratorResponse()
    # Only names and numbers are read, so proto3 optional fields need no handling.
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    for file_name, content in documents:
        response.file.add(name=output_file_name(file_name), content=content)
    return response


def encode_response(response: plugin_pb2.CodeGeneratorResponse) -> bytes:
    try:
        return response.SerializeToString(deterministic=True)
    except pb_message.EncodeError as e:
        raise EncodeError(f"marshaling code generator response: {e}") from e


def write_response(data: bytes, stream: BinaryIO) -> None:
    try:
        stream.write(data)
        stream.flush()
    except OSError as e:
        raise OutputWriteError(f"copying marshaled response to output: {e}") from e
