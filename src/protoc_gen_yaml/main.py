from __future__ import annotations

import argparse
import io
import logging
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple

from protoc_gen_yaml.builder import build_schema
from protoc_gen_yaml.config import RESPONSE_PER_FILE, parse_options
from protoc_gen_yaml.errors import InputReadError, OutputWriteError, PluginError
from protoc_gen_yaml.generator.response_generator import (
    build_response,
    encode_response,
    write_response,
)
from protoc_gen_yaml.generator.yaml_generator import generate_yaml
from protoc_gen_yaml.parser.request_parser import decode_request, read_request, select_files

logger = logging.getLogger(__name__)


def run(input_stream: BinaryIO, output_stream: BinaryIO) -> List[str]:
    """Main pipeline: decode, build, serialize, respond.

    Returns the names of the proto files a document was generated for.
    """
    # 1. Decode the request
    request = decode_request(read_request(input_stream))
    options = parse_options(request.parameter)

    package_logger = logging.getLogger("protoc_gen_yaml")
    previous_level = package_logger.level
    if options.verbose:
        package_logger.setLevel(logging.DEBUG)
    try:
        logger.debug(
            "Decoded request: %d file(s) to generate, %d descriptor(s)",
            len(request.file_to_generate),
            len(request.proto_file),
        )
        files = select_files(request, options.scope)
        logger.debug("Processing %d file(s) with %s", len(files), options)

        # 2. Build and serialize one document per file
        documents: List[Tuple[str, str]] = []
        for file in files:
            documents.append((file.name, generate_yaml(build_schema(file))))

        # 3. Encode every frame before writing any, so a failure leaves no output
        if options.response == RESPONSE_PER_FILE:
            frames = [encode_response(build_response([doc])) for doc in documents]
        else:
            frames = [encode_response(build_response(documents))]
        for frame in frames:
            write_response(frame, output_stream)
    finally:
        package_logger.setLevel(previous_level)

    return [f.name for f in files]


def _open_request(path: Optional[str]):
    if path is None:
        return nullcontext(sys.stdin.buffer)
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputReadError(f"opening request file '{path}': {e}") from e


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="protoc-gen-yaml",
        description=(
            "protoc plugin that writes a flattened, sorted YAML summary of the "
            "messages and services of each .proto file"
        ),
    )
    parser.add_argument(
        "--request",
        required=False,
        help="Read a serialized CodeGeneratorRequest from this file instead of stdin",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Write the serialized CodeGeneratorResponse to this file instead of stdout",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        with _open_request(args.request) as input_stream:
            if args.output is None:
                run(input_stream, sys.stdout.buffer)
            else:
                # Buffer so a failed run leaves no partial output file
                buffer = io.BytesIO()
                run(input_stream, buffer)
                try:
                    Path(args.output).write_bytes(buffer.getvalue())
                except OSError as e:
                    raise OutputWriteError(f"writing '{args.output}': {e}") from e
    except PluginError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
