import logging
import os
from dataclasses import dataclass

import numpy as np

from glb_reader.accessors.decoder import decode_accessor, decode_accessor_array
from glb_reader.gltf.chunk import Chunk
from glb_reader.gltf.constants import (
    BIN_CHUNK_TYPE,
    CHUNK_HEADER_SIZE,
    GLTF_HEADER_SIZE,
    GLTF_MAGIC,
    GLTF_VERSION,
    JSON_CHUNK_TYPE,
)
from glb_reader.gltf.exceptions import MalformedContainerException
from glb_reader.streams import ByteReader

logger = logging.getLogger(__name__)


def get_file_data(filepath: os.PathLike | str) -> bytes:
    with open(filepath, "rb") as file:
        file_data = file.read()
        return file_data


@dataclass(frozen=True)
class GlbContainer:
    format_version: int
    total_byte_length: int
    metadata: dict
    binary_buffer: bytes = b""

    @staticmethod
    def parse(filepath: os.PathLike | str) -> "GlbContainer":
        logger.debug(f"Reading GLB file: {filepath}")
        return read_container(get_file_data(filepath))

    def decode_accessor(self, accessor_index: int, *, lenient: bool = False) -> list:
        return decode_accessor(
            self.metadata, self.binary_buffer, accessor_index, lenient=lenient
        )

    def decode_accessor_array(
        self, accessor_index: int, *, lenient: bool = False, normalize: bool = False
    ) -> np.ndarray:
        return decode_accessor_array(
            self.metadata,
            self.binary_buffer,
            accessor_index,
            lenient=lenient,
            normalize=normalize,
        )


def read_container(data: bytes) -> GlbContainer:
    """
    Parses a GLB byte buffer into its JSON metadata and binary buffer.

    The layout is a 12 byte header (magic, version, length) followed by a
    JSON chunk and an optional BIN chunk, all little-endian.
    """

    if len(data) < GLTF_HEADER_SIZE:
        raise MalformedContainerException(
            f"File is {len(data)} bytes, shorter than the "
            f"{GLTF_HEADER_SIZE} byte GLB header"
        )

    reader = ByteReader(data, "little")

    magic = reader.read(4)
    if magic != GLTF_MAGIC:
        raise MalformedContainerException(
            f"Wrong magic: expected {GLTF_MAGIC!r}, got {magic!r}"
        )

    version = reader.read_u_int32()
    if version != GLTF_VERSION:
        raise MalformedContainerException(
            f"Unsupported GLB version: expected {GLTF_VERSION}, got {version}"
        )

    length = reader.read_u_int32()
    if length != len(data):
        logger.warning(
            f"Header declares {length} bytes but the file has {len(data)} bytes"
        )

    chunks = _parse_chunks(reader)
    json_chunk, bin_chunk = _split_chunks(chunks)

    metadata = json_chunk.json()
    binary_buffer = bin_chunk.data if bin_chunk is not None else b""

    logger.debug(
        f"Parsed GLB v{version}: JSON {len(json_chunk)} bytes, "
        f"BIN {len(binary_buffer)} bytes"
    )

    return GlbContainer(
        format_version=version,
        total_byte_length=length,
        metadata=metadata,
        binary_buffer=binary_buffer,
    )


def _parse_chunks(reader: ByteReader) -> list[Chunk]:
    chunks = []

    while not reader.is_at_end():
        chunk_offset = reader.tell()

        try:
            chunk_length = reader.read_u_int32()
            chunk_type = reader.read(4)
            chunk_data = reader.read(chunk_length)
        except EOFError as exception:
            raise MalformedContainerException(
                f"Truncated chunk at offset {chunk_offset} "
                f"(chunk header is {CHUNK_HEADER_SIZE} bytes): {exception}"
            ) from exception

        chunks.append(Chunk(type=chunk_type, data=chunk_data))

    return chunks


def _split_chunks(chunks: list[Chunk]) -> tuple[Chunk, Chunk | None]:
    if not chunks:
        raise MalformedContainerException("File has no chunks, JSON chunk is required")

    json_chunk, *other_chunks = chunks
    if json_chunk.type != JSON_CHUNK_TYPE:
        raise MalformedContainerException(
            f"First chunk must be {JSON_CHUNK_TYPE!r}, got {json_chunk.type!r}"
        )

    bin_chunk = None
    for index, chunk in enumerate(other_chunks, start=1):
        if chunk.type == JSON_CHUNK_TYPE:
            raise MalformedContainerException(
                f"Chunk {index} is a second {JSON_CHUNK_TYPE!r} chunk"
            )

        if chunk.type == BIN_CHUNK_TYPE:
            if index != 1:
                raise MalformedContainerException(
                    f"{BIN_CHUNK_TYPE!r} chunk must directly follow the JSON chunk, "
                    f"found at chunk {index}"
                )

            bin_chunk = chunk
            continue

        logger.debug(f"Skipping unknown chunk {chunk.type!r} ({len(chunk)} bytes)")

    return json_chunk, bin_chunk
