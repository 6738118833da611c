from dataclasses import dataclass

import orjson

from glb_reader.gltf.exceptions import InvalidMetadataException


@dataclass(frozen=True)
class Chunk:
    type: bytes
    data: bytes

    def json(self) -> dict:
        try:
            document = orjson.loads(self.data)
        except orjson.JSONDecodeError as exception:
            raise InvalidMetadataException(
                f"{self.type!r} chunk is not valid UTF-8 JSON: {exception}"
            ) from exception

        if not isinstance(document, dict):
            raise InvalidMetadataException(
                f"{self.type!r} chunk must hold a JSON object, "
                f"got {type(document).__name__}"
            )

        return document

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Chunk(type={self.type}, length={len(self)})"
