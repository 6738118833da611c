from struct import unpack
from typing import Literal

ENDIAN_SIGNS = {"big": ">", "little": "<"}


class ByteReader:
    """
    Sequential reader over an in-memory byte buffer.

    Reads never run past the end of the buffer: asking for more bytes than
    remain raises `EOFError` and leaves the position unchanged.
    """

    def __init__(self, initial_bytes: bytes, endian: Literal["big", "little"] = "big"):
        self._buffer = memoryview(initial_bytes)
        self._position = 0
        if endian not in ENDIAN_SIGNS:
            raise NotImplementedError(f"Unknown endian requested: {endian}")

        self._endian_sign = ENDIAN_SIGNS[endian]

    def tell(self) -> int:
        return self._position

    def read(self, size: int) -> bytes:
        if size > self.remaining:
            raise EOFError(
                f"Requested {size} bytes at offset {self._position}, "
                f"only {self.remaining} available"
            )

        data = self._buffer[self._position : self._position + size].tobytes()
        self._position += size
        return data

    def read_u_int32(self) -> int:
        return unpack(f"{self._endian_sign}I", self.read(4))[0]

    def is_at_end(self) -> bool:
        return self._position >= len(self._buffer)

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._position
