__all__ = ["ByteReader"]

from glb_reader.streams.bytereader import ByteReader
