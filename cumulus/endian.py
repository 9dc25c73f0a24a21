"""Detection of the machine's byte order."""

from __future__ import annotations

import enum
import struct


class Endianness(enum.IntEnum):
    """Byte order of the running machine."""

    LITTLE = 0
    BIG = 1
    UNKNOWN = 2


def get_endianness() -> Endianness:
    """Inspect how a 32-bit integer is laid out in native memory."""
    first = struct.pack("=I", 0x01020304)[0]
    if first == 0x01:
        return Endianness.BIG
    if first == 0x04:
        return Endianness.LITTLE
    return Endianness.UNKNOWN