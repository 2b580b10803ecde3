from __future__ import annotations
from dataclasses import dataclass, field
from .errors import dert, tert, vert


@dataclass
class Tape:
    """Class for reading script byte code and serialized witnesses."""
    data: bytes
    pointer: int = field(default=0)

    def read(self, size: int, move_pointer: bool = True) -> bytes:
        """Read symbols from the data."""
        tert(type(size) is int, 'size must be int')
        dert(size >= 0 and self.pointer + size <= len(self.data),
            'cannot read that many bytes')
        data = self.data[self.pointer:self.pointer+size]

        if move_pointer:
            self.move_pointer(size)

        return data

    def read_uint(self, size: int) -> int:
        """Read an unsigned little-endian integer of the given size."""
        return int.from_bytes(self.read(size), 'little')

    def read_var_int(self) -> int:
        """Read a variable-length integer: a single byte below 0xfd,
            otherwise a 0xfd, 0xfe, or 0xff marker followed by a 2, 4,
            or 8 byte little-endian integer.
        """
        marker = self.read(1)[0]
        if marker == 0xfd:
            return self.read_uint(2)
        if marker == 0xfe:
            return self.read_uint(4)
        if marker == 0xff:
            return self.read_uint(8)
        return marker

    def read_var_bytes(self) -> bytes:
        """Read a var-int length followed by that many bytes."""
        return self.read(self.read_var_int())

    def move_pointer(self, n: int) -> int:
        """Move the pointer the given number of places."""
        dert(self.pointer + n <= len(self.data), 'cannot move pointer that far')
        self.pointer += n
        return self.pointer

    def reset_pointer(self) -> None:
        """Reset the pointer to 0."""
        self.pointer = 0

    def has_terminated(self) -> bool:
        """Return whether or not the tape has terminated."""
        return self.pointer >= len(self.data)

    def remaining(self) -> int:
        """Return the remaining number of symbols left in the tape."""
        return len(self.data) - self.pointer


def var_int(number: int) -> bytes:
    """Encode an unsigned integer in the variable-length format read by
        `Tape.read_var_int`.
    """
    tert(type(number) is int, 'number must be int')
    vert(0 <= number < 2**64, 'number must be an unsigned 64-bit int')
    if number < 0xfd:
        return bytes([number])
    if number <= 0xffff:
        return b'\xfd' + number.to_bytes(2, 'little')
    if number <= 0xffffffff:
        return b'\xfe' + number.to_bytes(4, 'little')
    return b'\xff' + number.to_bytes(8, 'little')

def var_bytes(data: bytes) -> bytes:
    """Prefix the data with its var-int encoded length."""
    return var_int(len(data)) + bytes(data)
