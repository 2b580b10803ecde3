from __future__ import annotations
from .errors import tert, vert
from .opcodes import OpCode
from math import ceil, floor, log2


def int_to_bytes(number: int) -> bytes:
    """Convert from arbitrarily large signed int to minimal big-endian
        two's complement bytes.
    """
    tert(type(number) is int, 'number must be int')
    negative = number < 0
    number = abs(number)
    n_bits = floor(log2(number)) + 1 if number != 0 else 1
    n_bytes = ceil(n_bits/8)

    if negative:
        if n_bits % 8 == 0 and number > 2**(n_bytes*8-1):
            n_bytes += 1
        number = (1 << (n_bytes * 8 - 1)) + (2**(n_bytes * 8 - 1) - number)
    elif n_bits % 8 == 0:
        n_bytes += 1

    return number.to_bytes(n_bytes, 'big')


class ScriptBuilder:
    """Append-only assembler for NEO VM byte code. Each emit method
        returns the builder so that calls can be chained; `finish`
        returns the assembled script.
    """
    _buffer: bytearray

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        """Return the number of bytes assembled so far."""
        return len(self._buffer)

    def emit_opcode(self, op: OpCode|int) -> ScriptBuilder:
        """Append a single opcode."""
        tert(isinstance(op, int), 'op must be OpCode or int')
        vert(0 <= op < 256, 'op must be a single byte')
        self._buffer.append(int(op))
        return self

    def emit_push_integer(self, number: int) -> ScriptBuilder:
        """Push an integer using the dedicated one-byte opcodes for -1
            through 16; all other values are pushed as data.
        """
        tert(type(number) is int, 'number must be int')
        if number == -1:
            return self.emit_opcode(OpCode.PUSHM1)
        if number == 0:
            return self.emit_opcode(OpCode.PUSH0)
        if 1 <= number <= 16:
            return self.emit_opcode(OpCode.PUSH1 - 1 + number)

        return self.emit_push_data(int_to_bytes(number).lstrip(b'\x00'))

    def emit_push_bool(self, value: bool) -> ScriptBuilder:
        """Push PUSHT or PUSHF."""
        tert(type(value) is bool, 'value must be bool')
        return self.emit_opcode(OpCode.PUSHT if value else OpCode.PUSHF)

    def emit_push_data(self, data: bytes|str|None) -> ScriptBuilder:
        """Push the data prefixed with the shortest length encoding for
            its size. Strings are UTF-8 encoded; None pushes empty data.
        """
        if data is None:
            data = b''
        if type(data) is str:
            data = data.encode('utf-8')
        tert(isinstance(data, (bytes, bytearray)), 'data must be bytes, str, or None')
        self._emit_push_data_length(len(data))
        self._buffer.extend(data)
        return self

    def _emit_push_data_length(self, length: int) -> None:
        if length <= OpCode.PUSHBYTES75:
            self._buffer.append(length)
        elif length <= 0xff:
            self._buffer.append(OpCode.PUSHDATA1)
            self._buffer.append(length)
        elif length <= 0xffff:
            self._buffer.append(OpCode.PUSHDATA2)
            self._buffer.extend(length.to_bytes(2, 'little'))
        else:
            vert(length <= 0xffffffff, 'data too long to push')
            self._buffer.append(OpCode.PUSHDATA4)
            self._buffer.extend(length.to_bytes(4, 'little'))

    def emit_sys_call(self, name: str) -> ScriptBuilder:
        """Call the interop service with the given name."""
        tert(type(name) is str, 'name must be str')
        vert(len(name) > 0, 'operation name must not be empty')
        encoded = name.encode('utf-8')
        vert(len(encoded) <= 252, 'operation name must be at most 252 bytes')
        self._buffer.append(OpCode.SYSCALL)
        self._buffer.append(len(encoded))
        self._buffer.extend(encoded)
        return self

    def emit_call(self, script_hash: bytes, tail: bool = False) -> ScriptBuilder:
        """Call the contract with the given 20-byte script hash. The
            hash is supplied in display order and written reversed.
        """
        tert(isinstance(script_hash, (bytes, bytearray)), 'script_hash must be bytes')
        vert(len(script_hash) == 20, 'script hash must be 20 bytes long')
        self._buffer.append(OpCode.TAILCALL if tail else OpCode.APPCALL)
        self._buffer.extend(bytes(reversed(script_hash)))
        return self

    def emit_app_call(self, script_hash: bytes) -> ScriptBuilder:
        return self.emit_call(script_hash, tail=False)

    def emit_tail_call(self, script_hash: bytes) -> ScriptBuilder:
        return self.emit_call(script_hash, tail=True)

    def finish(self) -> bytes:
        """Return the assembled script. Calling it again returns the
            same bytes.
        """
        return bytes(self._buffer)
