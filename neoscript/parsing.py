from __future__ import annotations
from .classes import Tape
from .errors import dert, tert
from .opcodes import OpCode, is_opcode


_jumps = (OpCode.JMP, OpCode.JMPIF, OpCode.JMPIFNOT, OpCode.CALL)


def read_instruction(tape: Tape) -> tuple[int, bytes]:
    """Read one instruction from the tape. Returns the opcode and its
        operand bytes (empty for opcodes without an operand). Push
        operands are returned without their length prefix.
    """
    op = tape.read(1)[0]
    dert(is_opcode(op), f'unrecognized opcode {op:#04x}')

    if OpCode.PUSHBYTES1 <= op <= OpCode.PUSHBYTES75:
        return op, tape.read(op)

    match op:
        case OpCode.PUSHDATA1:
            return op, tape.read(tape.read_uint(1))
        case OpCode.PUSHDATA2:
            return op, tape.read(tape.read_uint(2))
        case OpCode.PUSHDATA4:
            return op, tape.read(tape.read_uint(4))
        case OpCode.SYSCALL:
            return op, tape.read(tape.read_uint(1))
        case OpCode.APPCALL | OpCode.TAILCALL:
            return op, tape.read(20)
        case OpCode.JMP | OpCode.JMPIF | OpCode.JMPIFNOT | OpCode.CALL:
            return op, tape.read(2)
        case OpCode.CALL_ED | OpCode.CALL_EDT:
            return op, tape.read(2)
        case OpCode.CALL_I:
            return op, tape.read(4)
        case OpCode.CALL_E | OpCode.CALL_ET:
            return op, tape.read(22)
        case _:
            return op, b''

def read_instructions(script: bytes) -> list[tuple[int, bytes]]:
    """Split the script into (opcode, operand) pairs. Raises
        DecodeFailure if the script is truncated or contains an unknown
        opcode.
    """
    tert(isinstance(script, (bytes, bytearray)), 'script must be bytes')
    tape = Tape(bytes(script))
    instructions = []
    while not tape.has_terminated():
        instructions.append(read_instruction(tape))
    return instructions

def is_push(op: int) -> bool:
    """Return True if the opcode pushes a data operand."""
    return OpCode.PUSHBYTES1 <= op <= OpCode.PUSHDATA4

def push_integer_value(op: int, operand: bytes) -> int|None:
    """Return the integer pushed by a small-integer opcode or a data
        push, or None if the instruction does not push an integer.
    """
    if op == OpCode.PUSHM1:
        return -1
    if op == OpCode.PUSH0:
        return 0
    if OpCode.PUSH1 <= op <= OpCode.PUSH16:
        return op - OpCode.PUSH1 + 1
    if is_push(op) and len(operand):
        return int.from_bytes(operand, 'big')
    return None

def disassemble(script: bytes) -> list[str]:
    """Disassemble the byte code into one human-readable line per
        instruction.
    """
    lines = []

    for op, operand in read_instructions(script):
        name = OpCode(op).name

        if is_push(op):
            lines.append(f'{name} x{operand.hex()}')
            continue

        match op:
            case OpCode.SYSCALL:
                try:
                    lines.append(f'{name} {operand.decode("utf-8")}')
                except UnicodeDecodeError:
                    lines.append(f'{name} x{operand.hex()}')
            case OpCode.APPCALL | OpCode.TAILCALL:
                lines.append(f'{name} x{operand[::-1].hex()}')
            case _ if op in _jumps:
                lines.append(f'{name} {int.from_bytes(operand, "little", signed=True)}')
            case _ if operand:
                lines.append(f'{name} x{operand.hex()}')
            case _:
                lines.append(name)

    return lines
