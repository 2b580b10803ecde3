from enum import IntEnum
from .errors import tert, vert


_opcodes = [
    # constants
    ('PUSH0', 0x00),
    ('PUSHF', 0x00),
    *[(f'PUSHBYTES{i}', i) for i in range(1, 76)],
    ('PUSHDATA1', 0x4C),
    ('PUSHDATA2', 0x4D),
    ('PUSHDATA4', 0x4E),
    ('PUSHM1', 0x4F),
    ('PUSH1', 0x51),
    ('PUSHT', 0x51),
    *[(f'PUSH{i}', 0x50 + i) for i in range(2, 17)],

    # flow control
    ('NOP', 0x61),
    ('JMP', 0x62),
    ('JMPIF', 0x63),
    ('JMPIFNOT', 0x64),
    ('CALL', 0x65),
    ('RET', 0x66),
    ('APPCALL', 0x67),
    ('SYSCALL', 0x68),
    ('TAILCALL', 0x69),

    # stack
    ('DUPFROMALTSTACK', 0x6A),
    ('TOALTSTACK', 0x6B),
    ('FROMALTSTACK', 0x6C),
    ('XDROP', 0x6D),
    ('XSWAP', 0x72),
    ('XTUCK', 0x73),
    ('DEPTH', 0x74),
    ('DROP', 0x75),
    ('DUP', 0x76),
    ('NIP', 0x77),
    ('OVER', 0x78),
    ('PICK', 0x79),
    ('ROLL', 0x7A),
    ('ROT', 0x7B),
    ('SWAP', 0x7C),
    ('TUCK', 0x7D),

    # splice
    ('CAT', 0x7E),
    ('SUBSTR', 0x7F),
    ('LEFT', 0x80),
    ('RIGHT', 0x81),
    ('SIZE', 0x82),

    # bitwise logic
    ('INVERT', 0x83),
    ('AND', 0x84),
    ('OR', 0x85),
    ('XOR', 0x86),
    ('EQUAL', 0x87),

    # arithmetic
    ('INC', 0x8B),
    ('DEC', 0x8C),
    ('SIGN', 0x8D),
    ('NEGATE', 0x8F),
    ('ABS', 0x90),
    ('NOT', 0x91),
    ('NZ', 0x92),
    ('ADD', 0x93),
    ('SUB', 0x94),
    ('MUL', 0x95),
    ('DIV', 0x96),
    ('MOD', 0x97),
    ('SHL', 0x98),
    ('SHR', 0x99),
    ('BOOLAND', 0x9A),
    ('BOOLOR', 0x9B),
    ('NUMEQUAL', 0x9C),
    ('NUMNOTEQUAL', 0x9E),
    ('LT', 0x9F),
    ('GT', 0xA0),
    ('LTE', 0xA1),
    ('GTE', 0xA2),
    ('MIN', 0xA3),
    ('MAX', 0xA4),
    ('WITHIN', 0xA5),

    # crypto
    ('SHA1', 0xA7),
    ('SHA256', 0xA8),
    ('HASH160', 0xA9),
    ('HASH256', 0xAA),
    ('CHECKSIG', 0xAC),
    ('VERIFY', 0xAD),
    ('CHECKMULTISIG', 0xAE),

    # array
    ('ARRAYSIZE', 0xC0),
    ('PACK', 0xC1),
    ('UNPACK', 0xC2),
    ('PICKITEM', 0xC3),
    ('SETITEM', 0xC4),
    ('NEWARRAY', 0xC5),
    ('NEWSTRUCT', 0xC6),
    ('NEWMAP', 0xC7),
    ('APPEND', 0xC8),
    ('REVERSE', 0xC9),
    ('REMOVE', 0xCA),
    ('HASKEY', 0xCB),
    ('KEYS', 0xCC),
    ('VALUES', 0xCD),

    # stack isolation
    ('CALL_I', 0xE0),
    ('CALL_E', 0xE1),
    ('CALL_ED', 0xE2),
    ('CALL_ET', 0xE3),
    ('CALL_EDT', 0xE4),

    # exceptions
    ('THROW', 0xF0),
    ('THROWIFNOT', 0xF1),
]

OpCode = IntEnum('OpCode', _opcodes, module=__name__)
_values = {value for _, value in _opcodes}

OpCode.__doc__ = """Instruction codes of the NEO virtual machine. PUSHF and
    PUSHT are aliases of PUSH0 and PUSH1.
"""


def opcode_name(value: int) -> str:
    """Return the canonical name of the opcode with the given byte
        value. Raises InvalidArgument for bytes outside the catalog.
    """
    tert(type(value) is int, 'value must be int')
    vert(value in _values, f'unrecognized opcode {value:#04x}')
    return OpCode(value).name

def is_opcode(value: int) -> bool:
    """Return True if the byte value is in the catalog."""
    return value in _values
