from __future__ import annotations
from .builder import ScriptBuilder
from .errors import dert, tert, vert
from .keys import ensure_compressed
from .opcodes import OpCode
from .parsing import read_instructions, push_integer_value
from .params import get_param


def make_single_sig_script(public_key: bytes) -> bytes:
    """Make a verification script that requires a valid signature from
        the given key. The key is compressed first if necessary.
    """
    return ScriptBuilder().emit_push_data(
        ensure_compressed(public_key)
    ).emit_opcode(OpCode.CHECKSIG).finish()

def make_multisig_script(threshold: int, public_keys: list[bytes]) -> bytes:
    """Make a verification script that requires valid signatures from
        at least threshold of the public_keys. Keys are compressed if
        necessary and kept in the order supplied; signatures must later
        be supplied in the same order. The threshold must be at least 2
        and at most the number of keys.
    """
    tert(type(threshold) is int, 'threshold must be int')
    tert(isinstance(public_keys, (list, tuple)), 'public_keys must be list of bytes')
    vert(2 <= threshold <= len(public_keys),
         'signing threshold must be at least 2 and not higher than the '
         'number of public keys')
    max_keys = get_param('max_multisig_keys')
    vert(len(public_keys) <= max_keys,
         f'at most {max_keys} public keys can take part in a multi-sig account')

    keys = [ensure_compressed(pk) for pk in public_keys]

    builder = ScriptBuilder().emit_push_integer(threshold)
    for key in keys:
        builder.emit_push_data(key)
    return builder.emit_push_integer(len(keys)).emit_opcode(
        OpCode.CHECKMULTISIG
    ).finish()

def make_verification_script(threshold: int, public_keys: list[bytes]) -> bytes:
    """Make a single-sig script for one key with threshold 1, otherwise
        a multi-sig script. A threshold of 1 with several keys is
        rejected rather than coerced.
    """
    tert(type(threshold) is int, 'threshold must be int')
    tert(isinstance(public_keys, (list, tuple)), 'public_keys must be list of bytes')
    if threshold == 1 and len(public_keys) == 1:
        return make_single_sig_script(public_keys[0])
    return make_multisig_script(threshold, public_keys)

def read_verification_script(script: bytes) -> tuple[int, list[bytes]]:
    """Parse a single-sig or multi-sig verification script. Returns the
        signing threshold and the compressed public keys in script
        order. Raises DecodeFailure for any other kind of script.
    """
    instructions = read_instructions(script)
    key_size = get_param('public_key_size')

    def is_key_push(op: int, operand: bytes) -> bool:
        return op == key_size and len(operand) == key_size

    if len(instructions) == 2:
        (op, operand), (last, _) = instructions
        dert(is_key_push(op, operand) and last == OpCode.CHECKSIG,
             'not a single-sig verification script')
        return 1, [operand]

    dert(len(instructions) >= 5, 'not a verification script')
    dert(instructions[-1][0] == OpCode.CHECKMULTISIG,
         'not a multi-sig verification script')

    threshold = push_integer_value(*instructions[0])
    count = push_integer_value(*instructions[-2])
    keys = instructions[1:-2]
    dert(threshold is not None and count is not None,
         'multi-sig script must push threshold and key count')
    dert(all(is_key_push(op, operand) for op, operand in keys),
         'multi-sig script must push compressed public keys')
    dert(count == len(keys), 'key count does not match number of keys')
    dert(2 <= threshold <= count, 'invalid signing threshold')

    return threshold, [operand for _, operand in keys]
