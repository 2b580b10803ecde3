from ecdsa import NIST256p, VerifyingKey
from ecdsa.errors import MalformedPointError
from .errors import tert, vert
from .params import get_param


def is_compressed(public_key: bytes) -> bool:
    """Return True if the key is not in the uncompressed 0x04 form."""
    tert(isinstance(public_key, (bytes, bytearray)), 'public_key must be bytes')
    return len(public_key) > 1 and public_key[0] != 0x04

def compress(public_key: bytes) -> bytes:
    """Compress a 65-byte uncompressed public key into 33 bytes. The
        tag is 0x03 for an odd Y coordinate and 0x02 for an even one;
        the X coordinate is kept as-is. Curve membership is not checked.
    """
    tert(isinstance(public_key, (bytes, bytearray)), 'public_key must be bytes')
    vert(len(public_key) == 65, 'uncompressed public key must be 65 bytes')
    vert(public_key[0] == 0x04, 'uncompressed public key must start with 0x04')
    # based on: https://tools.ietf.org/html/rfc5480#section-2.2
    tag = b'\x03' if public_key[64] % 2 == 1 else b'\x02'
    return tag + bytes(public_key[1:33])

def ensure_compressed(public_key: bytes) -> bytes:
    """Return the key in compressed form, compressing it if needed."""
    if is_compressed(public_key):
        return bytes(public_key)
    return compress(public_key)

def public_key_from_int(public_key: int) -> bytes:
    """Encode a public key given as an integer into its compressed
        byte form, left-padded to the public key size.
    """
    tert(type(public_key) is int, 'public_key must be int')
    vert(public_key >= 0, 'public_key must be >= 0')
    size = get_param('public_key_size')
    vert(public_key.bit_length() <= size * 8, f'public_key must fit into {size} bytes')
    return public_key.to_bytes(size, 'big')

def is_valid_public_key(public_key: bytes) -> bool:
    """Return True if the bytes decode to a point on the secp256r1
        curve in either compressed or uncompressed form.
    """
    if not isinstance(public_key, (bytes, bytearray)):
        return False
    if len(public_key) not in (33, 65):
        return False
    try:
        VerifyingKey.from_string(bytes(public_key), curve=NIST256p)
        return True
    except (MalformedPointError, ValueError):
        return False
