from Crypto.Hash import RIPEMD160
from hashlib import sha256 as _sha256
from .errors import tert


def sha256(data: bytes) -> bytes:
    """The general-purpose 32-byte hash."""
    tert(isinstance(data, (bytes, bytearray)), 'data must be bytes')
    return _sha256(data).digest()

def hash256(data: bytes) -> bytes:
    """Double sha256, used for Base58Check checksums."""
    return sha256(sha256(data))

def ripemd160(data: bytes) -> bytes:
    """The 20-byte RIPEMD-160 digest."""
    tert(isinstance(data, (bytes, bytearray)), 'data must be bytes')
    return RIPEMD160.new(data).digest()

def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of the sha256 of the data."""
    return ripemd160(sha256(data))

def script_hash(script: bytes) -> bytes:
    """Return the 20-byte script hash identifying the account or
        contract defined by the script.
    """
    return hash160(bytes(script))
