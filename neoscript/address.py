from __future__ import annotations
from .errors import DecodeFailure, InvalidAddress, dert, tert, vert
from .hashing import hash256, script_hash
from .params import get_param
from .verification import make_single_sig_script, make_verification_script
import base58
import logging


logger = logging.getLogger(__name__)


def b58encode(data: bytes) -> str:
    """Encode bytes as Base58 text."""
    return base58.b58encode(bytes(data)).decode('ascii')

def b58decode(text: str) -> bytes:
    """Decode Base58 text. Raises DecodeFailure on characters outside
        the alphabet.
    """
    tert(type(text) is str, 'text must be str')
    dert(text == text.strip(), 'base58 text must not contain whitespace')
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise DecodeFailure(f'invalid base58 text: {e}') from e

def _version(version: int|None) -> int:
    version = get_param('address_version') if version is None else version
    tert(type(version) is int, 'version must be int')
    vert(0 <= version < 256, 'version must be a single byte')
    return version

def to_address(script_hash: bytes, version: int|None = None) -> str:
    """Encode a 20-byte script hash as a Base58Check address: version
        byte, hash, and the first 4 bytes of the double sha256 of both.
    """
    tert(isinstance(script_hash, (bytes, bytearray)), 'script_hash must be bytes')
    vert(len(script_hash) == 20, 'script hash must be 20 bytes long')
    payload = bytes([_version(version)]) + bytes(script_hash)
    return b58encode(payload + hash256(payload)[:4])

def is_valid_address(address: str, version: int|None = None) -> bool:
    """Return True if the address decodes to 25 bytes with the expected
        version byte and a matching checksum. Never raises on malformed
        addresses.
    """
    if type(address) is not str:
        return False

    try:
        data = b58decode(address)
    except DecodeFailure:
        logger.debug('rejected address %r: invalid base58', address)
        return False

    if len(data) != 25:
        logger.debug('rejected address %r: decoded length %d', address, len(data))
        return False
    if data[0] != _version(version):
        logger.debug('rejected address %r: version byte %#04x', address, data[0])
        return False
    if hash256(data[:21])[:4] != data[21:]:
        logger.debug('rejected address %r: checksum mismatch', address)
        return False

    return True

def to_script_hash(address: str, version: int|None = None) -> bytes:
    """Decode the address into its 20-byte script hash. Raises
        InvalidAddress if the address is not valid.
    """
    if not is_valid_address(address, version):
        raise InvalidAddress(f'not a valid address: {address!r}')
    return b58decode(address)[1:21]

def script_hash_to_address(script_hash: str, version: int|None = None) -> str:
    """Encode a hex script hash as an address."""
    tert(type(script_hash) is str, 'script_hash must be hex str')
    try:
        data = bytes.fromhex(script_hash)
    except ValueError as e:
        raise DecodeFailure(f'invalid hex script hash: {e}') from e
    return to_address(data, version)

def public_key_to_script_hash(public_key: bytes) -> bytes:
    """Return the script hash of the single-sig account of the key."""
    return script_hash(make_single_sig_script(public_key))

def public_key_to_address(public_key: bytes, version: int|None = None) -> str:
    """Return the address of the single-sig account of the key."""
    return to_address(public_key_to_script_hash(public_key), version)

def multisig_script_hash(threshold: int, public_keys: list[bytes]) -> bytes:
    """Return the script hash of the account that requires threshold
        signatures from the public_keys. One key with threshold 1 gives
        the single-sig account.
    """
    return script_hash(make_verification_script(threshold, public_keys))

def multisig_address(
        threshold: int, public_keys: list[bytes], version: int|None = None
    ) -> str:
    """Return the address of the account that requires threshold
        signatures from the public_keys.
    """
    return to_address(multisig_script_hash(threshold, public_keys), version)
