from __future__ import annotations
from ecdsa import BadSignatureError, NIST256p, SigningKey
from ecdsa.util import MalformedSignature, sigdecode_string, sigencode_string
from hashlib import sha256
from .errors import tert, vert
from .params import get_param


class KeyPair:
    """A secp256r1 key pair implementing the CanSign capability.
        Signatures are deterministic (RFC 6979) over the sha256 of the
        message and encoded as 64 raw bytes r||s.
    """
    signing_key: SigningKey

    def __init__(self, signing_key: SigningKey) -> None:
        tert(isinstance(signing_key, SigningKey), 'signing_key must be ecdsa.SigningKey')
        vert(signing_key.curve == NIST256p, 'signing_key must be on NIST256p')
        self.signing_key = signing_key

    @classmethod
    def generate(cls) -> KeyPair:
        """Generate a new random key pair."""
        return cls(SigningKey.generate(curve=NIST256p))

    @classmethod
    def from_private_key(cls, private_key: bytes) -> KeyPair:
        """Create a key pair from a 32-byte private key."""
        tert(isinstance(private_key, (bytes, bytearray)), 'private_key must be bytes')
        size = get_param('private_key_size')
        vert(len(private_key) == size, f'private_key must be {size} bytes')
        return cls(SigningKey.from_string(bytes(private_key), curve=NIST256p))

    @property
    def private_key(self) -> bytes:
        return self.signing_key.to_string()

    @property
    def public_key(self) -> bytes:
        """The compressed 33-byte public key."""
        return self.signing_key.get_verifying_key().to_string('compressed')

    @property
    def public_key_uncompressed(self) -> bytes:
        """The uncompressed 65-byte public key."""
        return self.signing_key.get_verifying_key().to_string('uncompressed')

    def sign(self, message: bytes) -> bytes:
        """Sign the message. Returns a 64-byte signature."""
        tert(isinstance(message, (bytes, bytearray)), 'message must be bytes')
        return self.signing_key.sign_deterministic(
            bytes(message), hashfunc=sha256, sigencode=sigencode_string
        )

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Return True if the signature over the message is valid."""
        try:
            return self.signing_key.get_verifying_key().verify(
                signature, message, hashfunc=sha256, sigdecode=sigdecode_string
            )
        except (BadSignatureError, MalformedSignature):
            return False
