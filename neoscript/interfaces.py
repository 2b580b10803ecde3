from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class CanSign(Protocol):
    """A signing capability: a key holder that can sign messages."""
    public_key: bytes

    def sign(self, message: bytes) -> bytes:
        """Sign the message and return the raw signature."""
        ...


@runtime_checkable
class WitnessProtocol(Protocol):
    """An invocation script paired with the verification script or
        script hash it satisfies.
    """
    invocation_script: bytes
    verification_script: bytes
    script_hash: bytes

    def serialize(self) -> bytes:
        """Serialize the witness for inclusion in a transaction."""
        ...

    @classmethod
    def deserialize(cls, data: bytes) -> WitnessProtocol:
        """Deserialize a witness from bytes."""
        ...
