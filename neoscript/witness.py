from __future__ import annotations
from dataclasses import dataclass, field
from .builder import ScriptBuilder
from .classes import Tape, var_bytes
from .errors import DecodeFailure, dert, tert, vert
from .hashing import script_hash as _script_hash
from .interfaces import CanSign
from .verification import (
    make_multisig_script,
    make_single_sig_script,
    read_verification_script,
)
import logging


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Witness:
    """An invocation script paired with the verification script it
        satisfies. The script hash is always derived from the
        verification script when one is present; it is only taken as
        given when the verification script is empty.
    """
    invocation_script: bytes = field()
    verification_script: bytes = field(default=b'')
    script_hash: bytes|None = field(default=None)

    def __post_init__(self) -> None:
        tert(isinstance(self.invocation_script, (bytes, bytearray)),
             'invocation_script must be bytes')
        tert(isinstance(self.verification_script, (bytes, bytearray)),
             'verification_script must be bytes')
        object.__setattr__(self, 'invocation_script', bytes(self.invocation_script))
        object.__setattr__(self, 'verification_script', bytes(self.verification_script))

        if self.verification_script:
            derived = _script_hash(self.verification_script)
            vert(self.script_hash is None or self.script_hash == derived,
                 'script_hash does not match the verification script')
            object.__setattr__(self, 'script_hash', derived)
            return

        vert(self.script_hash is not None,
             'a verification script or a script hash is required')
        tert(isinstance(self.script_hash, (bytes, bytearray)),
             'script_hash must be bytes')
        vert(len(self.script_hash) == 20, 'script hash must be 20 bytes long')
        object.__setattr__(self, 'script_hash', bytes(self.script_hash))

    @classmethod
    def from_scripts(cls, invocation_script: bytes, verification_script: bytes) -> Witness:
        """Create a witness from its invocation and verification
            scripts. The verification script must not be empty because
            the script hash is derived from it.
        """
        tert(isinstance(verification_script, (bytes, bytearray)),
             'verification_script must be bytes')
        vert(len(verification_script) > 0,
             'verification script must not be empty because the script '
             'hash is derived from it')
        return cls(invocation_script, verification_script)

    @classmethod
    def from_invocation_and_hash(
            cls, invocation_script: bytes, script_hash: bytes|str
        ) -> Witness:
        """Create a witness from an invocation script and an already
            known script hash (bytes or hex), without a verification
            script.
        """
        if type(script_hash) is str:
            try:
                script_hash = bytes.fromhex(script_hash)
            except ValueError as e:
                raise DecodeFailure(f'invalid hex script hash: {e}') from e
        return cls(invocation_script, b'', script_hash)

    def serialize(self) -> bytes:
        """Serialize as the var-bytes invocation script followed by the
            var-bytes verification script.
        """
        return var_bytes(self.invocation_script) + var_bytes(self.verification_script)

    @classmethod
    def deserialize(cls, data: bytes) -> Witness:
        """Deserialize a witness. Raises DecodeFailure if the data is
            truncated, has trailing bytes, or has no verification script.
        """
        tert(isinstance(data, (bytes, bytearray)), 'data must be bytes')
        tape = Tape(bytes(data))
        invocation = tape.read_var_bytes()
        verification = tape.read_var_bytes()
        dert(tape.has_terminated(), 'trailing bytes after witness')
        dert(len(verification) > 0,
             'cannot derive script hash without a verification script')
        return cls(invocation, verification)

    def signing_threshold(self) -> int:
        """Return the number of signatures the verification script
            requires.
        """
        return read_verification_script(self.verification_script)[0]

    def public_keys(self) -> list[bytes]:
        """Return the public keys of the verification script in order."""
        return read_verification_script(self.verification_script)[1]


def make_invocation_script(signatures: list[bytes]) -> bytes:
    """Make an invocation script that pushes each signature in order."""
    tert(isinstance(signatures, (list, tuple)), 'signatures must be list of bytes')
    builder = ScriptBuilder()
    for sig in signatures:
        tert(isinstance(sig, (bytes, bytearray)), 'each signature must be bytes')
        builder.emit_push_data(sig)
    return builder.finish()

def make_single_sig_witness(message: bytes, signer: CanSign) -> Witness:
    """Sign the message with the signer and pair the signature with the
        single-sig verification script of the signer's public key.
    """
    tert(isinstance(message, (bytes, bytearray)), 'message must be bytes')
    tert(isinstance(signer, CanSign), 'signer must implement CanSign')
    invocation = make_invocation_script([signer.sign(message)])
    verification = make_single_sig_script(signer.public_key)
    witness = Witness.from_scripts(invocation, verification)
    logger.debug('made single-sig witness for %s', witness.script_hash.hex())
    return witness

def make_multisig_witness(
        threshold: int, signatures: list[bytes], public_keys: list[bytes]
    ) -> Witness:
    """Make a multi-sig witness. Only the first threshold signatures are
        used; they must be ordered consistently with public_keys.
    """
    verification = make_multisig_script(threshold, public_keys)
    return _make_multisig_witness(threshold, signatures, verification)

def make_multisig_witness_from_script(
        signatures: list[bytes], verification_script: bytes
    ) -> Witness:
    """Make a multi-sig witness for an existing multi-sig verification
        script, reading the signing threshold from the script.
    """
    threshold, _ = read_verification_script(verification_script)
    return _make_multisig_witness(threshold, signatures, verification_script)

def _make_multisig_witness(
        threshold: int, signatures: list[bytes], verification_script: bytes
    ) -> Witness:
    tert(isinstance(signatures, (list, tuple)), 'signatures must be list of bytes')
    vert(len(signatures) >= threshold,
         'not enough signatures provided for the required signing threshold')
    invocation = make_invocation_script(list(signatures[:threshold]))
    witness = Witness.from_scripts(invocation, verification_script)
    logger.debug(
        'made %d-signature multi-sig witness for %s',
        threshold, witness.script_hash.hex()
    )
    return witness
