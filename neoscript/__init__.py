from .address import (
    to_address,
    is_valid_address,
    to_script_hash,
    public_key_to_address,
    public_key_to_script_hash,
    multisig_address,
    multisig_script_hash,
    script_hash_to_address,
)
from .builder import ScriptBuilder
from .errors import InvalidArgument, InvalidAddress, DecodeFailure
from .hashing import script_hash
from .interfaces import CanSign, WitnessProtocol
from .keys import (
    is_compressed,
    compress,
    ensure_compressed,
    is_valid_public_key,
)
from .opcodes import OpCode
from .params import get_param, set_param, reset_params
from .parsing import disassemble
from .signer import KeyPair
from .tools import version
from .verification import (
    make_single_sig_script,
    make_multisig_script,
    make_verification_script,
    read_verification_script,
)
from .witness import (
    Witness,
    make_invocation_script,
    make_single_sig_witness,
    make_multisig_witness,
    make_multisig_witness_from_script,
)
