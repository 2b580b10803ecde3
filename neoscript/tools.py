from __future__ import annotations
from .address import (
    is_valid_address,
    multisig_address,
    public_key_to_address,
    to_script_hash,
)
from .errors import DecodeFailure, InvalidAddress, InvalidArgument
from .parsing import disassemble
from .verification import make_verification_script
from sys import argv, exit


__version__ = '0.1.0'


def version() -> str:
    """Return the neoscript version."""
    return __version__

def cli_help() -> str:
    """Return CLI help text."""
    name = argv[0]
    return '\n'.join([
        f'Usage: {name} [method] [options]',
        '\taddress pubkey_hex -- prints the address of the single-sig '
        'account of the public key',
        '\tmultisig_address threshold pubkey_hex [pubkey_hex ...] -- prints '
        'the address of the multi-sig account of the public keys',
        '\tverification_script threshold pubkey_hex [pubkey_hex ...] -- '
        'prints the verification script hex for the public keys',
        '\tscripthash address -- prints the script hash hex of the address',
        '\tvalidate address -- prints true if the address is valid or false '
        'otherwise',
        '\tdisassemble script_hex -- prints the disassembled script',
        '\tversion -- print current neoscript version',
        '',
        'Public keys may be compressed (33 bytes) or uncompressed (65 '
        'bytes). All byte values must be hexadecimal strings.',
    ])

def _clert(condition: bool, message: str = ''):
    """CLI assert: print error message and exit if condition fails."""
    if not condition:
        message = f'{message}\n{cli_help()}' if message else cli_help()
        print(message)
        exit(1)

def _parse_hex(value: str, name: str) -> bytes:
    value = value[2:] if value.startswith('0x') else value
    try:
        return bytes.fromhex(value)
    except ValueError:
        _clert(False, f'{name} must be hexadecimal.')

def _parse_threshold_and_keys(args: list[str]) -> tuple[int, list[bytes]]:
    _clert(len(args) >= 2, 'Must supply threshold and at least one pubkey_hex.')
    _clert(args[0].isdigit(), 'threshold must be a positive integer.')
    return int(args[0]), [_parse_hex(a, 'pubkey_hex') for a in args[1:]]

def run_cli() -> None:
    """Run the simple CLI tool. More advanced functionality requires
        programmatic access.
    """
    method = argv[1] if len(argv) > 1 else 'help'
    try:
        match method:
            case 'version' | '--version':
                print(version())
            case 'help' | '--help' | '?' | '-?' | '-h':
                print(cli_help())
            case 'address':
                _clert(len(argv) >= 3, 'Must supply pubkey_hex parameter.')
                print(public_key_to_address(_parse_hex(argv[2], 'pubkey_hex')))
            case 'multisig_address':
                threshold, keys = _parse_threshold_and_keys(argv[2:])
                print(multisig_address(threshold, keys))
            case 'verification_script':
                threshold, keys = _parse_threshold_and_keys(argv[2:])
                print(make_verification_script(threshold, keys).hex())
            case 'scripthash':
                _clert(len(argv) >= 3, 'Must supply address parameter.')
                print(to_script_hash(argv[2]).hex())
            case 'validate':
                _clert(len(argv) >= 3, 'Must supply address parameter.')
                print('true' if is_valid_address(argv[2]) else 'false')
            case 'disassemble':
                _clert(len(argv) >= 3, 'Must supply script_hex parameter.')
                print('\n'.join(disassemble(_parse_hex(argv[2], 'script_hex'))))
            case _:
                _clert(False, f'Unknown method {method}.')
    except (InvalidArgument, InvalidAddress, DecodeFailure) as e:
        print(f'{e.__class__.__name__}: {str(e)}')
        exit(1)
