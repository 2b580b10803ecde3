from .errors import tert, vert


# network parameters read by the address codec and script builders
params = {
    'address_version': 0x17,
    'max_multisig_keys': 1024,
    'public_key_size': 33,
    'private_key_size': 32,
}

_defaults = {**params}


def get_param(name: str) -> int:
    """Return the current value of a network parameter."""
    tert(type(name) is str, 'name must be str')
    vert(name in params, f'unknown parameter {name}')
    return params[name]

def set_param(name: str, value: int) -> None:
    """Set a network parameter, e.g. the address version byte for a
        private network.
    """
    tert(type(name) is str, 'name must be str')
    tert(type(value) is int, 'value must be int')
    vert(name in params, f'unknown parameter {name}')
    vert(value >= 0, 'value must be >= 0')
    if name == 'address_version':
        vert(value < 256, 'address_version must be <256')
    params[name] = value

def reset_params() -> None:
    """Restore every network parameter to its default value."""
    params.clear()
    params.update(_defaults)
