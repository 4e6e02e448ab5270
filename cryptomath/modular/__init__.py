# Modular Arithmetic Module
"""
Arithmetic modulo n:
- Modular exponentiation, inverse, CRT, Euler's totient - arithmetic.py
- The ring Z/nZ and its elements - ring.py
"""

_EXPORTS = {
    'mod_exp': 'arithmetic',
    'mod_inverse': 'arithmetic',
    'crt': 'arithmetic',
    'euler_phi': 'arithmetic',
    'residues_coprime_to': 'arithmetic',
    'IntegerModRing': 'ring',
    'ModInt': 'ring',
}


# Lazy imports to avoid circular import issues
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    module = import_module(f".{_EXPORTS[name]}", __name__)
    return getattr(module, name)


__all__ = list(_EXPORTS)
