"""atomtable: chemical elements, atomic symbols, weights and valences."""

from atomtable.element import (
    Element,
    from_atomic_number,
    from_symbol,
    to_atomic_number,
    to_symbol,
)
from atomtable.exceptions import (
    AtomTableError,
    InvalidAtomicNumberError,
    InvalidAtomicSymbolError,
    InvalidFormalChargeError,
    InvalidIsotopeError,
    UnsupportedElementError,
)
from atomtable.properties import atomic_weight, n_valence_electrons, valence

__version__ = "0.1.0"

__all__ = (
    "Element",
    "from_atomic_number",
    "from_symbol",
    "to_atomic_number",
    "to_symbol",
    "atomic_weight",
    "n_valence_electrons",
    "valence",
    "AtomTableError",
    "InvalidAtomicNumberError",
    "InvalidAtomicSymbolError",
    "InvalidFormalChargeError",
    "InvalidIsotopeError",
    "UnsupportedElementError",
    "__version__",
)
