"""Atomic weights, valence electrons and valences of elements."""
import numbers

from atomtable.element import ELEMENT_TABLE, Element
from atomtable.exceptions import (
    InvalidFormalChargeError,
    InvalidIsotopeError,
    UnsupportedElementError,
)
from atomtable.utils.misc import validate_type

MAX_VALENCE_ELECTRONS = 8

# Covalent valence of a main-group atom, indexed by its valence-electron count
VALENCE_BY_ELECTRON_COUNT = (0, 1, 2, 3, 4, 3, 2, 1, 0)


def atomic_weight(element, isotope=None):
    """Return the atomic weight of an element or one of its isotopes.

    Parameters
    ----------
    element : Element
        The element to look up. The wildcard weighs 0.0.
    isotope : int, optional, default=None
        A mass number. If None, the standard atomic weight is returned.

    Returns
    -------
    weight : float
        The weight in unified atomic mass units

    Raises
    ------
    InvalidIsotopeError
        If the isotope is not tabulated for the element, or the element
        is the wildcard
    UnsupportedElementError
        If no isotope masses (or no standard weight) are tabulated for
        the element
    """
    validate_type([element], Element)
    record = ELEMENT_TABLE[element.atomic_number]

    if isotope is None:
        if record.weight is None:
            raise UnsupportedElementError(record.symbol, "standard atomic weight")
        return record.weight

    validate_type([isotope], numbers.Integral)
    if element.is_wildcard:
        raise InvalidIsotopeError(record.symbol, isotope)
    if not record.isotopes:
        raise UnsupportedElementError(record.symbol, "isotope mass")
    try:
        return record.isotopes[isotope]
    except KeyError:
        raise InvalidIsotopeError(record.symbol, isotope)


def n_valence_electrons(element, formal_charge=0):
    """Return the valence-electron count of an element carrying a formal charge.

    Only the SMILES organic subset (B, C, N, O, P, S, F, Cl, Br, I and H)
    is tabulated; every other element, the wildcard included, raises
    ``UnsupportedElementError``. A charge that leaves fewer than 0 or more
    than 8 electrons raises ``InvalidFormalChargeError``.
    """
    validate_type([element], Element)
    validate_type([formal_charge], numbers.Integral)
    record = ELEMENT_TABLE[element.atomic_number]
    if record.valence_electrons is None:
        raise UnsupportedElementError(record.symbol, "valence electrons")

    count = record.valence_electrons - formal_charge
    if not 0 <= count <= MAX_VALENCE_ELECTRONS:
        raise InvalidFormalChargeError(record.symbol, formal_charge)
    return count


def valence(element, formal_charge=0):
    """Return the covalent valence of an element carrying a formal charge.

    Atoms with up to four valence electrons use all of them; atoms with more
    use the eight-minus-N rule. Errors from ``n_valence_electrons`` propagate.
    """
    return VALENCE_BY_ELECTRON_COUNT[n_valence_electrons(element, formal_charge)]
