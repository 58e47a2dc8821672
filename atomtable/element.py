"""The chemical elements and the wildcard atom as an enumeration."""
import enum
import numbers

from atomtable.exceptions import InvalidAtomicNumberError
from atomtable.tables import load_element_table
from atomtable.utils.misc import validate_type

ELEMENT_TABLE = load_element_table()

WILDCARD_NAME = "Any"


class _ElementBase(enum.Enum):
    """Behaviour shared by every member of ``Element``.

    Members carry their atomic number as their value. ``Element(6)`` and
    ``Element.from_atomic_number(6)`` both return ``Element.C``; an atomic
    number outside the table raises ``InvalidAtomicNumberError``.

    ``Element(n)`` is the unchecked enum lookup: values equal to a member
    value, such as ``6.0`` or ``True``, resolve to that member. Use
    ``from_atomic_number`` to reject anything but an integer.
    """

    @classmethod
    def _missing_(cls, value):
        raise InvalidAtomicNumberError(value)

    @classmethod
    def _from_record(cls, record):
        return cls[WILDCARD_NAME if record.number == 0 else record.symbol]

    @classmethod
    def from_atomic_number(cls, atomic_number):
        """Return the element with the given atomic number, 0 for the wildcard."""
        validate_type([atomic_number], numbers.Integral)
        if isinstance(atomic_number, bool):
            raise TypeError(
                f"Expected {atomic_number!r} to be an atomic number but got bool instead."
            )
        return cls(int(atomic_number))

    @classmethod
    def from_symbol(cls, symbol):
        """Return the element for a case-insensitive atomic symbol, "*" for the wildcard."""
        validate_type([symbol], str)
        return cls._from_record(ELEMENT_TABLE.lookup_symbol(symbol))

    @property
    def atomic_number(self):
        return self.value

    @property
    def symbol(self):
        return ELEMENT_TABLE[self.value].symbol

    @property
    def full_name(self):
        return ELEMENT_TABLE[self.value].name

    @property
    def is_wildcard(self):
        return self.value == 0

    def __str__(self):
        return self.symbol


Element = _ElementBase(
    "Element",
    [
        (WILDCARD_NAME if record.number == 0 else record.symbol, record.number)
        for record in ELEMENT_TABLE
    ],
    module=__name__,
    qualname="Element",
)


def from_atomic_number(atomic_number):
    """Convert an atomic number to an ``Element``.

    Parameters
    ----------
    atomic_number : int
        An atomic number in [0, 118]; 0 is the wildcard

    Returns
    -------
    element : Element

    Raises
    ------
    InvalidAtomicNumberError
        If no element has this atomic number
    """
    return Element.from_atomic_number(atomic_number)


def to_atomic_number(element):
    """Convert an ``Element`` to its atomic number."""
    validate_type([element], Element)
    return element.atomic_number


def from_symbol(symbol):
    """Convert an atomic symbol to an ``Element``.

    Matching ignores case, so "cl", "CL" and "Cl" all give ``Element.Cl``.
    The wildcard is written "*".

    Raises
    ------
    InvalidAtomicSymbolError
        If no element has this symbol. The error keeps ``symbol`` as passed.
    """
    return Element.from_symbol(symbol)


def to_symbol(element):
    """Convert an ``Element`` to its canonical atomic symbol."""
    validate_type([element], Element)
    return element.symbol
