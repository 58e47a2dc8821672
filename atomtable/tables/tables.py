"""Load element table XML files."""

import importlib.resources as resources
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from lxml import etree

from atomtable.exceptions import InvalidAtomicNumberError, InvalidAtomicSymbolError


@dataclass(frozen=True)
class ElementRecord:
    """One row of an element table.

    Parameters
    ----------
    number : int
        The atomic number, 0 for the wildcard
    symbol : str
        The canonical atomic symbol
    name : str
        The name of the element
    weight : float, optional, default=None
        The standard atomic weight
    valence_electrons : int, optional, default=None
        The valence-electron count of the neutral atom
    isotopes : dict, optional
        Isotope masses keyed by mass number
    """

    number: int
    symbol: str
    name: str
    weight: Optional[float] = None
    valence_electrons: Optional[int] = None
    isotopes: Dict[int, float] = field(default_factory=dict)


class ElementTable:
    """An ordered table of element records indexed by atomic number and symbol."""

    def __init__(self, records: Iterable[ElementRecord]):
        self.records = tuple(records)
        self._by_number = {record.number: record for record in self.records}
        self._by_symbol = {record.symbol.lower(): record for record in self.records}

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, atomic_number):
        return self.lookup_number(atomic_number)

    def __repr__(self):
        return "ElementTable({} records)".format(len(self.records))

    def lookup_number(self, atomic_number: int) -> ElementRecord:
        """Return the record whose atomic number is ``atomic_number``."""
        try:
            return self._by_number[atomic_number]
        except KeyError:
            raise InvalidAtomicNumberError(atomic_number)

    def lookup_symbol(self, symbol: str) -> ElementRecord:
        """Return the record for a symbol, ignoring case.

        Only ASCII input is folded; symbols are plain Latin letters.
        """
        if not symbol.isascii():
            raise InvalidAtomicSymbolError(symbol)
        try:
            return self._by_symbol[symbol.lower()]
        except KeyError:
            raise InvalidAtomicSymbolError(symbol)


def get_table_dir():
    """Return the directory holding the packaged element tables."""
    return resources.files("atomtable").joinpath("tables")


def get_table_path(name="elements"):
    """Return the file path of a packaged element table XML."""
    file_path = os.path.join(str(get_table_dir()), "xml", "{}.xml".format(name))
    if not os.path.isfile(file_path):
        raise ValueError(
            f"Could not find element table named {name} in path {get_table_dir()}"
        )
    return file_path


def load_element_table(file_name=None, validation=True) -> ElementTable:
    """Parse an element table XML file.

    Parameters
    ----------
    file_name : str, optional, default=None
        Path to the table file. The packaged table is used if None.
    validation : bool, optional, default=True
        Check the file with ``atomtable.validator.Validator`` before loading.

    Returns
    -------
    table : ElementTable
        The parsed table
    """
    if file_name is None:
        file_name = get_table_path()
    file_name = str(file_name)

    if validation:
        from atomtable.validator import Validator

        Validator(file_name)

    table_tree = etree.parse(file_name)
    records = [
        _parse_element(entry) for entry in table_tree.xpath("/ElementTable/Element")
    ]
    return ElementTable(records)


def _parse_element(entry):
    weight = entry.attrib.get("weight")
    valence_electrons = entry.attrib.get("valenceElectrons")
    isotopes = {
        int(isotope.attrib["massNumber"]): float(isotope.attrib["mass"])
        for isotope in entry.iterchildren("Isotope")
    }
    return ElementRecord(
        number=int(entry.attrib["number"]),
        symbol=entry.attrib["symbol"],
        name=entry.attrib["name"],
        weight=None if weight is None else float(weight),
        valence_electrons=None if valence_electrons is None else int(valence_electrons),
        isotopes=isotopes,
    )
