import numpy as np
import pytest

from atomtable.exceptions import (
    InvalidAtomicNumberError,
    InvalidAtomicSymbolError,
    ValidationWarning,
)
from atomtable.tables import ElementRecord, get_table_path, load_element_table
from atomtable.tests.base_test import BaseTest
from atomtable.tests.utils import get_fn

ORGANIC_SUBSET = ["H", "B", "C", "N", "O", "F", "P", "S", "Cl", "Br", "I"]
ISOTOPE_SUBSET = [
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "Br", "I",
]


class TestElementTable(BaseTest):
    def test_size(self, element_table):
        assert len(element_table) == 119

    def test_rows_ordered_by_atomic_number(self, element_table):
        assert [record.number for record in element_table] == list(range(119))

    def test_wildcard_row(self, element_table):
        record = element_table[0]
        assert record.symbol == "*"
        assert record.weight == 0.0
        assert record.valence_electrons is None
        assert record.isotopes == {}

    def test_every_element_has_a_weight(self, element_table):
        weights = np.array([record.weight for record in element_table][1:])
        assert np.all(weights > 0)

    def test_valence_electron_subset(self, element_table):
        tabulated = [
            record.symbol
            for record in element_table
            if record.valence_electrons is not None
        ]
        assert sorted(tabulated) == sorted(ORGANIC_SUBSET)

    def test_isotope_subset(self, element_table):
        tabulated = [record.symbol for record in element_table if record.isotopes]
        assert sorted(tabulated) == sorted(ISOTOPE_SUBSET)

    def test_isotope_masses_near_mass_numbers(self, element_table):
        for record in element_table:
            mass_numbers = np.array(list(record.isotopes.keys()), dtype=float)
            masses = np.array(list(record.isotopes.values()))
            assert np.allclose(masses, mass_numbers, atol=0.1)

    @pytest.mark.parametrize("symbol", ["c", "C", "cL", "*"])
    def test_lookup_symbol(self, element_table, symbol):
        assert element_table.lookup_symbol(symbol).symbol.lower() == symbol.lower()

    def test_lookup_symbol_invalid(self, element_table):
        with pytest.raises(InvalidAtomicSymbolError):
            element_table.lookup_symbol("Zz")

    @pytest.mark.parametrize("atomic_number", [-1, 119, 255])
    def test_lookup_number_invalid(self, element_table, atomic_number):
        with pytest.raises(InvalidAtomicNumberError):
            element_table.lookup_number(atomic_number)

    def test_lookup_symbol_rejects_non_ascii(self, element_table):
        # KELVIN SIGN lower-cases to an ASCII "k"
        with pytest.raises(InvalidAtomicSymbolError) as excinfo:
            element_table.lookup_symbol("\u212a")
        assert excinfo.value.symbol == "\u212a"


class TestLoadElementTable(BaseTest):
    def test_default_path(self, element_table):
        table = load_element_table()
        assert table.records == element_table.records

    def test_unknown_table_name(self):
        with pytest.raises(ValueError):
            get_table_path("missing")

    def test_minimal_table(self):
        table = load_element_table(get_fn("valid_minimal.xml"))
        assert len(table) == 3
        assert table[1] == ElementRecord(
            number=1,
            symbol="H",
            name="Hydrogen",
            weight=1.008,
            valence_electrons=1,
            isotopes={1: 1.007825, 2: 2.014102},
        )
        assert table[2].isotopes == {}
        assert table[2].valence_electrons is None

    def test_missing_weight_loads_as_none(self):
        with pytest.warns(ValidationWarning):
            table = load_element_table(get_fn("warning_missing_weight.xml"))
        assert table[2].weight is None

    def test_skip_validation(self):
        table = load_element_table(
            get_fn("validationerror_gap.xml"), validation=False
        )
        assert [record.number for record in table] == [0, 1, 3]
        assert table.lookup_number(3).symbol == "Li"
        with pytest.raises(InvalidAtomicNumberError):
            table.lookup_number(2)
