"""Packaged element tables."""

from atomtable.tables.tables import (
    ElementRecord,
    ElementTable,
    get_table_dir,
    get_table_path,
    load_element_table,
)

__all__ = (
    "ElementRecord",
    "ElementTable",
    "get_table_dir",
    "get_table_path",
    "load_element_table",
)
