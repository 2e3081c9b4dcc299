"""
rail-datatables

Build DataTables.js column definitions from Django models, dataclasses and
annotated Python classes.

Usage:
    from rail_datatables import DataTableColumn, columns_to_json, get_datatable_columns

    columns = get_datatable_columns(Contact)
    payload = columns_to_json(columns)
"""

from .api import columns_to_dicts, columns_to_json, get_datatable_columns
from .columns import (
    ColumnAnnotation,
    ColumnDescriptor,
    ColumnDescriptorBuilder,
    DataTableColumn,
    FieldMetadata,
    build_columns,
)
from .defaults import LIBRARY_VERSION as __version__
from .introspection import JsonIgnore, JsonName, fields_from_type

__all__ = [
    "ColumnAnnotation",
    "ColumnDescriptor",
    "ColumnDescriptorBuilder",
    "DataTableColumn",
    "FieldMetadata",
    "JsonIgnore",
    "JsonName",
    "build_columns",
    "columns_to_dicts",
    "columns_to_json",
    "fields_from_type",
    "get_datatable_columns",
]
