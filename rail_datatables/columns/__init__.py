"""
DataTables column package.

Usage:
    from rail_datatables.columns import DataTableColumn, FieldMetadata, build_columns

    columns = build_columns(
        [
            FieldMetadata("Name", json_name="full_name"),
            FieldMetadata("Email", column=DataTableColumn(searchable=True)),
            FieldMetadata("InternalId", ignore=True),
        ]
    )
"""

from .builder import ColumnDescriptorBuilder, build_columns
from .naming import fallback_data_name, lower_first, to_camel_case
from .types import (
    UNSET_PRIORITY,
    WIDGET_KEY_MAP,
    WIDGET_KEYS,
    ColumnAnnotation,
    ColumnDescriptor,
    DataTableColumn,
    FieldMetadata,
)

__all__ = [
    "ColumnAnnotation",
    "ColumnDescriptor",
    "ColumnDescriptorBuilder",
    "DataTableColumn",
    "FieldMetadata",
    "UNSET_PRIORITY",
    "WIDGET_KEYS",
    "WIDGET_KEY_MAP",
    "build_columns",
    "fallback_data_name",
    "lower_first",
    "to_camel_case",
]
