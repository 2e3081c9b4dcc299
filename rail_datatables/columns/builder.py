"""Column descriptor builder.

Turns an ordered list of :class:`FieldMetadata` into DataTables column
descriptors. The builder is pure: it never mutates its input, keeps no cache
and returns fresh descriptors on every call, so it can be shared between
threads without locking.
"""

import logging
from dataclasses import fields
from typing import Any, Iterable, Optional

from .naming import fallback_data_name
from .types import (
    UNSET_PRIORITY,
    ColumnAnnotation,
    ColumnDescriptor,
    FieldMetadata,
)

logger = logging.getLogger(__name__)

_ANNOTATION_ATTRS = tuple(f.name for f in fields(ColumnAnnotation))
_PRIORITY_ATTRS = ("responsive_priority", "order")


class ColumnDescriptorBuilder:
    """
    Resolve field schema into DataTables column descriptors.

    Args:
        auto_camelcase: Convert snake_case field names to lowerCamelCase for the
            ``data`` fallback instead of only lowering the first character.
        titles_from_verbose_name: Fill an unset ``title`` from the field's
            verbose name when the schema source provides one.
    """

    def __init__(
        self, auto_camelcase: bool = False, titles_from_verbose_name: bool = False
    ):
        self.auto_camelcase = auto_camelcase
        self.titles_from_verbose_name = titles_from_verbose_name

    def build(self, field_list: Iterable[FieldMetadata]) -> list[ColumnDescriptor]:
        """
        Build one descriptor per non-ignored field, in declaration order.

        Args:
            field_list: Ordered field schema of the source type.

        Returns:
            List of ColumnDescriptor, never longer than ``field_list``.
        """
        columns: list[ColumnDescriptor] = []
        for field_meta in field_list:
            if field_meta.ignore:
                logger.debug("Skipping ignored field '%s'", field_meta.name)
                continue
            columns.append(self.build_column(field_meta))
        return columns

    def build_column(self, field_meta: FieldMetadata) -> ColumnDescriptor:
        values = self._annotation_values(field_meta.column)
        values["data"] = self.resolve_data(field_meta)

        if (
            self.titles_from_verbose_name
            and values.get("title") is None
            and field_meta.verbose_name
        ):
            values["title"] = str(field_meta.verbose_name)

        return ColumnDescriptor(**values)

    def resolve_data(self, field_meta: FieldMetadata) -> str:
        """
        Resolve the ``data`` source of a column.

        Priority: annotation ``data``, then the declared JSON name, then the
        transformed field name.
        """
        column = field_meta.column
        if column is not None and column.data:
            return column.data
        if field_meta.json_name:
            return field_meta.json_name
        return fallback_data_name(field_meta.name, auto_camelcase=self.auto_camelcase)

    def _annotation_values(
        self, column: Optional[ColumnAnnotation]
    ) -> dict[str, Any]:
        if column is None:
            return {}

        values: dict[str, Any] = {}
        for attr in _ANNOTATION_ATTRS:
            value = getattr(column, attr)
            if value is None:
                continue
            if attr in _PRIORITY_ATTRS and value == UNSET_PRIORITY:
                continue
            values[attr] = value
        return values


def build_columns(
    field_list: Iterable[FieldMetadata], **options: Any
) -> list[ColumnDescriptor]:
    """Shortcut for ``ColumnDescriptorBuilder(**options).build(field_list)``."""
    return ColumnDescriptorBuilder(**options).build(field_list)
