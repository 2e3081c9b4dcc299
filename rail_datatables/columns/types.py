"""Dataclasses describing DataTables.js columns.

This module contains the column annotation supplied by schema authors, the
resolved column descriptor handed to the client widget, and the per-field
schema record consumed by the builder.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional, Sequence, Union

# Legacy "no value" marker for responsive_priority and order.
UNSET_PRIORITY = -1

# Python attribute name -> DataTables.js column option key.
WIDGET_KEY_MAP: dict[str, str] = {
    "data": "data",
    "title": "title",
    "visible": "visible",
    "searchable": "searchable",
    "orderable": "orderable",
    "width": "width",
    "class_name": "className",
    "cell_type": "cellType",
    "content_padding": "contentPadding",
    "default_content": "defaultContent",
    "name": "name",
    "order_data": "orderData",
    "order_data_type": "orderDataType",
    "order_sequence": "orderSequence",
    "type": "type",
    "footer": "footer",
    "aria_title": "ariaTitle",
    "responsive_priority": "responsivePriority",
    "order": "order",
}

WIDGET_KEYS: tuple[str, ...] = tuple(WIDGET_KEY_MAP.values())

OrderData = Union[int, Sequence[int]]


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


def _freeze_sequences(instance) -> None:
    # Frozen dataclasses need object.__setattr__ for normalization.
    object.__setattr__(instance, "order_data", _freeze(instance.order_data))
    object.__setattr__(instance, "order_sequence", _freeze(instance.order_sequence))


def _widget_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value


@dataclass(frozen=True)
class ColumnAnnotation:
    """
    Optional per-field overrides for a DataTables column.

    Every attribute defaults to ``None`` which means "not set": the builder
    leaves the matching descriptor attribute unset and the serializer omits
    it, so the widget applies its own default.
    """

    data: Optional[str] = None
    title: Optional[str] = None
    visible: Optional[bool] = None
    searchable: Optional[bool] = None
    orderable: Optional[bool] = None
    width: Optional[str] = None
    class_name: Optional[str] = None
    cell_type: Optional[str] = None
    content_padding: Optional[str] = None
    default_content: Optional[str] = None
    name: Optional[str] = None
    order_data: Optional[OrderData] = None
    order_data_type: Optional[str] = None
    order_sequence: Optional[Sequence[str]] = None
    type: Optional[str] = None
    footer: Optional[str] = None
    aria_title: Optional[str] = None
    responsive_priority: Optional[int] = None
    order: Optional[int] = None

    def __post_init__(self):
        _freeze_sequences(self)

    def to_dict(self) -> dict[str, Any]:
        return _to_widget_dict(self)


# Name used by schema authors, mirroring the widget's own vocabulary.
DataTableColumn = ColumnAnnotation


@dataclass(frozen=True)
class ColumnDescriptor:
    """A resolved DataTables column. ``data`` is always populated."""

    data: str
    title: Optional[str] = None
    visible: Optional[bool] = None
    searchable: Optional[bool] = None
    orderable: Optional[bool] = None
    width: Optional[str] = None
    class_name: Optional[str] = None
    cell_type: Optional[str] = None
    content_padding: Optional[str] = None
    default_content: Optional[str] = None
    name: Optional[str] = None
    order_data: Optional[OrderData] = None
    order_data_type: Optional[str] = None
    order_sequence: Optional[Sequence[str]] = None
    type: Optional[str] = None
    footer: Optional[str] = None
    aria_title: Optional[str] = None
    responsive_priority: Optional[int] = None
    order: Optional[int] = None

    def __post_init__(self):
        _freeze_sequences(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the widget's column option mapping.

        Unset attributes are omitted and keys follow the widget's spelling
        (``className``, ``responsivePriority``, ...) in widget key order.
        """
        return _to_widget_dict(self)


@dataclass(frozen=True)
class FieldMetadata:
    """Schema description of a single public field of a source type."""

    name: str
    json_name: Optional[str] = None
    ignore: bool = False
    column: Optional[ColumnAnnotation] = None
    verbose_name: Optional[str] = None


def _to_widget_dict(record) -> dict[str, Any]:
    values = {f.name: getattr(record, f.name) for f in fields(record)}
    return {
        widget_key: _widget_value(values[attr])
        for attr, widget_key in WIDGET_KEY_MAP.items()
        if values[attr] is not None
    }
