"""
High level entry points.

``get_datatable_columns`` reflects a type and builds its DataTables columns
using the project settings; ``columns_to_json`` produces the array handed to
the widget's ``columns`` option.
"""

import json
import logging
from typing import Any, Iterable, Optional

from django.core.serializers.json import DjangoJSONEncoder

from .columns.builder import ColumnDescriptorBuilder
from .columns.types import ColumnDescriptor
from .config_proxy import get_setting
from .introspection.sources import fields_from_type

logger = logging.getLogger(__name__)


def _resolve(value: Optional[Any], key: str) -> Any:
    return get_setting(key) if value is None else value


def get_datatable_columns(
    cls: type,
    auto_camelcase: Optional[bool] = None,
    titles_from_verbose_name: Optional[bool] = None,
    include_properties: Optional[bool] = None,
) -> list[ColumnDescriptor]:
    """
    Convert the public fields of a type into DataTables column descriptors.

    Options left as ``None`` are read from the ``RAIL_DATATABLES`` setting.

    Args:
        cls: Django model class, dataclass or annotated class.
        auto_camelcase: snake_case to lowerCamelCase for the ``data`` fallback.
        titles_from_verbose_name: Default titles from Django verbose names.
        include_properties: Include public properties as columns.

    Returns:
        One ColumnDescriptor per non-ignored field, in declaration order.
    """
    field_list = fields_from_type(
        cls, include_properties=bool(_resolve(include_properties, "include_properties"))
    )
    builder = ColumnDescriptorBuilder(
        auto_camelcase=bool(_resolve(auto_camelcase, "auto_camelcase")),
        titles_from_verbose_name=bool(
            _resolve(titles_from_verbose_name, "titles_from_verbose_name")
        ),
    )
    columns = builder.build(field_list)
    logger.debug("Built %d DataTables columns for %s", len(columns), cls.__name__)
    return columns


def columns_to_dicts(columns: Iterable[ColumnDescriptor]) -> list[dict[str, Any]]:
    """Serialize descriptors to widget mappings, omitting unset options."""
    return [column.to_dict() for column in columns]


def columns_to_json(
    columns: Iterable[ColumnDescriptor], indent: Optional[int] = None
) -> str:
    """Serialize descriptors to the JSON array expected by ``columns``."""
    return json.dumps(
        columns_to_dicts(columns),
        cls=DjangoJSONEncoder,
        indent=_resolve(indent, "json_indent"),
    )
