"""
Default configuration for the rail-datatables library.

Every key consumed through ``rail_datatables.config_proxy`` has its default
here. Projects override them with the ``RAIL_DATATABLES`` Django setting.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-datatables"

SETTINGS_NAME = "RAIL_DATATABLES"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # snake_case -> lowerCamelCase for the ``data`` fallback instead of only
    # lowering the first character.
    "auto_camelcase": False,
    # Use Django verbose_name as column title when no title is annotated.
    "titles_from_verbose_name": False,
    # Append public @property members after the declared fields.
    "include_properties": False,
    # Indentation of the JSON emitted by columns_to_json.
    "json_indent": None,
}
