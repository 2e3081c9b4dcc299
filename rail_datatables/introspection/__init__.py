"""Describe Django models, dataclasses and annotated classes as column schema."""

from .markers import (
    DATATABLE_KEY,
    JSON_IGNORE_KEY,
    JSON_NAME_KEY,
    JsonIgnore,
    JsonName,
)
from .meta import DataTableMetaConfig, get_model_datatable_meta
from .sources import fields_from_type

__all__ = [
    "DATATABLE_KEY",
    "JSON_IGNORE_KEY",
    "JSON_NAME_KEY",
    "DataTableMetaConfig",
    "JsonIgnore",
    "JsonName",
    "fields_from_type",
    "get_model_datatable_meta",
]
