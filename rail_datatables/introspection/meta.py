"""
DataTableMeta configuration for Django models.

Usage:
    class Contact(models.Model):
        name = models.CharField(max_length=100)
        email = models.EmailField()
        internal_id = models.CharField(max_length=40)

        class DataTableMeta:
            json_names = {"name": "full_name"}
            exclude = ["internal_id"]
            columns = {"email": DataTableColumn(searchable=True)}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from django.db import models

from ..columns.types import ColumnAnnotation

logger = logging.getLogger(__name__)


@dataclass
class DataTableMetaConfig:
    """
    Normalized DataTableMeta declaration of a model.

    Attributes:
        columns: Mapping of field names to column annotations.
        exclude: Field names left out of the generated columns.
        json_names: Mapping of field names to declared serialization names.
        include_properties: Per-model override of the ``include_properties``
                            setting; ``None`` defers to settings.
    """

    columns: dict[str, ColumnAnnotation] = field(default_factory=dict)
    exclude: list[str] = field(default_factory=list)
    json_names: dict[str, str] = field(default_factory=dict)
    include_properties: Optional[bool] = None


def _load_meta(model_class: type[models.Model]) -> DataTableMetaConfig:
    declared = getattr(model_class, "DataTableMeta", None)
    if declared is None:
        return DataTableMetaConfig()

    return DataTableMetaConfig(
        columns=dict(getattr(declared, "columns", None) or {}),
        exclude=list(getattr(declared, "exclude", None) or []),
        json_names=dict(getattr(declared, "json_names", None) or {}),
        include_properties=getattr(declared, "include_properties", None),
    )


def get_model_datatable_meta(model_class: type[models.Model]) -> DataTableMetaConfig:
    """
    Get the DataTableMeta configuration for a model.

    Args:
        model_class: The Django model class

    Returns:
        DataTableMetaConfig instance for the model
    """
    # A child without its own DataTableMeta inherits the parent's declaration;
    # the resolved config is cached per class in __dict__.
    if "_datatable_meta_instance" not in model_class.__dict__:
        model_class._datatable_meta_instance = _load_meta(model_class)
        logger.debug("Loaded DataTableMeta for %s", model_class.__name__)

    return model_class._datatable_meta_instance
