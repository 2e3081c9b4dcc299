"""Schema sources.

This module reflects over a type and describes its public instance fields as
an ordered list of :class:`FieldMetadata`, the input of the column builder.
Three kinds of types are understood:

- Django models (concrete and many-to-many fields, ``DataTableMeta``)
- dataclasses (``Annotated`` markers and field metadata)
- plain classes with class-level annotations (``Annotated`` markers)
"""

import dataclasses
import functools
import logging
from typing import Annotated, Any, ClassVar, get_args, get_origin, get_type_hints

from django.db import models
from django.utils.encoding import force_str
from django.utils.functional import cached_property

from ..columns.types import FieldMetadata
from .markers import collect_markers
from .meta import get_model_datatable_meta

logger = logging.getLogger(__name__)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Return ``(base_type, extras)`` for an ``Annotated`` hint."""
    if get_origin(hint) is Annotated:
        base, *extras = get_args(hint)
        return base, tuple(extras)
    return hint, ()


def _is_class_var(hint: Any) -> bool:
    base, _ = _split_annotated(hint)
    return base is ClassVar or get_origin(base) is ClassVar


def _is_library_class(klass: type) -> bool:
    return klass is object or klass.__module__.startswith("django.")


def _public_properties(cls: type, taken: set[str]) -> list[str]:
    """Public properties in declaration order, base classes first."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if _is_library_class(klass):
            continue
        for name, value in vars(klass).items():
            if not _is_public(name) or name in taken or name in names:
                continue
            if isinstance(value, (property, functools.cached_property, cached_property)):
                names.append(name)
    return names


def _model_fields(model_class: type[models.Model], include_properties: bool):
    opts = model_class._meta
    meta = get_model_datatable_meta(model_class)
    if meta.include_properties is not None:
        include_properties = meta.include_properties

    forward_fields = sorted(
        [*opts.concrete_fields, *opts.many_to_many],
        key=lambda f: f.creation_counter,
    )

    result: list[FieldMetadata] = []
    for model_field in forward_fields:
        name = model_field.name
        result.append(
            FieldMetadata(
                name=name,
                json_name=meta.json_names.get(name),
                ignore=name in meta.exclude,
                column=meta.columns.get(name),
                verbose_name=force_str(getattr(model_field, "verbose_name", name)),
            )
        )

    if include_properties:
        taken = {field_meta.name for field_meta in result}
        for name in _public_properties(model_class, taken):
            result.append(
                FieldMetadata(
                    name=name,
                    json_name=meta.json_names.get(name),
                    ignore=name in meta.exclude,
                    column=meta.columns.get(name),
                )
            )

    return result


def _dataclass_fields(cls: type, include_properties: bool):
    hints = get_type_hints(cls, include_extras=True)
    result: list[FieldMetadata] = []
    for dc_field in dataclasses.fields(cls):
        if not _is_public(dc_field.name):
            continue
        _, extras = _split_annotated(hints.get(dc_field.name))
        markers = collect_markers(extras, dc_field.metadata)
        result.append(
            FieldMetadata(
                name=dc_field.name,
                json_name=markers.json_name,
                ignore=markers.ignore,
                column=markers.column,
            )
        )

    if include_properties:
        result.extend(_property_fields(cls, result))
    return result


def _annotated_class_fields(cls: type, include_properties: bool):
    hints = get_type_hints(cls, include_extras=True)
    result: list[FieldMetadata] = []
    for name, hint in hints.items():
        if not _is_public(name) or _is_class_var(hint):
            continue
        _, extras = _split_annotated(hint)
        markers = collect_markers(extras)
        result.append(
            FieldMetadata(
                name=name,
                json_name=markers.json_name,
                ignore=markers.ignore,
                column=markers.column,
            )
        )

    if include_properties:
        result.extend(_property_fields(cls, result))
    return result


def _return_extras(getter) -> tuple[Any, ...]:
    """
    ``Annotated`` extras of a property's return hint.

    Only ``Annotated`` hints are evaluated; other return hints may name types
    imported under ``TYPE_CHECKING`` and carry no markers anyway.
    """
    if getter is None:
        return ()
    hint = getattr(getter, "__annotations__", {}).get("return")
    if isinstance(hint, str):
        if "Annotated" not in hint:
            return ()
        hint = get_type_hints(getter, include_extras=True).get("return")
    _, extras = _split_annotated(hint)
    return extras


def _property_fields(cls: type, existing: list[FieldMetadata]) -> list[FieldMetadata]:
    taken = {field_meta.name for field_meta in existing}
    result = []
    for name in _public_properties(cls, taken):
        prop = getattr(cls, name)
        getter = getattr(prop, "fget", None) or getattr(prop, "func", None)
        markers = collect_markers(_return_extras(getter))
        result.append(
            FieldMetadata(
                name=name,
                json_name=markers.json_name,
                ignore=markers.ignore,
                column=markers.column,
            )
        )
    return result


def fields_from_type(cls: type, include_properties: bool = False) -> list[FieldMetadata]:
    """
    Describe the public instance fields of ``cls``.

    Args:
        cls: Django model class, dataclass or annotated class.
        include_properties: Append public ``@property`` members after the
            declared fields.

    Returns:
        FieldMetadata list in declaration order.

    Raises:
        TypeError: If ``cls`` is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    if issubclass(cls, models.Model):
        result = _model_fields(cls, include_properties)
    elif dataclasses.is_dataclass(cls):
        result = _dataclass_fields(cls, include_properties)
    else:
        result = _annotated_class_fields(cls, include_properties)

    logger.debug(
        "Described %d fields of %s (%d ignored)",
        len(result),
        cls.__name__,
        sum(1 for field_meta in result if field_meta.ignore),
    )
    return result
