"""
Serialization markers for plain Python classes and dataclasses.

Markers are attached through ``typing.Annotated``:

    @dataclass
    class Contact:
        name: Annotated[str, JsonName("full_name"), DataTableColumn(title="Name")]
        email: str
        internal_id: Annotated[str, JsonIgnore()]

or through dataclass field metadata:

    internal_id: str = field(metadata={JSON_IGNORE_KEY: True})
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from ..columns.types import ColumnAnnotation

DATATABLE_KEY = "datatable"
JSON_NAME_KEY = "json_name"
JSON_IGNORE_KEY = "json_ignore"


@dataclass(frozen=True)
class JsonName:
    """Declared serialization name of a field."""

    value: str


@dataclass(frozen=True)
class JsonIgnore:
    """Excludes a field from serialization and from the generated columns."""


@dataclass
class FieldMarkers:
    json_name: Optional[str] = None
    ignore: bool = False
    column: Optional[ColumnAnnotation] = None


def collect_markers(
    extras: Iterable[Any] = (), metadata: Optional[Mapping[str, Any]] = None
) -> FieldMarkers:
    """
    Merge markers found in ``Annotated`` extras and dataclass field metadata.

    Field metadata is read after the ``Annotated`` extras, so it wins when
    both declare the same thing.
    """
    markers = FieldMarkers()
    for extra in extras:
        if isinstance(extra, JsonName):
            markers.json_name = extra.value
        elif isinstance(extra, JsonIgnore) or extra is JsonIgnore:
            markers.ignore = True
        elif isinstance(extra, ColumnAnnotation):
            markers.column = extra

    if metadata:
        if metadata.get(JSON_NAME_KEY):
            markers.json_name = metadata[JSON_NAME_KEY]
        if metadata.get(JSON_IGNORE_KEY):
            markers.ignore = True
        if isinstance(metadata.get(DATATABLE_KEY), ColumnAnnotation):
            markers.column = metadata[DATATABLE_KEY]

    return markers
