"""Column ``data`` naming helpers."""

from graphene.utils.str_converters import to_camel_case as graphene_to_camel_case


def lower_first(name: str) -> str:
    """Lowercase the first character only: ``Name`` -> ``name``, ``ID`` -> ``iD``."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def to_camel_case(name: str) -> str:
    """
    Convert a snake_case identifier to lowerCamelCase.

    Same conversion as the GraphQL schema's ``auto_camelcase``, with the first
    character lowered: ``first_name`` -> ``firstName``, ``Name`` -> ``name``.
    """
    return lower_first(graphene_to_camel_case(name))


def fallback_data_name(name: str, auto_camelcase: bool = False) -> str:
    """Name used for ``data`` when neither the annotation nor a JSON name supplies one."""
    if auto_camelcase:
        return to_camel_case(name)
    return lower_first(name)
