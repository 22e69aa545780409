"""Naming helpers for generated binding sources.

All functions here are pure: they take the value to transform as an explicit
argument and return a new string.
"""

from __future__ import annotations

from typing import Sequence, Union

from bindgen.errors import MalformedIdentifierError

_NESTED_SEPARATOR = "$"
_RESOURCE_SEPARATOR = "/"
_WORD_SEPARATOR = "_"


def to_java_code(name: Union[str, type]) -> str:
    """Return the dotted source form of a binary class name.

    Nested types in a binary name follow a `$` (``a.b.Outer$Inner``); source
    code refers to them with a dot (``a.b.Outer.Inner``). A Python class is
    accepted as well and named by its module and qualified name.

    Args:
        name: Binary class name, or a class object.

    Returns:
        str: The name with every `$` replaced by `.`.
    """
    if isinstance(name, type):
        name = f"{name.__module__}.{name.__qualname__}"
    return name.replace(_NESTED_SEPARATOR, ".")


def android_id(resource: str) -> str:
    """Return the identifier part of a ``<namespace>/<identifier>`` reference.

    Args:
        resource: Resource reference such as ``@+id/title``.

    Returns:
        str: The segment following the first `/`.

    Raises:
        MalformedIdentifierError: If `resource` has no `/`.
    """
    parts = resource.split(_RESOURCE_SEPARATOR)
    if len(parts) < 2:
        raise MalformedIdentifierError(resource)
    return parts[1]


def capitalize(word: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return word[:1].upper() + word[1:]


def join_to_camel_case(tokens: Sequence[str]) -> str:
    """Join `tokens` PascalCase style.

    Raises:
        ValueError: If `tokens` is empty.
    """
    if not tokens:
        raise ValueError("cannot join an empty token list")
    return "".join(to_camel_case(token) for token in tokens)


def join_to_camel_case_as_var(tokens: Sequence[str]) -> str:
    """Join `tokens` camelCase style, keeping the first token as written.

    Raises:
        ValueError: If `tokens` is empty.
    """
    if not tokens:
        raise ValueError("cannot join an empty token list")
    first, rest = tokens[0], tokens[1:]
    if not rest:
        return to_camel_case_as_var(first)
    return to_camel_case_as_var(first) + join_to_camel_case(rest)


def to_camel_case(name: str) -> str:
    """Convert a snake_case name to PascalCase (``foo_bar`` -> ``FooBar``)."""
    tokens = name.split(_WORD_SEPARATOR)
    if len(tokens) == 1:
        return capitalize(tokens[0])
    return join_to_camel_case(tokens)


def to_camel_case_as_var(name: str) -> str:
    """Convert a snake_case name to camelCase (``foo_bar`` -> ``fooBar``)."""
    tokens = name.split(_WORD_SEPARATOR)
    if len(tokens) == 1:
        return tokens[0]
    return join_to_camel_case_as_var(tokens)


__all__ = [
    "android_id",
    "capitalize",
    "join_to_camel_case",
    "join_to_camel_case_as_var",
    "to_camel_case",
    "to_camel_case_as_var",
    "to_java_code",
]
