"""
Model Access
============

Read values and labels from the model a microformat is rendered from.
A model can be a mapping, a pydantic model, or any attribute-bearing object.
"""

from collections.abc import Mapping
from typing import Any, List, Optional
import re

from pydantic import BaseModel

from microformats.core.errors import ConfigError

_WORD_SEPARATORS = re.compile(r"[-_.\s]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _Missing()


def humanize(name: str) -> str:
    """
    Convert an attribute name into words.

    ``given_name`` and ``givenName`` both become ``Given Name``.
    """
    words = _WORD_SEPARATORS.sub(" ", _CAMEL_BOUNDARY.sub(" ", name)).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def _get_item(model: Any, key: str, default: Any) -> Any:
    if isinstance(model, Mapping):
        return model.get(key, default)
    return getattr(model, key, default)


def get_value(model: Any, path: str, default: Any = None) -> Any:
    """
    Retrieve a value from the model by attribute name or dotted path.

    A key containing dots is looked up as-is first, so mappings keyed by
    dotted names still resolve.

    Args:
        model: Mapping or object to read from
        path: Attribute name, e.g. ``name`` or ``address.locality``
        default: Value returned when any path segment is missing

    Returns:
        The resolved value or ``default``
    """
    if model is None:
        return default

    if isinstance(model, Mapping) and path in model:
        return model[path]

    current = model
    for segment in path.split("."):
        if current is None:
            return default
        current = _get_item(current, segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def get_attribute_label(model: Any, attribute: str) -> str:
    """
    Get the display label of a model attribute.

    Models may provide a ``get_attribute_label(name)`` method; pydantic models
    contribute their field titles. Anything else falls back to a humanized
    attribute name.
    """
    label_getter = getattr(model, "get_attribute_label", None)
    if callable(label_getter):
        label = label_getter(attribute)
        if label is not None:
            return label

    if isinstance(model, BaseModel):
        field = type(model).model_fields.get(attribute)
        if field is not None and field.title:
            return field.title

    return humanize(attribute)


def get_attribute_names(model: Any) -> List[str]:
    """
    List the attribute names a model exposes, sorted.

    Raises:
        ConfigError: If the model is neither a mapping nor an object
    """
    names: Optional[List[str]] = None
    if isinstance(model, Mapping):
        names = [str(key) for key in model.keys()]
    elif isinstance(model, BaseModel):
        names = list(type(model).model_fields)
    elif hasattr(model, "__dict__"):
        names = [key for key in vars(model) if not key.startswith("_")]

    if names is None:
        raise ConfigError("The model must be either a mapping or an object.")
    return sorted(names)

