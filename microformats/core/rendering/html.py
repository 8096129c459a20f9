"""
HTML Helpers
============

Tag attribute rendering and CSS class handling for microformat markup.
"""

from typing import Any, Dict, List, Mapping
import json


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    if not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def _split_classes(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(item) for item in value if item]


def add_css_class(options: Mapping[str, Any], css_class: str) -> Dict[str, Any]:
    """
    Return a copy of ``options`` with ``css_class`` added to its class list.

    The class is not added twice; the input mapping is left untouched.
    """
    updated = dict(options)
    classes = _split_classes(updated.get("class"))
    for name in css_class.split():
        if name not in classes:
            classes.append(name)
    updated["class"] = " ".join(classes)
    return updated


def render_tag_attributes(options: Mapping[str, Any]) -> str:
    """
    Build an HTML attributes string.

    Each attribute is preceded by a space, so the result can follow a tag
    name directly. ``None`` and ``False`` values are skipped, ``True`` renders
    a bare attribute, and ``data``/``aria`` mappings expand into prefixed
    attributes.
    """
    if not options:
        return ""

    attr_pairs: List[str] = []
    for key, value in options.items():
        if value is None or value is False:
            continue
        if value is True:
            attr_pairs.append(key)
        elif key == "class":
            classes = _split_classes(value)
            if classes:
                attr_pairs.append(f'class="{escape_html(" ".join(classes))}"')
        elif key in ("data", "aria") and isinstance(value, Mapping):
            for name, item in value.items():
                if isinstance(item, (dict, list)):
                    item = json.dumps(item)
                attr_pairs.append(f'{key}-{name}="{escape_html(str(item))}"')
        elif isinstance(value, (dict, list)):
            attr_pairs.append(f'{key}="{escape_html(json.dumps(value))}"')
        else:
            attr_pairs.append(f'{key}="{escape_html(str(value))}"')

    return "".join(f" {pair}" for pair in attr_pairs)
