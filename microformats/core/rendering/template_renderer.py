"""
Template Renderer
=================

Render normalized attribute specifications through string templates or
rendering functions.
"""

from typing import Any, Dict, Optional
import re

from microformats.config.logging import get_logger
from microformats.core.rendering.formatter import Formatter
from microformats.core.rendering.html import render_tag_attributes
from microformats.models.schemas import AttributeSpec, StringTemplate, Template, coerce_template

logger = get_logger(__name__)

TEMPLATE_TOKENS = re.compile(r"\{(label|options|rawValue|value)\}")


class TemplateRenderer:
    """Renders one attribute specification at a time."""

    def __init__(self, formatter: Formatter, default_template: Any) -> None:
        self.formatter = formatter
        self.default_template: Template = coerce_template(default_template)
        self.logger: Any = logger.bind(component="template_renderer")

    def render(self, attribute: AttributeSpec, index: int, context: Any = None) -> str:
        """
        Render a single attribute.

        An attribute whose value is an empty string renders as an empty string
        whatever its template.

        Args:
            attribute: The normalized specification of the attribute
            index: Zero-based index of the attribute in the attribute list
            context: Passed to function templates, usually the microformat engine

        Returns:
            The rendering result
        """
        if isinstance(attribute.value, str) and attribute.value == "":
            return ""

        template = attribute.template or self.default_template

        if template.kind == "function":
            return template.func(attribute, index, context)
        return self._substitute(template, attribute)

    def _substitute(self, template: StringTemplate, attribute: AttributeSpec) -> str:
        """
        Replace the template tokens in a single pass.

        ``{label}`` is left in place when the attribute has no label.
        """
        replacements: Dict[str, Optional[str]] = {}

        def replace(match: "re.Match[str]") -> str:
            token = match.group(1)
            if token not in replacements:
                replacements[token] = self._token_value(token, attribute)
            replacement = replacements[token]
            return match.group(0) if replacement is None else replacement

        return TEMPLATE_TOKENS.sub(replace, template.text)

    def _token_value(self, token: str, attribute: AttributeSpec) -> Optional[str]:
        if token == "label":
            return attribute.label
        if token == "options":
            return render_tag_attributes(attribute.options)
        if token == "rawValue":
            return "" if attribute.value is None else str(attribute.value)
        return self.formatter.format(attribute.value, attribute.format)
