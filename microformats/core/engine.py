"""
Microformat Engine
==================

Generate microformats (http://microformats.org) whose values are obtained
from a model; the model can be a mapping, a pydantic model or any object.

The attribute list determines which microformat properties are displayed,
which model attributes provide the data and how they are formatted. Each
entry is either a shorthand string ``property[:attribute[:format[:label]]]``
or a mapping with the following elements:

- property: the microformat property name, e.g. ``p-given-name``. Entries
  without a property render additional, non-microformat information.
- attribute: the model attribute name or dotted path; derived from the
  property if not given (``p-given-name`` becomes ``given_name``).
- label: the label of the attribute; derived from the model if not given.
- value: the value to display, bypassing the model lookup.
- format: the formatter format, default ``"text"``.
- options: HTML attributes of the property.
- template: string template or function ``(attribute, index, engine)``.
- visible: if False the entry is skipped entirely.
- microformat: root type of an embedded microformat; with ``model``,
  ``class`` and ``attributes`` it renders a nested microformat.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Type

import jinja2
from markupsafe import Markup

from microformats.config.logging import get_logger
from microformats.config.settings import Settings, get_settings
from microformats.core.errors import ConfigError
from microformats.core.rendering.formatter import Formatter
from microformats.core.rendering.html import add_css_class, render_tag_attributes
from microformats.core.rendering.template_renderer import TemplateRenderer
from microformats.core.spec.normalizer import SpecNormalizer
from microformats.core.spec.parser import RawSpec
from microformats.models.schemas import AttributeSpec, Template, coerce_template

logger = get_logger(__name__)

CONTAINER_TEMPLATE = "container.html"

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(Path(__file__).parent / "rendering" / "templates")),
    autoescape=jinja2.select_autoescape(["html", "xml"]),
)


class Microformat:
    """Renders one microformat and, recursively, its embedded microformats."""

    def __init__(
        self,
        microformat: Optional[str] = None,
        model: Any = None,
        attributes: Optional[Sequence[RawSpec]] = None,
        template: Any = None,
        options: Optional[Dict[str, Any]] = None,
        formatter: Optional[Formatter] = None,
        depth: int = 0,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="engine", microformat=microformat, depth=depth)

        if not microformat:
            self.logger.error("Microformat type missing")
            raise ConfigError('The "microformat" property must be specified.')
        if not isinstance(microformat, str) or not microformat.startswith(self.settings.root_prefix):
            self.logger.error("Invalid root microformat class")
            raise ConfigError(f'Invalid root microformat class: "{microformat}".')
        if depth > self.settings.max_embed_depth:
            self.logger.error("Embedding depth exceeded", max_depth=self.settings.max_embed_depth)
            raise ConfigError(
                f'Embedded microformat "{microformat}" exceeds the maximum nesting depth '
                f"of {self.settings.max_embed_depth}; check for self-referencing attributes."
            )

        self.microformat = microformat
        self.model = model
        self.depth = depth
        self.options: Dict[str, Any] = dict(options or {})
        self.template: Template = coerce_template(
            self.settings.default_template if template is None else template
        )
        self.formatter = formatter or Formatter(self.settings)
        self.renderer = TemplateRenderer(self.formatter, self.template)
        self.attributes: List[AttributeSpec] = SpecNormalizer(self).normalize(attributes, model)

    @classmethod
    def widget(cls, **config: Any) -> str:
        """Create a microformat from ``config`` and render it."""
        return cls(**config).render()

    def resolve_engine(self, name: Optional[str]) -> Type["Microformat"]:
        """Return the engine class for an embedded microformat; this class when not named."""
        if name is None:
            return type(self)
        return EngineRegistry.get(name)

    def render_attribute(self, attribute: AttributeSpec, index: int) -> str:
        """Render a single normalized attribute."""
        return self.renderer.render(attribute, index, self)

    def render_content(self) -> str:
        """Render all attributes, concatenated in order."""
        return "".join(
            self.render_attribute(attribute, index)
            for index, attribute in enumerate(self.attributes)
        )

    def render(self) -> str:
        """
        Render the microformat inside its container tag.

        The container tag is taken from the ``tag`` option, defaulting to the
        configured container tag; the root type is added to its classes.
        """
        options = dict(self.options)
        tag = options.pop("tag", None) or self.settings.container_tag
        options = add_css_class(options, self.microformat)

        content = self.render_content()
        html = _environment.get_template(CONTAINER_TEMPLATE).render(
            tag=tag,
            attributes=Markup(render_tag_attributes(options)),
            content=Markup(content),
        )

        self.logger.debug("Microformat rendered", attributes=len(self.attributes), html_length=len(html))
        return html


class EngineRegistry:
    """Registry of microformat engine classes selectable by embedded ``class`` fields."""

    _engines: Dict[str, Type[Microformat]] = {}

    @classmethod
    def register(cls, name: str, engine_class: Type[Microformat]) -> None:
        """
        Register an engine class.

        Raises:
            ConfigError: If ``engine_class`` is not a Microformat subclass
        """
        if not (isinstance(engine_class, type) and issubclass(engine_class, Microformat)):
            raise ConfigError(f'Engine "{name}" must be a Microformat subclass')
        cls._engines[name] = engine_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove an engine class."""
        cls._engines.pop(name, None)

    @classmethod
    def get(cls, name: str) -> Type[Microformat]:
        """
        Get a registered engine class.

        Raises:
            ConfigError: If no engine is registered under ``name``
        """
        if name not in cls._engines:
            logger.error("Unsupported microformat class", engine=name)
            raise ConfigError(f"Unsupported microformat class: {name}")
        return cls._engines[name]

    @classmethod
    def available(cls) -> List[str]:
        """Names of all registered engines."""
        return sorted(cls._engines)


EngineRegistry.register("microformat", Microformat)


def render_microformat(
    microformat: str,
    model: Any,
    attributes: Optional[Sequence[RawSpec]] = None,
    **config: Any,
) -> str:
    """
    Render a microformat.

    Args:
        microformat: Root microformat type, e.g. ``h-card``
        model: Mapping or object providing the values
        attributes: Attribute specifications
        **config: Further Microformat options (template, options, formatter)

    Returns:
        Rendered microformat markup
    """
    return Microformat.widget(microformat=microformat, model=model, attributes=attributes, **config)
