"""
Pydantic Models and Schemas
===========================

Data models for attribute specifications, templates and microformat documents.
"""

from typing import Optional, List, Dict, Any, Union, Literal, Callable, Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from microformats.core.errors import ConfigError


# Templates
class StringTemplate(BaseModel):
    """Template with `{label}`, `{options}`, `{rawValue}` and `{value}` tokens."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    text: str = Field(..., description="Template text")


class FunctionTemplate(BaseModel):
    """Template rendered by calling ``func(attribute, index, context)``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["function"] = "function"
    func: Callable[..., str] = Field(..., description="Rendering function")


Template = Annotated[Union[StringTemplate, FunctionTemplate], Field(discriminator="kind")]


def is_template(value: Any) -> bool:
    """Whether the value can be used as a template."""
    return isinstance(value, (str, StringTemplate, FunctionTemplate)) or callable(value)


def coerce_template(value: Any) -> Any:
    """
    Wrap plain strings and callables into the matching template variant.

    Raises:
        ConfigError: If the value is neither a template, a string nor a callable
    """
    if value is None or isinstance(value, (StringTemplate, FunctionTemplate)):
        return value
    if isinstance(value, str):
        return StringTemplate(text=value)
    if callable(value):
        return FunctionTemplate(func=value)
    raise ConfigError(
        f"The template must be a string or a callable, got {type(value).__name__}"
    )


# Attribute Specifications
class AttributeSpec(BaseModel):
    """A normalized attribute specification, ready for rendering."""

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, arbitrary_types_allowed=True
    )

    property_name: Optional[str] = Field(
        None, alias="property", description="Microformat property name, e.g. p-given-name"
    )
    attribute: Optional[str] = Field(None, description="Dotted path of the model attribute")
    label: Optional[str] = Field(None, description="Display label")
    value: Any = Field(None, description="Resolved value")
    format: Union[str, List[Any]] = Field("text", description="Formatter format name")
    options: Dict[str, Any] = Field(default_factory=dict, description="Tag attributes")
    template: Optional[Template] = Field(None, description="Attribute template")
    visible: bool = Field(True, description="Whether the attribute is rendered")
    embedded: Optional[str] = Field(
        None, description="Root type of the embedded microformat this value was rendered from"
    )

    @field_validator("template", mode="before")
    @classmethod
    def validate_template(cls, v: Any) -> Any:
        """Accept plain template strings and callables."""
        return coerce_template(v)

    def to_config(self) -> Dict[str, Any]:
        """
        Return the explicitly set fields in structured configuration form.

        Field values are kept as they are, so templates and model values
        survive being normalized again.
        """
        config: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name in self.model_fields_set:
                config[field.alias or name] = getattr(self, name)
        config.update(self.model_extra or {})
        return config


# Documents
class MicroformatDocument(BaseModel):
    """A microformat definition loaded from JSON or YAML."""

    microformat: str = Field(..., min_length=1, description="Root microformat type")
    attributes: Optional[List[Union[str, Dict[str, Any]]]] = Field(
        None, description="Attribute specifications"
    )
    template: Optional[str] = Field(None, description="Default attribute template")
    options: Dict[str, Any] = Field(default_factory=dict, description="Container tag attributes")
