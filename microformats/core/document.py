"""
Microformat Documents
=====================

Load microformat definitions from JSON or YAML and render them against a model.

A document names the root type, the attribute list and optionally the default
attribute template and container options:

    microformat: h-card
    options: {tag: section}
    attributes:
      - p-name:full_name
      - u-email:email:email
      - microformat: h-adr
        property: p-adr
        model: null
        attributes: [p-locality:city]
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import json

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from microformats.config.logging import get_logger
from microformats.core.engine import Microformat
from microformats.core.errors import ConfigError
from microformats.models.schemas import MicroformatDocument

logger = get_logger(__name__)


class BaseDocumentParser(ABC):
    """Abstract base class for microformat document parsers."""

    @abstractmethod
    def load(self, content: str) -> Any:
        """Load raw data from document content."""
        pass

    def parse(self, content: str) -> MicroformatDocument:
        """
        Parse document content into a MicroformatDocument.

        Raises:
            ConfigError: If the content cannot be loaded or is not a valid document
        """
        raw_data = self.load(content)

        if not isinstance(raw_data, dict):
            raise ConfigError(
                f"Microformat document must be a dictionary/object, got {type(raw_data).__name__}"
            )

        try:
            return MicroformatDocument.model_validate(raw_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            logger.error("Microformat document validation failed", errors=errors)
            raise ConfigError("Invalid microformat document: " + "; ".join(errors))


class JSONDocumentParser(BaseDocumentParser):
    """JSON microformat document parser."""

    def load(self, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON syntax at line {e.lineno}, column {e.colno}: {e.msg}"
            logger.error("JSON parsing failed", error=error_msg)
            raise ConfigError(error_msg)


class YAMLDocumentParser(BaseDocumentParser):
    """YAML microformat document parser."""

    def load(self, content: str) -> Any:
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML syntax: {e}"
            logger.error("YAML parsing failed", error=error_msg)
            raise ConfigError(error_msg)

        if raw_data is None:
            raise ConfigError("Empty YAML document")
        return raw_data


class DocumentParserFactory:
    """Factory for creating document parsers based on content type."""

    _parsers = {
        "json": JSONDocumentParser,
        "yaml": YAMLDocumentParser,
    }

    @classmethod
    def create_parser(cls, parser_type: str) -> BaseDocumentParser:
        """
        Create a document parser instance.

        Raises:
            ConfigError: If the parser type is not supported
        """
        if parser_type not in cls._parsers:
            raise ConfigError(f"Unsupported parser type: {parser_type}")

        return cls._parsers[parser_type]()

    @classmethod
    def detect_parser_type(cls, content: str) -> str:
        """Detect the document type from its content; YAML unless it looks like JSON."""
        content = content.strip()
        if content.startswith("{"):
            return "json"
        return "yaml"


def parse_document(content: str, parser_type: Optional[str] = None) -> MicroformatDocument:
    """
    Parse a microformat document.

    Args:
        content: JSON or YAML content
        parser_type: "json" or "yaml"; detected from the content if None

    Returns:
        The parsed document

    Raises:
        ConfigError: If the content is empty or invalid
    """
    if not content or not content.strip():
        raise ConfigError("Empty microformat document provided")

    if not parser_type:
        parser_type = DocumentParserFactory.detect_parser_type(content)

    logger.debug("Parsing microformat document", parser_type=parser_type)
    return DocumentParserFactory.create_parser(parser_type).parse(content)


def render_document(
    content: str, model: Any, parser_type: Optional[str] = None, **config: Any
) -> str:
    """
    Parse a microformat document and render it against a model.

    Args:
        content: JSON or YAML content
        model: Mapping or object providing the values
        parser_type: "json" or "yaml"; detected from the content if None
        **config: Further Microformat options, e.g. formatter

    Returns:
        Rendered microformat markup
    """
    document = parse_document(content, parser_type)
    engine_config: Dict[str, Any] = {
        "microformat": document.microformat,
        "model": model,
        "attributes": document.attributes,
        "template": document.template,
        "options": document.options,
    }
    engine_config.update(config)
    return Microformat.widget(**engine_config)
