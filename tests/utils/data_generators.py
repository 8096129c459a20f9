"""
Test Data Generators
====================

Generate models and attribute specifications for testing.
"""

from typing import Any, Dict, List, Optional
from types import SimpleNamespace

from pydantic import BaseModel, Field


class PersonModel(BaseModel):
    """Pydantic model with field titles used as labels."""

    given_name: str = Field(title="First name")
    family_name: str
    email: Optional[str] = None


class LabelledModel(SimpleNamespace):
    """Object model providing its own attribute labels."""

    def get_attribute_label(self, attribute: str) -> Optional[str]:
        return {"nickname": "Known as"}.get(attribute)


class MicroformatDataGenerator:
    """Generate microformat test data."""

    @staticmethod
    def generate_person() -> Dict[str, Any]:
        """Generate a person model as a mapping."""
        return {
            "given_name": "Ada",
            "family_name": "Lovelace",
            "email": "ada@example.com",
            "url": "example.com",
            "note": "",
            "address": {
                "street_address": "12 St James Square",
                "locality": "London",
                "postal_code": "SW1Y 4JH",
            },
            "geo": {"latitude": 51.5, "longitude": -0.125},
        }

    @staticmethod
    def generate_person_object() -> SimpleNamespace:
        """Generate a person model as a plain object."""
        return SimpleNamespace(
            given_name="Ada",
            family_name="Lovelace",
            address=SimpleNamespace(locality="London"),
        )

    @staticmethod
    def generate_hcard_attributes() -> List[Any]:
        """Generate an h-card attribute list with an embedded h-adr."""
        return [
            "p-given-name",
            "p-family-name",
            "u-email:email:email",
            {"property": "p-note", "visible": False},
            {
                "microformat": "h-adr",
                "property": "p-adr",
                "attributes": [
                    "p-street-address:address.street_address",
                    "p-locality:address.locality",
                ],
            },
        ]

    @staticmethod
    def generate_self_referencing_attributes() -> List[Any]:
        """Generate an attribute list whose embedded entry embeds itself."""
        embedded: Dict[str, Any] = {"microformat": "h-card", "property": "p-author"}
        attributes: List[Any] = [embedded]
        embedded["attributes"] = attributes
        return attributes


class DocumentDataGenerator:
    """Generate microformat document test data."""

    @staticmethod
    def generate_yaml_document() -> str:
        """Generate a YAML h-card document."""
        return """
microformat: h-card
options:
  tag: section
template: "<span{options}>{value}</span>"
attributes:
  - p-given-name
  - p-family-name
  - microformat: h-adr
    property: p-adr
    model: null
    attributes:
      - p-locality:address.locality
"""

    @staticmethod
    def generate_json_document() -> str:
        """Generate a JSON h-card document."""
        return (
            '{"microformat": "h-card", "template": "<span{options}>{value}</span>", '
            '"attributes": ["p-given-name", {"property": "p-family-name"}]}'
        )
