"""
Structured-output schema builder.

The service accepts only a narrow subset of JSON Schema for structured
outputs: an object with typed properties, every property required, and
``additionalProperties: false``. ``Schema`` builds exactly that subset and
wraps it in the envelope each endpoint expects:

- chat completions: ``{"name": ..., "schema": {...}}`` under
  ``response_format = {"type": "json_schema", "json_schema": <envelope>}``
- responses JSON: ``{"type": "json_schema", "name": ..., "schema": {...}}``
  under ``text = {"format": <envelope>}``
- responses text: ``{"type": "text"}``

Usage:
```python
schema = Schema.responses_json_schema("capital")
schema.add_property("capital", "string", "The capital city")
payload = schema.to_responses_text_format()
```
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from openai_tools.common.errors import InvalidArgumentError, SchemaShapeMismatchError

SCALAR_TYPES = ("string", "number", "integer", "boolean")


class SchemaEnvelope(str, Enum):
    """Outer shape a schema is emitted in."""
    CHAT_JSON = "chat_json"
    RESPONSES_JSON = "responses_json"
    RESPONSES_TEXT = "responses_text"


class PropertyDescriptor(BaseModel):
    """A scalar property, or an array whose items are an object schema."""
    type: str
    description: Optional[str] = None
    enum: Optional[List[str]] = None
    items: Optional["ObjectSchema"] = None


class ObjectSchema(BaseModel):
    """Object schema holding named properties."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = "object"
    properties: Dict[str, PropertyDescriptor] = Field(default_factory=dict)
    required: Optional[List[str]] = None
    additional_properties: bool = Field(default=False, alias="additionalProperties")

    def add(self, name: str, descriptor: PropertyDescriptor) -> None:
        """Insert or replace a property and mark it required."""
        self.properties[name] = descriptor
        if self.required is None:
            self.required = []
        if name not in self.required:
            self.required.append(name)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


PropertyDescriptor.model_rebuild()


class Schema(BaseModel):
    """
    A structured-output schema in one of three envelopes.

    Build instances with ``chat_json_schema``, ``responses_json_schema`` or
    ``responses_text_schema``; the envelope is fixed at construction.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    name: Optional[str] = None
    json_schema: Optional[ObjectSchema] = Field(default=None, alias="schema")

    _envelope: SchemaEnvelope = PrivateAttr(default=SchemaEnvelope.CHAT_JSON)

    @classmethod
    def chat_json_schema(cls, name: str) -> "Schema":
        schema = cls(name=name, json_schema=ObjectSchema())
        schema._envelope = SchemaEnvelope.CHAT_JSON
        return schema

    @classmethod
    def responses_json_schema(cls, name: str) -> "Schema":
        schema = cls(type="json_schema", name=name, json_schema=ObjectSchema())
        schema._envelope = SchemaEnvelope.RESPONSES_JSON
        return schema

    @classmethod
    def responses_text_schema(cls) -> "Schema":
        schema = cls(type="text")
        schema._envelope = SchemaEnvelope.RESPONSES_TEXT
        return schema

    @property
    def envelope(self) -> SchemaEnvelope:
        return self._envelope

    def _object(self, operation: str) -> ObjectSchema:
        if self.json_schema is None:
            raise SchemaShapeMismatchError(
                f"Cannot {operation} on a {self._envelope.value} schema"
            )
        return self.json_schema

    def add_property(self, name: str, type_name: str, description: str = "") -> "Schema":
        """Add a required scalar property (string, number, integer or boolean)."""
        target = self._object("add a property")
        if type_name not in SCALAR_TYPES:
            raise InvalidArgumentError(
                f"Unsupported property type '{type_name}', expected one of {SCALAR_TYPES}"
            )
        target.add(name, PropertyDescriptor(type=type_name, description=description or None))
        return self

    def add_enum_property(self, name: str, values: Sequence[str], description: str = "") -> "Schema":
        """Add a required string property restricted to ``values``."""
        target = self._object("add a property")
        if not values:
            raise InvalidArgumentError(f"Enum property '{name}' needs at least one value")
        target.add(name, PropertyDescriptor(
            type="string", description=description or None, enum=list(values)
        ))
        return self

    def add_array(self, name: str, item_properties: Sequence[Tuple[str, str]]) -> "Schema":
        """
        Add a required array property whose items are objects.

        Args:
            name: Property name
            item_properties: (name, description) pairs; every item field is a
                required string
        """
        target = self._object("add an array")
        items = ObjectSchema()
        for item_name, item_description in item_properties:
            items.add(item_name, PropertyDescriptor(
                type="string", description=item_description or None
            ))
        target.add(name, PropertyDescriptor(type="array", items=items))
        return self

    def set_additional_properties(self, allowed: bool) -> "Schema":
        self._object("set additionalProperties").additional_properties = allowed
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Emit the envelope with unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_chat_response_format(self) -> Dict[str, Any]:
        """Wrap as the chat completions ``response_format`` value."""
        if self._envelope is not SchemaEnvelope.CHAT_JSON:
            raise SchemaShapeMismatchError(
                f"Chat completions need a chat_json schema, got {self._envelope.value}"
            )
        return {"type": "json_schema", "json_schema": self.to_dict()}

    def to_responses_text_format(self) -> Dict[str, Any]:
        """Wrap as the responses ``text`` value."""
        if self._envelope is SchemaEnvelope.CHAT_JSON:
            raise SchemaShapeMismatchError("The responses endpoint needs a responses schema")
        return {"format": self.to_dict()}
