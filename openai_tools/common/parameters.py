"""
Parameter schemas for function tools.

Function parameters use a slightly wider JSON Schema subset than structured
outputs: a property may accept several type names (emitted as an array) and
``additionalProperties`` is only emitted when set explicitly.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from openai_tools.common.errors import InvalidArgumentError


class ParameterProperty(BaseModel):
    """One named parameter of a function."""
    type_names: List[str]
    description: Optional[str] = None
    enum: Optional[List[Any]] = None

    @model_validator(mode="before")
    @classmethod
    def _read_wire_type(cls, data: Any) -> Any:
        """Accept the wire form, where ``type`` is one name or a list of names."""
        if isinstance(data, dict) and "type_names" not in data and "type" in data:
            data = dict(data)
            wire_type = data.pop("type")
            data["type_names"] = [wire_type] if isinstance(wire_type, str) else list(wire_type)
        return data

    @model_serializer
    def _serialize(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type_names[0] if len(self.type_names) == 1 else list(self.type_names)
        }
        if self.description is not None:
            data["description"] = self.description
        if self.enum is not None:
            data["enum"] = list(self.enum)
        return data

    @classmethod
    def from_string(cls, description: Optional[str] = None) -> "ParameterProperty":
        return cls(type_names=["string"], description=description)

    @classmethod
    def number(cls, description: Optional[str] = None) -> "ParameterProperty":
        return cls(type_names=["number"], description=description)

    @classmethod
    def integer(cls, description: Optional[str] = None) -> "ParameterProperty":
        return cls(type_names=["integer"], description=description)

    @classmethod
    def boolean(cls, description: Optional[str] = None) -> "ParameterProperty":
        return cls(type_names=["boolean"], description=description)

    @classmethod
    def enumeration(cls, values: Sequence[str], description: Optional[str] = None) -> "ParameterProperty":
        if not values:
            raise InvalidArgumentError("An enum parameter needs at least one value")
        return cls(type_names=["string"], description=description, enum=list(values))

    @classmethod
    def nullable(cls, type_name: str, description: Optional[str] = None) -> "ParameterProperty":
        return cls(type_names=[type_name, "null"], description=description)


class Parameters(BaseModel):
    """Object schema describing a function's arguments."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = "object"
    properties: Dict[str, ParameterProperty] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)
    additional_properties: Optional[bool] = Field(default=None, alias="additionalProperties")

    @classmethod
    def new(cls, properties: Sequence[Tuple[str, ParameterProperty]],
            additional_properties: Optional[bool] = None) -> "Parameters":
        """Build parameters where every listed property is required."""
        params = cls(additional_properties=additional_properties)
        for name, prop in properties:
            params.add(name, prop)
        return params

    def add(self, name: str, prop: ParameterProperty) -> "Parameters":
        self.properties[name] = prop
        if name not in self.required:
            self.required.append(name)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
