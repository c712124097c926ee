"""Tool schema model: parameters, definitions and their wire format.

A ``Definition`` names a tool and lists its parameters in declaration order.
It renders itself as the ``tools/list`` entry clients see, and validates the
``arguments`` of an incoming ``tools/call`` against the declared parameters.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, create_model

from tinymcp.exceptions import (
    DefinitionSealedError,
    DuplicateParameterError,
    InvalidArgumentsError,
    MissingArgumentsError,
)
from tinymcp.types.tools import JsonSchema
from tinymcp.types.tools import Tool as MCPTool


class ParamType(str, Enum):
    """The parameter types tinymcp knows how to validate.

    Any other type string is accepted and passed through unvalidated.
    """

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_PYTHON_TYPES: dict[str, Any] = {
    ParamType.STRING.value: str,
    ParamType.NUMBER.value: int | float,
    ParamType.INTEGER.value: int,
    ParamType.BOOLEAN.value: bool,
    ParamType.ARRAY.value: list[Any],
    ParamType.OBJECT.value: dict[str, Any],
}


def _type_name(type_: ParamType | str) -> str:
    return type_.value if isinstance(type_, ParamType) else str(type_)


class Prop(BaseModel):
    """One named, typed, described input of a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    description: str
    required: bool = True

    def to_wire(self) -> dict[str, Any]:
        # name and required-ness live on the owning schema
        return {"type": self.type, "description": self.description}


class _ArgumentsBase(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True, arbitrary_types_allowed=True)


class Definition(BaseModel):
    """Name, description and ordered parameters of a single tool."""

    name: str | None = None
    description: str | None = None
    props: list[Prop] = Field(default_factory=list)

    _sealed: bool = PrivateAttr(default=False)
    _arguments_model: type[BaseModel] | None = PrivateAttr(default=None)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Forbid further changes. Called once a tool instance exists."""
        self._sealed = True

    def ensure_open(self) -> None:
        if self._sealed:
            raise DefinitionSealedError(f"Definition of tool {self.name!r} can no longer be changed")

    def add_parameter(
        self,
        name: str,
        type: ParamType | str,
        description: str,
        required: bool,
    ) -> Prop:
        self.ensure_open()
        if self.get_parameter(name) is not None:
            raise DuplicateParameterError(self.name, name)
        prop = Prop(name=name, type=_type_name(type), description=description, required=required)
        self.props.append(prop)
        self._arguments_model = None
        return prop

    def get_parameter(self, name: str) -> Prop | None:
        return next((prop for prop in self.props if prop.name == name), None)

    @property
    def required_names(self) -> list[str]:
        return [prop.name for prop in self.props if prop.required]

    def to_mcp_tool(self) -> MCPTool:
        return MCPTool(
            name=self.name or "",
            description=self.description,
            input_schema=JsonSchema(
                properties={prop.name: prop.to_wire() for prop in self.props},
                required=self.required_names,
            ),
        )

    def to_wire_schema(self) -> dict[str, Any]:
        """Return the ``tools/list`` entry for this definition.

        ``properties`` keeps declaration order and ``required`` lists the
        required parameter names in that same order.
        """
        return self.to_mcp_tool().model_dump(by_alias=True)

    def arguments_model(self) -> type[BaseModel]:
        """A pydantic model validating call arguments against the parameters.

        Fields are positional placeholders aliased to the parameter names, so
        any parameter name is safe regardless of ``BaseModel`` attributes.
        """
        if self._arguments_model is None:
            fields: dict[str, Any] = {}
            for index, prop in enumerate(self.props):
                annotation = _PYTHON_TYPES.get(prop.type, Any)
                if prop.required:
                    fields[f"p{index}"] = (annotation, Field(alias=prop.name))
                else:
                    fields[f"p{index}"] = (annotation | None, Field(default=None, alias=prop.name))
            model_name = "".join(part.capitalize() for part in (self.name or "tool").split("_")) + "Arguments"
            self._arguments_model = create_model(model_name, __base__=_ArgumentsBase, **fields)
        return self._arguments_model

    def bind_arguments(self, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """Validate ``arguments`` and return the keyword arguments for the call.

        Values are checked strictly and passed on unchanged. Unknown keys are
        dropped. Optional parameters the client left out stay out, so the
        tool's own defaults apply.
        """
        missing = [name for name in self.required_names if name not in (arguments or {})]
        if missing:
            raise MissingArgumentsError(f"Missing required arguments for tool {self.name}: {', '.join(missing)}")

        model = self.arguments_model()
        try:
            parsed = model.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidArgumentsError(f"Invalid arguments for tool {self.name}: {_summarize(e)}") from e

        bound: dict[str, Any] = {}
        for index, prop in enumerate(self.props):
            field_name = f"p{index}"
            if field_name in parsed.model_fields_set:
                bound[prop.name] = getattr(parsed, field_name)
        return bound


def _summarize(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)
