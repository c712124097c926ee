"""Declaring tools and collecting them for a server.

Tools are declared as subclasses of ``Tool``::

    class Add(Tool, name="add", description="Adds two numbers"):
        def call(self, x, y):
            return x + y

    Add.declare_required("x", "number", "First number")
    Add.declare_required("y", "number", "Second number")

or built from a plain function with ``ToolBuilder``::

    add = (
        ToolBuilder("add")
        .description("Adds two numbers")
        .required("x", "number", "First number")
        .required("y", "number", "Second number")
        .build(lambda x, y: x + y)
    )
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar

from tinymcp.schema import Definition, ParamType
from tinymcp.utilities.logging import get_logger

logger = get_logger(__name__)


class Tool:
    """Base class for tools. Each subclass owns exactly one ``Definition``."""

    definition: ClassVar[Definition] = Definition()

    def __init_subclass__(cls, name: str | None = None, description: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.definition = Definition(name=name or cls.__name__, description=description)

    def __init__(self) -> None:
        type(self).definition.seal()

    @classmethod
    def set_name(cls, name: str) -> type[Tool]:
        cls.definition.ensure_open()
        cls.definition.name = name
        return cls

    @classmethod
    def set_description(cls, description: str) -> type[Tool]:
        cls.definition.ensure_open()
        cls.definition.description = description
        return cls

    @classmethod
    def declare_required(cls, name: str, type: ParamType | str, description: str) -> type[Tool]:
        cls.definition.add_parameter(name, type, description, required=True)
        return cls

    @classmethod
    def declare_optional(cls, name: str, type: ParamType | str, description: str) -> type[Tool]:
        cls.definition.add_parameter(name, type, description, required=False)
        return cls

    @classmethod
    def instantiate(cls) -> Tool:
        return cls()

    @property
    def name(self) -> str | None:
        return type(self).definition.name

    def call(self, **arguments: Any) -> Any:
        """Run the tool.

        Return a string (or anything with a useful ``str()``) for a single
        text result, or a list of content items.
        """
        raise NotImplementedError("Override in subclass")


class ToolBuilder:
    """Builds a ``Tool`` subclass from a name, parameters and a function."""

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._description: str | None = None
        self._params: list[tuple[str, ParamType | str, str, bool]] = []

    def description(self, description: str) -> ToolBuilder:
        self._description = description
        return self

    def required(self, name: str, type: ParamType | str, description: str) -> ToolBuilder:
        self._params.append((name, type, description, True))
        return self

    def optional(self, name: str, type: ParamType | str, description: str) -> ToolBuilder:
        self._params.append((name, type, description, False))
        return self

    def build(self, fn: Callable[..., Any]) -> type[Tool]:
        """Create the tool class. Usable as a decorator.

        The name defaults to the function's name and the description to its
        docstring.
        """
        name = self._name or fn.__name__
        if name == "<lambda>":
            raise ValueError("You must provide a name for lambda functions")

        def call(self: Tool, **arguments: Any) -> Any:
            return fn(**arguments)

        namespace = {"call": call, "__doc__": fn.__doc__, "__module__": getattr(fn, "__module__", __name__)}
        tool_type = type(_class_name(name), (Tool,), namespace)
        tool_type.set_name(name)
        tool_type.set_description(self._description if self._description is not None else inspect.getdoc(fn) or "")
        for param_name, param_type, param_description, required in self._params:
            tool_type.definition.add_parameter(param_name, param_type, param_description, required)
        return tool_type

    __call__ = build


def _class_name(tool_name: str) -> str:
    return "".join(part.capitalize() for part in tool_name.replace("-", "_").split("_")) or "Tool"


class ToolRegistry:
    """The tools a server exposes, keyed by definition name.

    Each tool type is instantiated once, in registration order.
    """

    def __init__(self, tool_types: Iterable[type[Tool]] = (), *, warn_on_duplicate_tools: bool = True) -> None:
        self._tools: dict[str, Tool] = {}
        self.warn_on_duplicate_tools = warn_on_duplicate_tools
        for tool_type in tool_types:
            self._add(tool_type)

    def _add(self, tool_type: type[Tool]) -> None:
        name = tool_type.definition.name
        if name is None:
            raise ValueError(f"Tool {tool_type.__name__} has no name")
        if name in self._tools:
            if self.warn_on_duplicate_tools:
                logger.warning(f"Tool already exists: {name}")
            return
        self._tools[name] = tool_type.instantiate()
        logger.debug(f"Registered tool {name}")

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def list_definitions(self) -> list[Definition]:
        return [type(tool).definition for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
