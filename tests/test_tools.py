"""Tests for declaring tools and the tool registry."""

import logging

import pytest

from tinymcp.exceptions import DefinitionSealedError, DuplicateParameterError
from tinymcp.schema import Definition
from tinymcp.tools import Tool, ToolBuilder, ToolRegistry


class NamedAfterClass(Tool):
    pass


def test_default_name_is_class_name() -> None:
    assert NamedAfterClass.definition.name == "NamedAfterClass"


def test_each_subclass_gets_its_own_definition() -> None:
    class First(Tool):
        pass

    class Second(Tool):
        pass

    First.declare_required("x", "number", "Only on First")

    assert isinstance(First.definition, Definition)
    assert First.definition is not Second.definition
    assert Second.definition.props == []


def test_class_keywords() -> None:
    class Greeter(Tool, name="greeter", description="Greets people"):
        pass

    assert Greeter.definition.name == "greeter"
    assert Greeter.definition.description == "Greets people"


def test_dsl_methods() -> None:
    class Calculator(Tool):
        pass

    (
        Calculator.set_name("calculator")
        .set_description("Performs basic calculations")
        .declare_required("x", "number", "First operand")
        .declare_required("y", "number", "Second operand")
        .declare_optional("operation", "string", "Operation to perform")
    )

    definition = Calculator.definition
    assert definition.name == "calculator"
    assert definition.description == "Performs basic calculations"
    assert [(prop.name, prop.required) for prop in definition.props] == [
        ("x", True),
        ("y", True),
        ("operation", False),
    ]


def test_declaring_a_parameter_twice_fails() -> None:
    class Twice(Tool):
        pass

    Twice.declare_required("x", "number", "First")

    with pytest.raises(DuplicateParameterError):
        Twice.declare_optional("x", "number", "Again")


def test_call_must_be_overridden() -> None:
    class Abstract(Tool, name="abstract"):
        pass

    tool = Abstract.instantiate()

    with pytest.raises(NotImplementedError, match="Override in subclass"):
        tool.call()


def test_tool_with_implementation() -> None:
    class Greeter(Tool, name="greeter"):
        def call(self, name: str) -> str:
            return f"Hello, {name}!"

    Greeter.declare_required("name", "string", "Name to greet")

    tool = Greeter.instantiate()

    assert isinstance(tool, Greeter)
    assert tool.name == "greeter"
    assert tool.call(name="Alice") == "Hello, Alice!"


def test_instantiating_seals_the_definition() -> None:
    class Frozen(Tool):
        pass

    Frozen.instantiate()

    with pytest.raises(DefinitionSealedError):
        Frozen.declare_required("x", "number", "Too late")
    with pytest.raises(DefinitionSealedError):
        Frozen.set_name("renamed")


class TestToolBuilder:
    def test_build_from_function(self) -> None:
        add = (
            ToolBuilder("add")
            .description("Adds two numbers")
            .required("x", "number", "First number")
            .required("y", "number", "Second number")
            .build(lambda x, y: x + y)
        )

        assert issubclass(add, Tool)
        assert add.definition.name == "add"
        assert add.definition.description == "Adds two numbers"
        assert add.definition.required_names == ["x", "y"]
        assert add.instantiate().call(x=5, y=3) == 8

    def test_decorator_uses_function_name_and_docstring(self) -> None:
        @ToolBuilder().optional("greeting", "string", "Optional greeting")
        def hello(greeting: str = "Hello") -> str:
            """Say hello."""
            return f"{greeting} World!"

        assert hello.definition.name == "hello"
        assert hello.definition.description == "Say hello."
        assert hello.definition.required_names == []
        assert hello.instantiate().call() == "Hello World!"

    def test_lambda_needs_a_name(self) -> None:
        with pytest.raises(ValueError, match="name"):
            ToolBuilder().build(lambda: None)

    def test_builds_distinct_classes(self) -> None:
        builder = ToolBuilder("echo").required("message", "string", "Message")

        first = builder.build(lambda message: message)
        second = builder.build(lambda message: message.upper())

        assert first is not second
        assert first.definition is not second.definition
        assert second.instantiate().call(message="hi") == "HI"


class TestToolRegistry:
    def test_registration_order(self) -> None:
        class One(Tool, name="one"):
            pass

        class Two(Tool, name="two"):
            pass

        registry = ToolRegistry([Two, One])

        assert len(registry) == 2
        assert [definition.name for definition in registry.list_definitions()] == ["two", "one"]
        assert [type(tool) for tool in registry] == [Two, One]

    def test_get(self) -> None:
        class One(Tool, name="one"):
            pass

        registry = ToolRegistry([One])

        assert isinstance(registry.get("one"), One)
        assert registry.get("missing") is None
        assert "one" in registry
        assert "missing" not in registry

    def test_one_instance_per_tool(self) -> None:
        class One(Tool, name="one"):
            pass

        registry = ToolRegistry([One])

        assert registry.get("one") is registry.get("one")

    def test_duplicate_name_keeps_first(self, caplog: pytest.LogCaptureFixture) -> None:
        class Original(Tool, name="dup"):
            pass

        class Copy(Tool, name="dup"):
            pass

        with caplog.at_level(logging.WARNING):
            registry = ToolRegistry([Original, Copy])

        assert len(registry) == 1
        assert isinstance(registry.get("dup"), Original)
        assert "Tool already exists: dup" in caplog.text

    def test_duplicate_warning_can_be_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        class Original(Tool, name="dup"):
            pass

        class Copy(Tool, name="dup"):
            pass

        with caplog.at_level(logging.WARNING):
            ToolRegistry([Original, Copy], warn_on_duplicate_tools=False)

        assert "Tool already exists" not in caplog.text

    def test_empty(self) -> None:
        registry = ToolRegistry()

        assert len(registry) == 0
        assert registry.list_definitions() == []
