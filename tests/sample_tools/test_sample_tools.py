"""Tests for the bundled sample tools."""

import pytest

from funcmcp.sample_tools import calculator, hello_world


class TestHelloWorld:
    async def test_greets(self) -> None:
        assert await hello_world.handler({"name": "Ada"}) == {"message": "Hello, Ada!"}

    def test_metadata(self) -> None:
        assert hello_world.metadata.input_schema["required"] == ["name"]


class TestCalculator:
    @pytest.mark.parametrize(
        ("operation", "a", "b", "expected", "expression"),
        [
            ("add", 2, 3, 5, "2 + 3"),
            ("subtract", 2, 3, -1, "2 - 3"),
            ("multiply", 4, 2.5, 10.0, "4 * 2.5"),
            ("divide", 9, 3, 3.0, "9 / 3"),
        ],
    )
    async def test_operations(
        self, operation: str, a: float, b: float, expected: float, expression: str
    ) -> None:
        result = await calculator.handler({"operation": operation, "a": a, "b": b})
        assert result["success"] is True
        assert result["calculation"] == {
            "expression": expression,
            "result": expected,
            "operation": operation,
        }
        assert "timestamp" in result

    async def test_divide_by_zero_is_reported(self) -> None:
        result = await calculator.handler({"operation": "divide", "a": 1, "b": 0})
        assert result["success"] is False
        assert result["error"] == "Cannot divide by zero"

    async def test_non_numeric(self) -> None:
        params = {"operation": "add", "a": "1", "b": 2}
        result = await calculator.handler(params)
        assert result["success"] is False
        assert result["error"] == "Both 'a' and 'b' must be numbers"
        assert result["params"] == params

    async def test_unsupported_operation(self) -> None:
        result = await calculator.handler({"operation": "pow", "a": 1, "b": 2})
        assert result["error"] == "Unsupported operation: pow"

    def test_schema_lists_operations(self) -> None:
        enum = calculator.metadata.input_schema["properties"]["operation"]["enum"]
        assert enum == ["add", "subtract", "multiply", "divide"]
