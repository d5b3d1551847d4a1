"""Function registry for builtin calculator functions.

Function references (e.g. `sqrt`, `sin`) evaluate to a FunctionValue holding
only the name; applying it looks the implementation up here. Each function is
registered with metadata for documentation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class FunctionCategory(Enum):
    """Categories for organizing functions in documentation."""

    ALGEBRAIC = "algebraic"
    TRIGONOMETRIC = "trigonometric"
    HYPERBOLIC = "hyperbolic"
    EXPONENTIAL = "exponential"
    PRESENTATION = "presentation"


@dataclass
class FunctionDefinition:
    """Complete definition of a builtin function.

    Attributes:
        name: Function name as used in expressions
        description: Human-readable description
        category: Category for documentation organization
        implementation: Callable taking (Number, Interrupt) and returning a Value
        examples: Example expressions using this function
    """

    name: str
    description: str
    category: FunctionCategory
    implementation: Callable[..., Any]
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Export for documentation."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "examples": self.examples,
        }


class FunctionRegistry:
    """Registry for builtin functions.

    Example:
        FunctionRegistry.register(FunctionDefinition(
            name="sqrt",
            description="Square root",
            ...
        ))

        func = FunctionRegistry.get("sqrt")
        result = func.implementation(Number.from_int(9), NeverInterrupt())
    """

    _functions: dict[str, FunctionDefinition] = {}

    @classmethod
    def register(cls, func_def: FunctionDefinition) -> None:
        cls._functions[func_def.name] = func_def

    @classmethod
    def get(cls, name: str) -> FunctionDefinition:
        """Get a function definition by name.

        Raises:
            ValueError: If function is not registered
        """
        if name not in cls._functions:
            raise ValueError(f"Unknown function: {name}")
        return cls._functions[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._functions

    @classmethod
    def list_by_category(cls, category: FunctionCategory) -> list[FunctionDefinition]:
        return [f for f in cls._functions.values() if f.category == category]

    @classmethod
    def export_documentation(cls) -> dict[str, Any]:
        """Export the full registry, also grouped by category."""
        by_category: dict[str, list[dict[str, Any]]] = {}
        for func_def in cls._functions.values():
            by_category.setdefault(func_def.category.value, []).append(func_def.to_dict())

        return {
            "functions": {name: f.to_dict() for name, f in cls._functions.items()},
            "byCategory": by_category,
        }

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._functions.clear()
