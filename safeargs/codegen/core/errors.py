"""
Exceptions raised while turning a navigation graph into directions classes.

Errors are deterministic functions of the input graph; nothing here is
retried. Model errors collect the location of the offending node as they
propagate from argument to action to destination.
"""

from typing import List, Optional, Sequence, Tuple


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ModelError(GeneratorError):
    """The navigation graph cannot be turned into valid directions classes."""

    def __init__(
        self,
        message: str,
        destination: Optional[str] = None,
        action: Optional[str] = None,
        argument: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.destination = destination
        self.action = action
        self.argument = argument

    def add_context(
        self,
        destination: Optional[str] = None,
        action: Optional[str] = None,
        argument: Optional[str] = None,
    ) -> "ModelError":
        """Fill in location fields that are still unknown and return self."""
        if self.destination is None and destination is not None:
            self.destination = destination
        if self.action is None and action is not None:
            self.action = action
        if self.argument is None and argument is not None:
            self.argument = argument
        return self

    @property
    def location(self) -> str:
        parts = []
        if self.destination is not None:
            parts.append(f"destination={self.destination}")
        if self.action is not None:
            parts.append(f"action={self.action}")
        if self.argument is not None:
            parts.append(f"argument={self.argument}")
        return ", ".join(parts)

    def __str__(self) -> str:
        location = self.location
        if location:
            return f"{self.message} ({location})"
        return self.message


class CollisionError(GeneratorError):
    """Two destinations resolve to the same generated class."""

    def __init__(self, collisions: Sequence[Tuple[str, Sequence[str]]]):
        """
        Args:
            collisions: ``(qualified class name, destination labels)`` pairs,
                one per name that was produced more than once.
        """
        self.collisions: List[Tuple[str, Tuple[str, ...]]] = [
            (name, tuple(labels)) for name, labels in collisions
        ]
        details = "; ".join(
            f"{name} <- {', '.join(labels)}" for name, labels in self.collisions
        )
        super().__init__(f"Generated class name collision: {details}")
