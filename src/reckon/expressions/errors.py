"""Exception hierarchy for expression evaluation.

Every evaluation step either returns a value or raises one of:
- EvaluationError (or a subclass): a domain error that aborts the whole
  evaluation and surfaces to the top-level caller
- Interrupted: cancellation was requested; never an EvaluationError, so a
  handler for domain errors cannot swallow it
- InternalError: a path that cannot fail did fail (a defect, not user input)
"""

from typing import Callable, TypeVar

T = TypeVar("T")


class EvaluationError(Exception):
    """Error during expression evaluation."""


class TypeMismatchError(EvaluationError):
    """A value of the wrong kind was used (e.g. a function where a number is required)."""


class UnknownIdentifierError(EvaluationError):
    """An identifier is neither a builtin nor bound in scope."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown identifier '{name}'")


class NumberError(EvaluationError):
    """A number primitive failed (division by zero, invalid base, ...)."""


class Interrupted(Exception):
    """Cancellation was requested while evaluating."""

    def __init__(self, message: str = "Computation cancelled"):
        super().__init__(message)


class InternalError(RuntimeError):
    """An operation that must not fail raised a domain error."""


def expect_infallible(step: Callable[[], T], what: str) -> T:
    """Run a step whose domain errors would indicate a defect.

    Interrupts propagate unchanged; any EvaluationError becomes an
    InternalError.
    """
    try:
        return step()
    except EvaluationError as e:
        raise InternalError(f"{what} failed unexpectedly: {e}") from e
