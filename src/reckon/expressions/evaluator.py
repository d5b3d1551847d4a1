"""Evaluator for calculator expression trees.

Walks the tree recursively and computes a Value. Before any work on a node
the interrupt is polled, so cancellation is noticed at every node boundary.
Children are evaluated left to right, except for conversions, where the
target (right) is evaluated first because it decides how the left side is
interpreted.
"""

import logging
from dataclasses import dataclass

from reckon.config import EvaluationConfig
from reckon.expressions.errors import EvaluationError, Interrupted, TypeMismatchError
from reckon.expressions.interrupt import Interrupt, NeverInterrupt, check_interrupt
from reckon.expressions.numbers import FormattingStyle, Number
from reckon.expressions.resolver import resolve_identifier
from reckon.expressions.scope import Scope
from reckon.expressions.tree import (
    Add,
    Apply,
    ApplyMultiply,
    ASTNode,
    Call,
    Convert,
    Divide,
    Factorial,
    Identifier,
    Literal,
    Multiply,
    Negate,
    Parens,
    Power,
    Reciprocal,
    Subtract,
    UnaryPlus,
)
from reckon.expressions.values import (
    BaseValue,
    FormatValue,
    FunctionValue,
    NumberValue,
    PrecisionMarker,
    Value,
)

logger = logging.getLogger(__name__)

# Significant digits used for `x as dp`
DP_DIGITS = 10


class Evaluator:
    """Evaluates an expression tree against a scope.

    Usage:
        evaluator = Evaluator(Scope(), EvaluationConfig(), NeverInterrupt())
        result = evaluator.evaluate(Add(Literal("2"), Literal("3")))
    """

    def __init__(
        self,
        scope: Scope,
        config: EvaluationConfig | None = None,
        interrupt: Interrupt | None = None,
    ):
        self.scope = scope
        self.config = config or EvaluationConfig()
        self.interrupt = interrupt or NeverInterrupt()

    def evaluate(self, node: ASTNode) -> Value:
        """Evaluate a node and return the result."""
        check_interrupt(self.interrupt)

        method_name = f"_eval_{type(node).__name__.lower()}"
        method = getattr(self, method_name, None)

        if method is None:
            raise EvaluationError(f"Unknown node type: {type(node).__name__}")

        return method(node)

    def _number(self, node: ASTNode) -> Number:
        return self.evaluate(node).expect_number()

    # -------------------------------------------------------------------------
    # Leaves
    # -------------------------------------------------------------------------

    def _eval_literal(self, node: Literal) -> Value:
        return NumberValue(Number.from_literal(node.text))

    def _eval_identifier(self, node: Identifier) -> Value:
        return resolve_identifier(node.name, self.scope, self.config, self.interrupt)

    # -------------------------------------------------------------------------
    # Unary operators
    # -------------------------------------------------------------------------

    def _eval_parens(self, node: Parens) -> Value:
        return NumberValue(self._number(node.operand))

    def _eval_unaryplus(self, node: UnaryPlus) -> Value:
        return NumberValue(self._number(node.operand))

    def _eval_negate(self, node: Negate) -> Value:
        return NumberValue(self._number(node.operand).negate())

    def _eval_reciprocal(self, node: Reciprocal) -> Value:
        operand = self._number(node.operand)
        return NumberValue(Number.from_int(1).div(operand, self.interrupt))

    def _eval_factorial(self, node: Factorial) -> Value:
        return NumberValue(self._number(node.operand).factorial(self.interrupt))

    # -------------------------------------------------------------------------
    # Binary operators
    # -------------------------------------------------------------------------

    def _eval_add(self, node: Add) -> Value:
        left = self._number(node.left)
        return NumberValue(left.add(self._number(node.right), self.interrupt))

    def _eval_subtract(self, node: Subtract) -> Value:
        left = self._number(node.left)
        return NumberValue(left.sub(self._number(node.right), self.interrupt))

    def _eval_multiply(self, node: Multiply) -> Value:
        left = self._number(node.left)
        return NumberValue(left.mul(self._number(node.right), self.interrupt))

    def _eval_divide(self, node: Divide) -> Value:
        left = self._number(node.left)
        return NumberValue(left.div(self._number(node.right), self.interrupt))

    def _eval_power(self, node: Power) -> Value:
        left = self._number(node.left)
        return NumberValue(left.pow(self._number(node.right), self.interrupt))

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def _eval_apply(self, node: Apply) -> Value:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return left.apply(
            right, allow_multiply=True, force_multiply=False, interrupt=self.interrupt
        )

    def _eval_call(self, node: Call) -> Value:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return left.apply(
            right, allow_multiply=False, force_multiply=False, interrupt=self.interrupt
        )

    def _eval_applymultiply(self, node: ApplyMultiply) -> Value:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return left.apply(
            right, allow_multiply=True, force_multiply=True, interrupt=self.interrupt
        )

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def _eval_convert(self, node: Convert) -> Value:
        """Evaluate `left as right`; the kind of right picks the conversion."""
        target = self.evaluate(node.right)

        if isinstance(target, FunctionValue):
            raise TypeMismatchError("Unable to convert value to a function")

        left = self._conversion_source(node.left)

        if isinstance(target, NumberValue):
            return NumberValue(left.convert_to(target.number, self.interrupt))
        if isinstance(target, FormatValue):
            return NumberValue(left.with_format(target.style))
        if isinstance(target, PrecisionMarker):
            return NumberValue(left.with_format(FormattingStyle.approx_float(DP_DIGITS)))
        if isinstance(target, BaseValue):
            return NumberValue(left.with_base(target.base))

        raise EvaluationError(f"Cannot convert to {target.kind} '{target}'")

    def _conversion_source(self, node: ASTNode) -> Number:
        value = self.evaluate(node)
        if isinstance(value, FunctionValue):
            raise TypeMismatchError(
                f"Unable to convert value to a function: '{value.name}' is not a number"
            )
        return value.expect_number()


# -----------------------------------------------------------------------------
# Convenience functions
# -----------------------------------------------------------------------------


@dataclass
class Outcome:
    """Terminal result of one evaluation request.

    Attributes:
        status: "ok", "error" or "interrupted"
        value: The result when status is "ok"
        message: The error or cancellation message otherwise
    """

    status: str
    value: Value | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def evaluate(
    node: ASTNode,
    scope: Scope | None = None,
    config: EvaluationConfig | None = None,
    interrupt: Interrupt | None = None,
) -> Value:
    """Evaluate a tree and return its value.

    This is the main entry point for evaluation.

    Raises:
        EvaluationError: Any domain error; the evaluation is abandoned
        Interrupted: Cancellation was requested

    Example:
        value = evaluate(Convert(Literal("255"), Identifier("hex")))
        str(value)  # "0xff"
    """
    evaluator = Evaluator(scope if scope is not None else Scope(), config, interrupt)
    return evaluator.evaluate(node)


def run(
    node: ASTNode,
    scope: Scope | None = None,
    config: EvaluationConfig | None = None,
    interrupt: Interrupt | None = None,
) -> Outcome:
    """Evaluate a tree and capture the terminal outcome instead of raising."""
    try:
        return Outcome("ok", value=evaluate(node, scope, config, interrupt))
    except Interrupted as e:
        logger.debug("Evaluation of %s interrupted", node)
        return Outcome("interrupted", message=str(e))
    except EvaluationError as e:
        return Outcome("error", message=str(e))
