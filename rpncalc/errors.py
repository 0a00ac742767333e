"""The error types raised while tokenizing, reducing, and evaluating expressions.

Every error is a subclass of :class:`CalculatorError`, so callers that do not care *why* an expression was rejected can
catch that single type.

"""

from typing import Optional


class CalculatorError(RuntimeError):
    """Base error type of the :mod:`rpncalc` package."""
    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset: Optional[int] = offset
        """Character offset into the input at which the error was detected, or :const:`None` if unknown."""

    def __str__(self):
        if self.offset is None:
            return super().__str__()
        return f"{super().__str__()} at offset {self.offset}"


class UnknownToken(CalculatorError):
    """Raised for a piece of input that is neither a number nor a recognized operator or bracket."""
    def __init__(self, text: str, offset: Optional[int] = None):
        super().__init__(f"Unknown token {text!r}", offset)
        self.text: str = text


class UnbalancedBrackets(CalculatorError):
    """Raised for a closing bracket without a matching opening bracket, or vice versa."""
    pass


class InsufficientOperands(CalculatorError):
    """Raised when an operator is evaluated with fewer than two values on the stack."""
    pass


class TrailingOperands(CalculatorError):
    """Raised when more than one value remains on the stack after evaluation."""
    pass


class EmptyExpression(CalculatorError):
    """Raised when there is nothing to evaluate."""
    def __init__(self, message: str = "Empty expression", offset: Optional[int] = None):
        super().__init__(message, offset)
