"""The tokens that flow through the calculator pipeline.

A token is exactly one of four shapes: an :class:`Operand`, an :class:`OperatorToken`, an :class:`OpenBracket`, or a
:class:`CloseBracket`. Tokens are immutable value objects; two tokens are equal if they have the same shape and the same
value, regardless of where in the input they were read.

Attributes:
    OPERATORS_BY_SYMBOL (Dict[str, Operator]): A mapping of operator symbols to :class:`Operator` objects, used in
        tokenizing.

"""

import math
import re
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, Union

import numpy as np

from .errors import UnknownToken


OPERATORS_BY_SYMBOL: Dict[str, 'Operator'] = {}

NAN_KEY = 'nan'

NUMBER_LITERAL = re.compile(
    r'[+-]?(([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE
)


class Associativity(Enum):
    """Whether operators of equal precedence group left-to-right or right-to-left."""
    LEFT = 'left'
    RIGHT = 'right'


def ieee754(func: Callable[[np.float64, np.float64], Any]) -> Callable[[float, float], float]:
    """Decorates a binary function so that it is computed with IEEE-754 double semantics.

    Division by zero, overflow, and invalid operations produce ``inf`` and ``nan`` rather than raising.

    """
    @wraps(func)
    def wrapper(lhs: float, rhs: float) -> float:
        with np.errstate(all='ignore'):
            return float(func(np.float64(lhs), np.float64(rhs)))

    return wrapper


@ieee754
def add(lhs, rhs):
    return lhs + rhs


@ieee754
def subtract(lhs, rhs):
    return lhs - rhs


@ieee754
def multiply(lhs, rhs):
    return lhs * rhs


@ieee754
def divide(lhs, rhs):
    return lhs / rhs


@ieee754
def power(lhs, rhs):
    return np.power(lhs, rhs)


class Operator(Enum):
    """An enumeration of the binary operators."""
    ADDITION = ('+', 10, add)
    SUBTRACTION = ('-', 10, subtract)
    MULTIPLICATION = ('*', 20, multiply)
    DIVISION = ('/', 20, divide)
    # Left-associative, so `2 ^ 3 ^ 2` is `(2 ^ 3) ^ 2`
    EXPONENTIATION = ('^', 30, power)

    def __init__(self,
                 symbol: str,
                 precedence: int,
                 execute: Callable[[float, float], float],
                 associativity: Associativity = Associativity.LEFT):
        self.symbol: str = symbol
        """The symbol used to write this operator. Symbols must be unique."""
        self.precedence: int = precedence
        """The operator's precedence; higher binds more tightly."""
        self.execute: Callable[[float, float], float] = execute
        """A function called with ``(lhs, rhs)`` to compute the operator."""
        self.associativity: Associativity = associativity
        """How operators of equal precedence group."""
        OPERATORS_BY_SYMBOL[self.symbol] = self

    def __str__(self):
        return self.symbol


class Token:
    """Base class for an expression token."""

    def __init__(self, offset: int = 0):
        self._offset: int = offset

    @property
    def offset(self) -> int:
        """Offset of the token in the input. It does not take part in equality."""
        return self._offset

    @property
    def key(self) -> Any:
        """The value that distinguishes this token from other tokens of the same shape."""
        return None

    @property
    def is_operand(self) -> bool:
        return False

    @property
    def is_operator(self) -> bool:
        return False

    @property
    def is_open_bracket(self) -> bool:
        return False

    @property
    def is_close_bracket(self) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, Token) and type(self) is type(other) and self.key == other.key

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.__class__.__name__, self.key))

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Operand(Token):
    """A numeric literal."""
    def __init__(self, value: Union[float, int, str], offset: int = 0):
        super().__init__(offset)
        self._value: float = float(value)

    @property
    def value(self) -> float:
        """The numeric value of this operand."""
        return self._value

    @property
    def key(self) -> Union[float, str]:
        # NaN never compares equal to itself, so all NaN operands share one key
        if math.isnan(self._value):
            return NAN_KEY
        return self._value

    @property
    def is_operand(self) -> bool:
        return True

    def __float__(self):
        return self._value

    def __str__(self):
        return repr(self._value)

    def __repr__(self):
        return f"{self.__class__.__name__}(value={self._value!r})"


class OperatorToken(Token):
    """A token associated with an :class:`Operator`."""
    def __init__(self, op: Union[str, Operator], offset: int = 0):
        super().__init__(offset)
        if isinstance(op, str):
            if op not in OPERATORS_BY_SYMBOL:
                raise UnknownToken(op, offset)
            op = OPERATORS_BY_SYMBOL[op]
        self._op: Operator = op

    @property
    def op(self) -> Operator:
        """The operator associated with this token."""
        return self._op

    @property
    def key(self) -> Operator:
        return self._op

    @property
    def precedence(self) -> int:
        return self._op.precedence

    @property
    def associativity(self) -> Associativity:
        return self._op.associativity

    @property
    def is_operator(self) -> bool:
        return True

    def __str__(self):
        return self._op.symbol

    def __repr__(self):
        return f"{self.__class__.__name__}(op={self._op.name})"


class OpenBracket(Token):
    """An opening parenthesis."""

    @property
    def is_open_bracket(self) -> bool:
        return True

    def __str__(self):
        return '('


class CloseBracket(Token):
    """A closing parenthesis."""

    @property
    def is_close_bracket(self) -> bool:
        return True

    def __str__(self):
        return ')'


BRACKETS_BY_SYMBOL = {
    '(': OpenBracket,
    ')': CloseBracket
}


def make_token(text: str, offset: int = 0) -> Token:
    """Classifies a single piece of text as a token.

    Decimal literals (optionally signed, with an optional exponent) and ``inf``, ``infinity``, and ``nan`` are
    :class:`Operand` tokens; otherwise the text must be an operator symbol or a bracket.

    Raises:
        UnknownToken: If :obj:`text` is none of these.

    """
    if NUMBER_LITERAL.fullmatch(text):
        return Operand(float(text), offset)
    elif text in BRACKETS_BY_SYMBOL:
        return BRACKETS_BY_SYMBOL[text](offset)
    elif text in OPERATORS_BY_SYMBOL:
        return OperatorToken(OPERATORS_BY_SYMBOL[text], offset)
    raise UnknownToken(text, offset)
