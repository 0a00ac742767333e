"""Conversion of infix token sequences to `Reverse Polish Notation`_ and evaluation of the result.

Example:
    >>> from rpncalc.tokenizer import tokenize
    >>> expression = Expression(infix_to_rpn(tokenize('( 1 + 2 ) * 3')))
    >>> str(expression)
    '1.0 2.0 + 3.0 *'
    >>> expression.eval()
    9.0

.. _Reverse Polish Notation:
    https://en.wikipedia.org/wiki/Reverse_Polish_notation

"""

import logging
from typing import Iterable, Iterator, List, Tuple

from .errors import EmptyExpression, InsufficientOperands, TrailingOperands, UnbalancedBrackets
from .tokenizer import tokenize
from .tokens import Associativity, Operand, OperatorToken, Token


log = logging.getLogger(__name__)


def should_pop(token: OperatorToken, top: OperatorToken) -> bool:
    """Returns whether :obj:`top`, on top of the operator stack, must be output before :obj:`token` is pushed.

    Left-associative operators pop operators of equal or higher precedence; right-associative operators only pop
    operators of strictly higher precedence.

    """
    if token.associativity == Associativity.LEFT:
        return token.precedence <= top.precedence
    else:
        return token.precedence < top.precedence


def infix_to_rpn(tokens: Iterable[Token]) -> Iterator[Token]:
    """Converts an infix expression to reverse Polish notation using the Shunting Yard algorithm.

    Raises:
        UnbalancedBrackets: If a closing bracket has no matching opening bracket, or an opening bracket is never closed.

    """
    operators: List[Token] = []

    for token in tokens:
        if token.is_operand:
            yield token
        elif token.is_open_bracket:
            operators.append(token)
        elif token.is_close_bracket:
            while operators and not operators[-1].is_open_bracket:
                yield operators.pop()
            if not operators:
                raise UnbalancedBrackets("Mismatched closing bracket", token.offset)
            operators.pop()
        elif token.is_operator:
            while operators and operators[-1].is_operator and should_pop(token, operators[-1]):
                yield operators.pop()
            operators.append(token)
        else:
            raise ValueError(f"Unexpected token {token!r}")

    while operators:
        top = operators.pop()
        if top.is_open_bracket:
            raise UnbalancedBrackets("Mismatched opening bracket", top.offset)
        yield top


def rpn_string(tokens: Iterable[Token]) -> str:
    """Renders a token sequence as space-separated text."""
    return ' '.join(str(token) for token in tokens)


def evaluate_rpn(tokens: Iterable[Token]) -> float:
    """Evaluates a sequence of tokens in reverse Polish notation with a stack machine.

    Raises:
        EmptyExpression: If :obj:`tokens` is empty.
        InsufficientOperands: If an operator is reached with fewer than two values on the stack.
        TrailingOperands: If more than one value remains once every token has been consumed.
        UnbalancedBrackets: If a bracket appears in the sequence.

    """
    values: List[float] = []
    last_offset = 0
    for token in tokens:
        last_offset = token.offset
        if isinstance(token, Operand):
            values.append(token.value)
        elif isinstance(token, OperatorToken):
            if len(values) < 2:
                raise InsufficientOperands(
                    f"Operator {token} requires two operands but only {len(values)} available", token.offset
                )
            rhs = values.pop()
            lhs = values.pop()
            values.append(token.op.execute(lhs, rhs))
        elif token.is_open_bracket or token.is_close_bracket:
            raise UnbalancedBrackets(f"Unexpected bracket {token} in reverse Polish notation", token.offset)
        else:
            raise ValueError(f"Unexpected token {token!r}")
    if not values:
        raise EmptyExpression()
    elif len(values) > 1:
        raise TrailingOperands(f"Unexpected extra operands: {values[:-1]!r}", last_offset)
    return values[0]


class Expression:
    """An immutable sequence of tokens in reverse Polish notation that can be evaluated."""
    def __init__(self, rpn: Iterable[Token]):
        self.tokens: Tuple[Token, ...] = tuple(rpn)

    def eval(self) -> float:
        """Evaluates this expression.

        This is equivalent to::

            evaluate_rpn(self.tokens)

        """
        return evaluate_rpn(self.tokens)

    def __len__(self):
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __eq__(self, other):
        return isinstance(other, Expression) and self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __str__(self):
        return rpn_string(self.tokens)

    def __repr__(self):
        return f"{self.__class__.__name__}(rpn={self.tokens!r})"


def parse_rpn(rpn_str: str) -> Expression:
    """Parses text that is already in reverse Polish notation, such as the output of :func:`rpn_string`."""
    expression = Expression(tokenize(rpn_str))
    log.debug(f"Parsed reverse Polish notation {expression!s}")
    return expression
