"""A module for assembling infix token sequences."""

from typing import Iterable, List, Tuple, Union

from .tokens import CloseBracket, OpenBracket, Operand, Operator, OperatorToken, Token


class ExpressionBuilder:
    """Accumulates tokens in order and produces an immutable token sequence.

    A builder is meant to be used for a single expression; construct a new one for each expression.

    Example:
        >>> builder = ExpressionBuilder()
        >>> builder.add_open_bracket()
        >>> builder.add_operand(1)
        >>> builder.add_operator(Operator.ADDITION)
        >>> builder.add_operand(2)
        >>> builder.add_close_bracket()
        >>> ' '.join(map(str, builder.build()))
        '( 1.0 + 2.0 )'

    """
    def __init__(self):
        self._tokens: List[Token] = []

    def add(self, token: Token):
        """Appends an already-constructed token."""
        if not isinstance(token, Token):
            raise TypeError(f"Expected a Token, instead found {token!r}")
        self._tokens.append(token)

    def extend(self, tokens: Iterable[Token]):
        for token in tokens:
            self.add(token)

    def add_operand(self, value: float, offset: int = 0):
        self._tokens.append(Operand(value, offset))

    def add_operator(self, op: Union[str, Operator], offset: int = 0):
        self._tokens.append(OperatorToken(op, offset))

    def add_open_bracket(self, offset: int = 0):
        self._tokens.append(OpenBracket(offset))

    def add_close_bracket(self, offset: int = 0):
        self._tokens.append(CloseBracket(offset))

    def __len__(self):
        return len(self._tokens)

    def build(self) -> Tuple[Token, ...]:
        """Returns the tokens added so far, in order."""
        return tuple(self._tokens)
