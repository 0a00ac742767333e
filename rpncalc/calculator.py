"""The calculator pipeline: text, to tokens, to reverse Polish notation, to a value.

Example:
    >>> evaluate('1 + 2.2 * 3 + ( 2 * 2 ) ^ 3')
    71.6

"""

import logging
from typing import IO, Union

from .builder import ExpressionBuilder
from .errors import EmptyExpression
from .rpn import Expression, infix_to_rpn
from .tokenizer import tokenize


log = logging.getLogger(__name__)


def parse(expression_str: Union[str, IO]) -> Expression:
    """Parses an infix expression into an :class:`Expression` in reverse Polish notation.

    This is equivalent to::

        Expression(infix_to_rpn(tokenize(expression_str)))

    except that an empty input is rejected.

    Raises:
        EmptyExpression: If :obj:`expression_str` contains no tokens.
        UnknownToken: If :obj:`expression_str` contains something other than numbers, operators, and brackets.
        UnbalancedBrackets: If the brackets in :obj:`expression_str` do not pair up.

    """
    builder = ExpressionBuilder()
    builder.extend(tokenize(expression_str))
    if not builder:
        raise EmptyExpression()
    expression = Expression(infix_to_rpn(builder.build()))
    log.debug(f"Converted to reverse Polish notation: {expression!s}")
    return expression


def evaluate(expression_str: Union[str, IO]) -> float:
    """Parses and evaluates an infix expression.

    Division by zero and out-of-domain powers are not errors; they produce ``inf`` or ``nan``.

    Raises:
        CalculatorError: If the expression is malformed. See :func:`parse` and :func:`rpncalc.rpn.evaluate_rpn` for the
            specific subclasses.

    """
    result = parse(expression_str).eval()
    log.debug(f"Evaluated to {result!r}")
    return result
