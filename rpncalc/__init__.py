from .calculator import evaluate, parse
from .builder import ExpressionBuilder
from .errors import (
    CalculatorError, EmptyExpression, InsufficientOperands, TrailingOperands, UnbalancedBrackets, UnknownToken
)
from .rpn import Expression, evaluate_rpn, infix_to_rpn, parse_rpn, rpn_string
from .tokenizer import tokenize, Tokenizer
from .tokens import (
    Associativity, CloseBracket, OpenBracket, Operand, Operator, OperatorToken, OPERATORS_BY_SYMBOL, Token
)

from .version import __version__, VERSION_STRING
