import math
from unittest import TestCase

from rpncalc.errors import UnknownToken
from rpncalc.tokens import (
    Associativity, CloseBracket, make_token, OpenBracket, Operand, Operator, OperatorToken, OPERATORS_BY_SYMBOL
)


class TestOperators(TestCase):
    def test_precedence_table(self):
        self.assertEqual(10, Operator.ADDITION.precedence)
        self.assertEqual(10, Operator.SUBTRACTION.precedence)
        self.assertEqual(20, Operator.MULTIPLICATION.precedence)
        self.assertEqual(20, Operator.DIVISION.precedence)
        self.assertEqual(30, Operator.EXPONENTIATION.precedence)

    def test_all_left_associative(self):
        for op in Operator:
            self.assertEqual(Associativity.LEFT, op.associativity)

    def test_symbols(self):
        self.assertEqual({'+', '-', '*', '/', '^'}, set(OPERATORS_BY_SYMBOL))
        for symbol, op in OPERATORS_BY_SYMBOL.items():
            self.assertEqual(symbol, str(op))

    def test_execute(self):
        self.assertEqual(5.0, Operator.ADDITION.execute(2.0, 3.0))
        self.assertEqual(-1.0, Operator.SUBTRACTION.execute(2.0, 3.0))
        self.assertEqual(6.0, Operator.MULTIPLICATION.execute(2.0, 3.0))
        self.assertEqual(0.5, Operator.DIVISION.execute(1.0, 2.0))
        self.assertEqual(8.0, Operator.EXPONENTIATION.execute(2.0, 3.0))
        self.assertIsInstance(Operator.ADDITION.execute(2, 3), float)

    def test_ieee_special_values(self):
        self.assertEqual(math.inf, Operator.DIVISION.execute(1.0, 0.0))
        self.assertEqual(-math.inf, Operator.DIVISION.execute(-1.0, 0.0))
        self.assertTrue(math.isnan(Operator.DIVISION.execute(0.0, 0.0)))
        self.assertTrue(math.isnan(Operator.EXPONENTIATION.execute(-8.0, 0.5)))
        self.assertEqual(math.inf, Operator.EXPONENTIATION.execute(0.0, -1.0))
        self.assertEqual(math.inf, Operator.EXPONENTIATION.execute(10.0, 400.0))
        self.assertEqual(0.5, Operator.EXPONENTIATION.execute(4.0, -0.5))


class TestTokens(TestCase):
    def test_operand(self):
        token = Operand(2.2)
        self.assertTrue(token.is_operand)
        self.assertFalse(token.is_operator)
        self.assertEqual(2.2, token.value)
        self.assertEqual('2.2', str(token))
        self.assertEqual('1.0', str(Operand(1)))
        self.assertEqual('inf', str(Operand(math.inf)))

    def test_operator_token(self):
        token = OperatorToken('^')
        self.assertTrue(token.is_operator)
        self.assertFalse(token.is_open_bracket)
        self.assertIs(Operator.EXPONENTIATION, token.op)
        self.assertEqual(30, token.precedence)
        self.assertEqual(Associativity.LEFT, token.associativity)
        self.assertEqual('^', str(token))
        self.assertEqual(OperatorToken(Operator.EXPONENTIATION), token)

    def test_unknown_operator(self):
        with self.assertRaises(UnknownToken):
            OperatorToken('%')

    def test_brackets(self):
        self.assertTrue(OpenBracket().is_open_bracket)
        self.assertFalse(OpenBracket().is_operator)
        self.assertTrue(CloseBracket().is_close_bracket)
        self.assertEqual('(', str(OpenBracket()))
        self.assertEqual(')', str(CloseBracket()))
        self.assertNotEqual(OpenBracket(), CloseBracket())

    def test_value_equality(self):
        self.assertEqual(Operand(1.0, offset=0), Operand(1.0, offset=10))
        self.assertNotEqual(Operand(1.0), Operand(2.0))
        self.assertNotEqual(OperatorToken('+'), OperatorToken('-'))
        self.assertEqual(OpenBracket(3), OpenBracket(7))
        self.assertEqual(len({Operand(1.0), Operand(1.0, offset=4), OperatorToken('*'), OperatorToken('*')}), 2)

    def test_make_token(self):
        self.assertEqual(Operand(3.5), make_token('3.5'))
        self.assertEqual(Operand(-5.0), make_token('-5'))
        self.assertEqual(Operand(1e3), make_token('1e3'))
        self.assertEqual(OperatorToken('-'), make_token('-'))
        self.assertEqual(OpenBracket(), make_token('('))
        self.assertEqual(CloseBracket(), make_token(')'))
        self.assertEqual(4, make_token('(', offset=4).offset)
        with self.assertRaises(UnknownToken) as cm:
            make_token('foo', offset=6)
        self.assertEqual(6, cm.exception.offset)
        self.assertEqual('foo', cm.exception.text)

    def test_nan_equality(self):
        self.assertEqual(Operand(math.nan), Operand(math.nan))
        self.assertEqual(Operand(math.nan), Operand(float('nan'), offset=3))
        self.assertEqual(hash(Operand(math.nan)), hash(Operand(float('nan'))))
        self.assertNotEqual(Operand(math.nan), Operand(1.0))
        self.assertEqual(1, len({Operand(math.nan), Operand(float('nan'))}))
