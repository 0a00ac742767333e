from io import StringIO
from unittest import TestCase

from rpncalc.errors import UnknownToken
from rpncalc.tokenizer import tokenize, Tokenizer
from rpncalc.tokens import CloseBracket, OpenBracket, Operand, OperatorToken


class TestTokenizer(TestCase):
    def test_tokenize(self):
        self.assertEqual([
            OpenBracket(), Operand(1.0), OperatorToken('+'), Operand(2.0), CloseBracket(), OperatorToken('*'),
            Operand(3.0)
        ], list(tokenize('( 1 + 2 ) * 3')))

    def test_offsets(self):
        self.assertEqual([0, 3, 5, 10], [t.offset for t in tokenize('1  + 22   ^')])

    def test_whitespace(self):
        self.assertEqual([], list(tokenize('')))
        self.assertEqual([], list(tokenize(' \t\n ')))
        self.assertEqual([Operand(1.0), OperatorToken('-'), Operand(2.0)], list(tokenize('\t1\n-  2 ')))

    def test_stream(self):
        self.assertEqual([Operand(4.0), OperatorToken('/'), Operand(2.0)], list(tokenize(StringIO('4 / 2'))))

    def test_peek(self):
        tokenizer = Tokenizer('1 + 2')
        self.assertEqual(Operand(1.0), tokenizer.peek())
        self.assertEqual(Operand(1.0), tokenizer.next())
        self.assertTrue(tokenizer.has_next())
        self.assertEqual(OperatorToken('+'), tokenizer.next())
        self.assertEqual(Operand(2.0), tokenizer.next())
        self.assertFalse(tokenizer.has_next())
        self.assertIsNone(tokenizer.next())

    def test_unknown_token(self):
        with self.assertRaises(UnknownToken) as cm:
            list(tokenize('1 + x'))
        self.assertEqual(4, cm.exception.offset)
        with self.assertRaises(UnknownToken):
            list(tokenize('(1+2)'))
        with self.assertRaises(UnknownToken):
            list(tokenize('2 ** 3'))

    def test_unicode_whitespace(self):
        self.assertEqual(
            [Operand(1.0), OperatorToken('+'), Operand(2.0)],
            list(tokenize('1\u00a0+\u20032'))
        )
        self.assertEqual([0, 2, 4], [t.offset for t in tokenize('1\u00a0+\u30002')])

    def test_number_literals(self):
        self.assertEqual(
            [Operand(1.5), Operand(-2.0), Operand(300.0), Operand(0.25), Operand(4.0)],
            list(tokenize('1.5 -2 3e2 .25 +4.'))
        )
        self.assertEqual('inf', str(next(tokenize('Infinity'))))
        self.assertEqual('nan', str(next(tokenize('nan'))))
        for text in ('1_000', '\u0661\u0662', '1e', '0x10', '.', '1.2.3', '--1'):
            with self.assertRaises(UnknownToken, msg=text):
                list(tokenize(text))
