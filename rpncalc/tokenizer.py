"""Splits whitespace-delimited expression text into :class:`rpncalc.tokens.Token` objects.

Every token must be separated from its neighbors by whitespace, which is any character for which :meth:`str.isspace`
holds (including non-breaking and other Unicode spaces). So ``( 1 + 2 ) * 3`` is valid but ``(1+2)*3`` is a single
unknown token.

"""

from io import StringIO
from typing import IO, Iterator, Optional, Union

from .tokens import make_token, Token


class Tokenizer:
    """The expression tokenizer."""
    def __init__(self, stream: Union[str, IO]):
        """Initializes a tokenizer, but does not commence any tokenization.

        Args:
            stream: The input stream from which to tokenize.

        """
        if isinstance(stream, str):
            stream = StringIO(stream)
        self._stream: IO = stream
        self._next_char: Optional[str] = None
        self._next_token: Optional[Token] = None
        self._offset: int = 0

    def _peek_char(self) -> str:
        if self._next_char is None:
            self._next_char = self._stream.read(1)
        return self._next_char

    def _pop_char(self) -> str:
        ret = self._peek_char()
        self._next_char = None
        self._offset += len(ret)
        return ret

    def peek(self) -> Optional[Token]:
        """Returns the next token that would be returned from a call to :meth:`Tokenizer.next`.

        Returns:
            Optional[Token]: The next token, or :const:`None` if there are no more tokens.

        Raises:
            UnknownToken: If the next piece of text is not a number, operator, or bracket.

        """
        if self._next_token is not None:
            return self._next_token
        # ignore leading whitespace
        while self._peek_char().isspace():
            self._pop_char()
        start = self._offset
        text = ''
        while self._peek_char() and not self._peek_char().isspace():
            text += self._pop_char()
        if not text:
            return None
        self._next_token = make_token(text, start)
        return self._next_token

    def has_next(self) -> bool:
        return self.peek() is not None

    def next(self) -> Optional[Token]:
        """Returns the next token in the stream, or :const:`None` if there are no more tokens."""
        ret = self.peek()
        self._next_token = None
        return ret

    def __iter__(self) -> Iterator[Token]:
        while True:
            ret = self.next()
            if ret is None:
                break
            yield ret


def tokenize(stream_or_str: Union[IO, str]) -> Iterator[Token]:
    """Convenience function for tokenizing a string.

    This is equivalent to::

        yield from Tokenizer(stream_or_str)

    """
    yield from Tokenizer(stream_or_str)
