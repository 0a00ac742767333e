"""A module for abstracting printing.

The :class:`Printer` lets the command line interface toggle ANSI color in one place, rather than in every function that
prints, and it cooperates with :mod:`tqdm` progress bars through :class:`rpncalc.progress.StatusWriter`.

Example:
    >>> printer = Printer(ansi_color=True)
    >>> with printer.color(Fore.GREEN):
    ...     printer.write('7.0')

"""

import sys
from abc import abstractmethod
from functools import wraps
from typing import Any, Optional

import colorama
from colorama import Fore, Style
from colorama.ansi import AnsiFore, AnsiStyle
from typing_extensions import Protocol

from .progress import StatusWriter


class Writer(Protocol):
    """A protocol for basic IO writers that is a subset of :class:`typing.IO`."""

    @abstractmethod
    def write(self, s: str) -> int:
        raise NotImplementedError()

    @abstractmethod
    def isatty(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def flush(self) -> Any:
        raise NotImplementedError()


class ANSIContext:
    """A context for printing to the terminal with an ANSI color or style.

    On enter it writes the start code; on exit it restores the enclosing context's color and style.

    """

    def __init__(self, printer: 'Printer', fore: Optional[AnsiFore] = None, style: Optional[AnsiStyle] = None):
        self.printer: Printer = printer
        self.fore: Optional[AnsiFore] = fore
        self.style: Optional[AnsiStyle] = style
        self._saved_fore: Optional[AnsiFore] = None
        self._saved_style: Optional[AnsiStyle] = None

    def color(self, foreground_color: AnsiFore) -> 'ANSIContext':
        """Returns a new context that adds the given foreground color to this one."""
        return ANSIContext(self.printer, fore=foreground_color, style=self.style)

    def bright(self) -> 'ANSIContext':
        """Returns a new context that adds the bright style to this one."""
        return ANSIContext(self.printer, fore=self.fore, style=Style.BRIGHT)

    def __enter__(self) -> 'Printer':
        self._saved_fore = self.printer.current_fore
        self._saved_style = self.printer.current_style
        if self.style is not None:
            self.printer.current_style = self.style
            self.printer.raw_write(self.style)
        if self.fore is not None:
            self.printer.current_fore = self.fore
            self.printer.raw_write(self.fore)
        return self.printer

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.style is not None and self.style != self._saved_style:
            # resetting the style also resets the color, so restore both
            self.printer.raw_write(Style.RESET_ALL)
            if self._saved_style is not None:
                self.printer.raw_write(self._saved_style)
            if self._saved_fore is not None:
                self.printer.raw_write(self._saved_fore)
        elif self.fore is not None and self.fore != self._saved_fore:
            self.printer.raw_write(Fore.RESET if self._saved_fore is None else self._saved_fore)
        self.printer.current_fore = self._saved_fore
        self.printer.current_style = self._saved_style


class NullANSIContext:
    """A "fake" :class:`ANSIContext` that has the same functions but does not actually emit any colors."""

    def __init__(self, printer: 'Printer'):
        self._printer: Printer = printer

    def color(self, foreground_color: AnsiFore) -> 'NullANSIContext':
        return self

    def bright(self) -> 'NullANSIContext':
        return self

    def __enter__(self) -> 'Printer':
        return self._printer

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


def only_ansi(func):
    """A decorator for :class:`Printer` methods that should only have an effect when outputting in color.

    If the :class:`Printer` has :attr:`Printer.ansi_color` set to :const:`False`, the decorated method returns a
    :class:`NullANSIContext` instead.

    """
    @wraps(func)
    def wrapper(self: 'Printer', *args, **kwargs):
        if self.ansi_color:
            return func(self, *args, **kwargs)
        else:
            return NullANSIContext(self)

    return wrapper


class Printer(StatusWriter):
    """An ANSI color and status printer."""

    def __init__(
            self,
            out_stream: Optional[Writer] = None,
            ansi_color: Optional[bool] = None,
            quiet: bool = False
    ):
        """Initializes a Printer.

        Args:
            out_stream: The stream to which to print. If omitted, it defaults to :attr:`sys.stdout`.
            ansi_color: Whether or not color should be enabled in the output. If omitted, it defaults to
                :meth:`out_stream.isatty<Writer.isatty>`.
            quiet: If :const:`True`, progress bars will be suppressed.

        """
        if out_stream is None:
            out_stream = sys.stdout
        super().__init__(out_stream=out_stream, quiet=quiet)
        self.current_fore: Optional[AnsiFore] = None
        self.current_style: Optional[AnsiStyle] = None
        self._ansi_color: bool = False
        self.ansi_color = ansi_color
        if self.ansi_color:
            colorama.init()

    @property
    def ansi_color(self) -> bool:
        """Returns whether this printer has color enabled."""
        return self._ansi_color

    @ansi_color.setter
    def ansi_color(self, is_color: Optional[bool]):
        if is_color is None:
            try:
                self._ansi_color = self.isatty()
            except (AttributeError, ValueError):
                self._ansi_color = False
        else:
            self._ansi_color = is_color

    def raw_write(self, s: str) -> int:
        return super().write(s)

    def newline(self):
        self.write('\n')

    @only_ansi
    def color(self, foreground_color: AnsiFore) -> ANSIContext:
        """Returns a new context for this printer with the given foreground color."""
        return ANSIContext(self, fore=foreground_color)

    @only_ansi
    def bright(self) -> ANSIContext:
        """Returns a new context for this printer with the bright style enabled."""
        return ANSIContext(self, style=Style.BRIGHT)
