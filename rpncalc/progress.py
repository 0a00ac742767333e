"""A module for printing status messages and progress bars to the command line."""

import io
import sys
from types import TracebackType
from typing import List, Optional, TextIO, Type

from tqdm import tqdm


class StatusWriter:
    """A text writer that can display :mod:`tqdm` progress bars without garbling the lines written to it.

    If :attr:`StatusWriter.status_stream` is either :attr:`sys.stdout` or :attr:`sys.stderr`, text written to this
    writer is buffered, and each complete line is emitted with :func:`tqdm.write`. A writer that is not used in a
    ``with`` block must be flushed with :meth:`StatusWriter.flush(final=True)<StatusWriter.flush>` after its final
    write, or else the last partial line may be lost.

    """
    def __init__(self, out_stream: Optional[TextIO] = None, quiet: bool = False):
        """Initializes a status writer.

        Args:
            out_stream: An optional stream to which to write. If omitted this defaults to :attr:`sys.stdout`.
            quiet: Whether progress bars should be suppressed.

        """
        self.quiet: bool = quiet
        self._reentries: int = 0
        if out_stream is None:
            out_stream = sys.stdout
        self.status_stream: TextIO = out_stream
        """The stream to which to print."""
        self._buffer: List[str] = []
        try:
            self.write_raw: bool = self.quiet or (
                    out_stream.fileno() != sys.stderr.fileno() and out_stream.fileno() != sys.stdout.fileno()
            )
            """If :const:`True`, this writer passes text straight through instead of using :func:`tqdm.write`."""
        except (io.UnsupportedOperation, AttributeError, ValueError):
            self.write_raw = True

    def tqdm(self, *args, **kwargs) -> tqdm:
        """Returns a :class:`tqdm.tqdm` progress bar, which is disabled if this writer is quiet."""
        if self.quiet:
            kwargs['disable'] = True
        return tqdm(*args, **kwargs)

    def flush(self, final: bool = False):
        """Flushes complete buffered lines.

        If :obj:`final` is :const:`True`, a trailing partial line is flushed as well, followed by a newline.

        """
        if final and self._buffer and not self._buffer[-1].endswith('\n'):
            self._buffer.append('\n')
        text = ''.join(self._buffer)
        self._buffer = []
        lines = text.split('\n')
        # the final element is an incomplete line (or empty)
        if lines[-1]:
            self._buffer.append(lines[-1])
        for line in lines[:-1]:
            tqdm.write(line, file=self.status_stream)
        return self.status_stream.flush()

    def write(self, text: str) -> int:
        if self.write_raw:
            return self.status_stream.write(text)
        self._buffer.append(text)
        if '\n' in text:
            self.flush()
        return len(text)

    def close(self):
        self.flush(final=True)

    def fileno(self) -> int:
        return self.status_stream.fileno()

    def isatty(self) -> bool:
        return self.status_stream.isatty()

    def __enter__(self) -> 'StatusWriter':
        self._reentries += 1
        return self

    def __exit__(self, t: Optional[Type[BaseException]], value: Optional[BaseException],
                 traceback: Optional[TracebackType]) -> Optional[bool]:
        self._reentries -= 1
        if self._reentries == 0:
            self.flush(final=True)
        return None
