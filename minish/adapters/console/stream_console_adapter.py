"""
Console adapter reading and writing plain text streams.
"""

import io
import logging
import sys
from typing import Optional, TextIO

from typing_extensions import override

from minish.ports.console.console_port import ConsolePort

TOLERANT_ERRORS = "surrogateescape"


class StreamConsoleAdapter(ConsolePort):
    """Terminal I/O for the interactive session."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            stdin: Stream to read lines from (defaults to sys.stdin at read time)
            stdout: Stream to write to (defaults to sys.stdout at write time)
            logger: Logger instance to use for logging
        """
        self._stdin = stdin
        self._stdout = stdout
        self._logger = logger or logging.getLogger(__name__)

    def _tolerant(self, stream: TextIO) -> TextIO:
        """
        Switch a strictly decoding stream to surrogateescape.

        Bytes that are not valid in the stream's encoding then round-trip as
        lone surrogates instead of raising, and os.fsencode restores them for
        paths and child arguments.

        Args:
            stream: Text stream about to be read or written

        Returns:
            The same stream
        """
        if getattr(stream, "errors", None) != "strict" or not hasattr(
            stream, "reconfigure"
        ):
            return stream
        try:
            stream.reconfigure(errors=TOLERANT_ERRORS)
        except (ValueError, io.UnsupportedOperation) as e:
            self._logger.warning(f"Cannot relax decoding errors on {stream!r}: {e}")
        return stream

    @property
    def _out(self) -> TextIO:
        return self._tolerant(self._stdout or sys.stdout)

    @override
    def read_line(self, prompt: str) -> Optional[str]:
        self._out.write(prompt)
        self.flush()
        line = self._tolerant(self._stdin or sys.stdin).readline()
        if line == "":
            self._logger.debug("End of input reached")
            return None
        return line.rstrip("\r\n")

    @override
    def write_line(self, text: str) -> None:
        self._out.write(text + "\n")

    @override
    def flush(self) -> None:
        self._out.flush()
