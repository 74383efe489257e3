import sys
from typing import Optional, TextIO

from adminopt.logging_config import get_logger


class ConsolePrinter:
    """Writes the user-facing lines of the tool.

    Everything the user sees goes to stdout (or the injected stream); the
    structured log goes to stderr via structlog, so the two never mix.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._logger = get_logger(__name__)

    @property
    def stream(self) -> TextIO:
        # resolved per call so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    def line(self, message: str = "") -> None:
        print(message, file=self.stream, flush=True)

    def lines(self, messages) -> None:
        for message in messages:
            self.line(message)

    def prompt(self, message: str) -> None:
        print(message, end="", file=self.stream, flush=True)

    def error(self, message: str, **context) -> None:
        print(message, file=self.stream, flush=True)
        self._logger.warning("input_rejected", message=message, **context)
