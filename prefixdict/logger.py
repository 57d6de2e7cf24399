import logging
import logging.handlers
import os
import queue
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Final, Protocol, TypeVar, runtime_checkable

from prefixdict.utils.helper import platformdir, resolve_folder_with_links

_T_contra = TypeVar("_T_contra", contravariant=True)


class SupportsWrite(Protocol[_T_contra]):
    def write(self, s: _T_contra, /) -> object: ...


@runtime_checkable
class TTYSupportsWrite(SupportsWrite[_T_contra], Protocol):
    def isatty(self) -> bool: ...


type Stream[T] = SupportsWrite[T] | TTYSupportsWrite[T]


DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FORMAT = logging.Formatter("[%(asctime)s] [%(levelname)-8s] %(name)s: %(message)s", DATE_FORMAT)

_MSG_PREFIX = "\x1b[30;1m%(asctime)s\x1b[0m "
_MSG_POSTFIX = "%(levelname)-8s\x1b[0m \x1b[35m%(name)s\x1b[0m: %(message)s"


class AnsiFormatter(logging.Formatter):
    LEVEL_TO_COLOR = (
        (logging.DEBUG, "\x1b[40;1m"),
        (logging.INFO, "\x1b[34;1m"),
        (logging.WARNING, "\x1b[33;1m"),
        (logging.ERROR, "\x1b[31m"),
        (logging.CRITICAL, "\x1b[41m"),
    )

    FORMATS: Final = {
        level: logging.Formatter(_MSG_PREFIX + color + _MSG_POSTFIX, DATE_FORMAT) for level, color in LEVEL_TO_COLOR
    }

    def format(self, record: logging.LogRecord) -> str:
        if (formatter := self.FORMATS.get(record.levelno)) is None:
            formatter = self.FORMATS[logging.DEBUG]
        if record.exc_info:
            text = formatter.formatException(record.exc_info)
            record.exc_text = f"\x1b[31m{text}\x1b[0m"
        output = formatter.format(record)
        record.exc_text = None
        return output


def use_color_formatting(stream: Stream[str]) -> bool:
    is_a_tty = isinstance(stream, TTYSupportsWrite) and stream.isatty()

    if os.environ.get("TERM_PROGRAM") == "vscode":
        return is_a_tty

    if sys.platform == "win32":
        if "WT_SESSION" not in os.environ:
            return False

    return is_a_tty


@contextmanager
def with_logging(log_level: int = logging.INFO, *, log_file: bool = True) -> Generator[None]:
    """Route records through a queue to stderr and, optionally, a rotating log file.

    The previous root level and handlers are restored on exit.
    """
    q: queue.SimpleQueue[Any] = queue.SimpleQueue()
    q_handler = logging.handlers.QueueHandler(q)
    stream_handler = logging.StreamHandler()

    if use_color_formatting(sys.stderr):
        stream_handler.setFormatter(AnsiFormatter())
    else:
        stream_handler.setFormatter(FORMAT)

    handlers: list[logging.Handler] = [stream_handler]
    if log_file:
        log_location = resolve_folder_with_links(platformdir.user_log_path) / "prefixdict.log"
        rotating_file_handler = logging.handlers.RotatingFileHandler(
            log_location,
            maxBytes=2_000_000,
            backupCount=5,
        )
        rotating_file_handler.setFormatter(FORMAT)
        handlers.append(rotating_file_handler)

    q_listener = logging.handlers.QueueListener(q, *handlers)
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(log_level)
    root_logger.addHandler(q_handler)

    try:
        q_listener.start()
        yield
    finally:
        q_listener.stop()
        root_logger.removeHandler(q_handler)
        root_logger.setLevel(previous_level)
        for handler in handlers:
            handler.close()
