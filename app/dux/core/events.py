"""Input events and the event multiplexer.

Two independent sources feed the control loop: a background thread that
reads command lines from a text stream, and the SIGINT/SIGTERM handlers.
Both post into one queue; the loop takes exactly one event per cycle,
whichever arrived first.
"""

import io
import logging
import signal
import sys
import threading
from dataclasses import dataclass
from queue import Empty, SimpleQueue
from types import FrameType
from typing import Any, TextIO

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


@dataclass(frozen=True, slots=True)
class CommandEvent:
    """One line typed by the user (without the line terminator)."""

    text: str


@dataclass(frozen=True, slots=True)
class SignalEvent:
    """A termination signal was received."""

    signum: int


@dataclass(frozen=True, slots=True)
class InputClosedEvent:
    """The command stream reached end of file."""


Event = CommandEvent | SignalEvent | InputClosedEvent


class EventMultiplexer:
    """Merges command lines and termination signals into one event stream.

    The reader thread is a daemon: a read blocked on the stream cannot be
    interrupted, so :meth:`stop` only tells the reader to discard further
    lines and exit after its current read, and restores the signal
    handlers that were active before :meth:`start`.

    Args:
        stream: Text stream to read commands from. Defaults to ``sys.stdin``
            at start time.
        signals: Signals relayed as SignalEvent. Pass an empty tuple to
            leave signal handling alone (required off the main thread).

    Example:
        >>> with EventMultiplexer() as events:
        ...     event = events.next_event()
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        signals: tuple[signal.Signals, ...] = DEFAULT_SIGNALS,
    ) -> None:
        self._stream = stream
        self._signals = signals
        self._queue: SimpleQueue[Event] = SimpleQueue()
        self._stop = threading.Event()
        self._reader: threading.Thread | None = None
        self._previous_handlers: dict[signal.Signals, Any] = {}

    def start(self) -> None:
        """Start the reader thread and install the signal handlers."""
        if self._reader is not None:
            return

        for signum in self._signals:
            self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)

        stream = self._stream if self._stream is not None else sys.stdin
        if isinstance(stream, io.TextIOWrapper):
            # Undecodable bytes become U+FFFD instead of killing the reader
            stream.reconfigure(errors="replace")
        self._reader = threading.Thread(
            target=self._read_commands,
            args=(stream,),
            name="dux-command-reader",
            daemon=True,
        )
        self._reader.start()

    def stop(self) -> None:
        """Tell the reader to stop and restore the previous signal handlers."""
        self._stop.set()
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers.clear()

    def post(self, event: Event) -> None:
        """Add an event to the queue (safe from signal handlers)."""
        self._queue.put(event)

    def next_event(self, timeout: float | None = None) -> Event | None:
        """Block until one event is available and return it.

        Args:
            timeout: Maximum seconds to wait; None waits forever.

        Returns:
            The next event, or None if ``timeout`` elapsed first.
        """
        try:
            return self._queue.get(timeout=timeout)
        except Empty:
            return None

    def _read_commands(self, stream: TextIO) -> None:
        try:
            for line in iter(stream.readline, ""):
                if self._stop.is_set():
                    return
                self.post(CommandEvent(line.rstrip("\r\n")))
        except (ValueError, OSError) as e:
            logger.warning("Command stream failed: %s", e)
        finally:
            if not self._stop.is_set():
                logger.debug("Command stream closed")
                self.post(InputClosedEvent())

    def _handle_signal(self, signum: int, _frame: FrameType | None) -> None:
        self.post(SignalEvent(signum))

    def __enter__(self) -> "EventMultiplexer":
        self.start()
        return self

    def __exit__(self, *_exc: object) -> None:
        self.stop()
