"""Navigation engine: the interactive control loop.

Each cycle lists and sizes the current directory, hands the listing to
the presenter, then blocks until one command or termination signal
arrives. Faults inside the loop are reported and absorbed; the loop
always continues from a known-good directory.
"""

import logging
import time
from collections.abc import Callable
from typing import Protocol

from dux.core.config import ExplorerSettings
from dux.core.events import EventMultiplexer
from dux.core.navigation import Effect, Farewell, NavigationState, OpenPath, transition
from dux.core.paths import ROOT_PATH
from dux.fs.lister import DirectoryUnreadableError
from dux.fs.listing import Listing, ListingBuilder
from dux.utils.shell import OpenPathError, open_path

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Renders listings and messages for the user."""

    def show_listing(self, listing: Listing) -> None:
        """Render a sorted listing and the command prompt."""

    def show_error(self, message: str, detail: str) -> None:
        """Report a recoverable fault and what happens next."""

    def farewell(self) -> None:
        """Say goodbye."""


class NavigationEngine:
    """Drives which directory is displayed.

    The engine owns the event multiplexer's lifetime: it is started when
    :meth:`run` begins and stopped before it returns.

    Args:
        start_path: Directory shown first (absolute).
        builder: Produces sized, sorted listings.
        events: Source of commands and termination signals.
        presenter: Renders listings and messages.
        settings: Pause durations.
        opener: Opens or reveals a path in the file manager.
        root_path: Top of the navigable tree and fallback directory.
        sleep: Pause function (replaced in tests).
    """

    def __init__(
        self,
        *,
        start_path: str,
        builder: ListingBuilder,
        events: EventMultiplexer,
        presenter: Presenter,
        settings: ExplorerSettings | None = None,
        opener: Callable[..., None] = open_path,
        root_path: str = ROOT_PATH,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._start_path = start_path
        self._builder = builder
        self._events = events
        self._presenter = presenter
        self._settings = settings or ExplorerSettings()
        self._opener = opener
        self._root_path = root_path
        self._sleep = sleep

    def run(self) -> int:
        """Run the loop until quit intent is observed.

        Returns:
            Process exit status (always 0).
        """
        state = NavigationState(root_path=self._root_path, current_path=self._start_path)
        self._events.start()
        try:
            while not state.is_exiting:
                state = self.step(state)
        finally:
            self._events.stop()
        logger.debug("Navigation finished at %s", state.current_path)
        return 0

    def step(self, state: NavigationState) -> NavigationState:
        """Run one cycle of the loop.

        Args:
            state: State at the start of the cycle.

        Returns:
            State for the next cycle.
        """
        listing = self._load(state.current_path)
        if listing is None:
            return state.browse(state.root_path)

        self._presenter.show_listing(listing)

        event = self._events.next_event()
        if event is None:
            return state

        result = transition(state, event, listing)
        for effect in result.effects:
            self._perform(effect)
        return result.state

    def _load(self, path: str) -> Listing | None:
        """Build the listing for ``path``; on failure report, pause, return None."""
        try:
            return self._builder.build(path)
        except DirectoryUnreadableError as e:
            logger.warning("Cannot read %s: %s", path, e.reason)
            delay = self._settings.fallback_delay_seconds
            self._presenter.show_error(
                f"Cannot read directory contents! {e}",
                f"Switching to a fallback path in {delay:g}s...",
            )
            self._sleep(delay)
            return None

    def _perform(self, effect: Effect) -> None:
        if isinstance(effect, Farewell):
            self._presenter.farewell()
            self._sleep(self._settings.farewell_pause_seconds)
        elif isinstance(effect, OpenPath):
            try:
                self._opener(effect.path, reveal=effect.reveal)
            except OpenPathError as e:
                logger.warning("Cannot open %s: %s", effect.path, e)
                pause = self._settings.error_pause_seconds
                self._presenter.show_error(
                    f"Cannot open the directory in the file manager: {e}",
                    f"{pause:g}s...",
                )
                self._sleep(pause)
