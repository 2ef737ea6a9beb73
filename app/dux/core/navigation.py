"""Navigation state machine.

The explorer is either browsing a directory or exiting. Each event
consumed by the control loop is fed, together with the current state and
the most recently rendered listing, to :func:`transition`, which returns
the next state plus the side effects the engine must perform. The
function itself never touches the filesystem or the terminal.
"""

import os
import re
from dataclasses import dataclass, field, replace
from enum import Enum

from dux.core.events import CommandEvent, Event, InputClosedEvent, SignalEvent
from dux.fs.listing import Listing

QUIT_COMMANDS: frozenset[str] = frozenset({"q", "\\q", "quit", "exit", "bye", "bye!"})
OPEN_COMMANDS: frozenset[str] = frozenset({"open", "finder"})
REVEAL_COMMAND = "reveal"
REFRESH_COMMAND = "."
PARENT_COMMAND = ".."

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Phase(str, Enum):
    """Navigation phase.

    Attributes:
        BROWSING: A directory is listed and commands are accepted.
        EXITING: Terminal phase; the loop stops.
    """

    BROWSING = "browsing"
    EXITING = "exiting"


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Current position of the explorer.

    Attributes:
        root_path: Top of the navigable tree; fixed for the session.
        current_path: Directory being browsed.
        phase: Browsing or exiting.
    """

    root_path: str
    current_path: str
    phase: Phase = Phase.BROWSING

    @property
    def is_exiting(self) -> bool:
        """Check if the explorer should stop."""
        return self.phase == Phase.EXITING

    def browse(self, path: str) -> "NavigationState":
        """Return a browsing state for ``path``."""
        return replace(self, current_path=path, phase=Phase.BROWSING)

    def exit(self) -> "NavigationState":
        """Return the terminal state."""
        return replace(self, phase=Phase.EXITING)


@dataclass(frozen=True, slots=True)
class OpenPath:
    """Side effect: open (or reveal) a path in the desktop file manager."""

    path: str
    reveal: bool = False


@dataclass(frozen=True, slots=True)
class Farewell:
    """Side effect: say goodbye before exiting."""


Effect = OpenPath | Farewell


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of applying one event to a state."""

    state: NavigationState
    effects: tuple[Effect, ...] = field(default=())


def parse_index(command: str) -> int | None:
    """Parse a selection number.

    Accepts an optional sign followed by ASCII digits; anything else
    (including surrounding whitespace) is not a number.

    Args:
        command: Raw command line.

    Returns:
        The integer, or None if ``command`` is not an integer string.
    """
    if not _INTEGER_RE.fullmatch(command):
        return None
    return int(command)


def parent_of(path: str) -> str:
    """Return the parent directory of ``path``."""
    return os.path.dirname(path.rstrip(os.sep)) or os.sep


def apply_command(state: NavigationState, command: str, listing: Listing | None) -> Transition:
    """Apply one interactive command to a browsing state.

    Matching is exact and case-sensitive. Unknown commands, and numbers
    that do not match a directory row of ``listing``, leave the state
    unchanged (the loop then refreshes the current directory).

    Args:
        state: Current state.
        command: Command line with the trailing newline removed.
        listing: Listing most recently shown to the user.

    Returns:
        The resulting transition.
    """
    if command in QUIT_COMMANDS:
        return Transition(state.exit(), (Farewell(),))

    if command in OPEN_COMMANDS:
        return Transition(state, (OpenPath(state.current_path),))

    if command == REVEAL_COMMAND:
        return Transition(state, (OpenPath(state.current_path, reveal=True),))

    if command == REFRESH_COMMAND:
        return Transition(state)

    if command == PARENT_COMMAND:
        if state.current_path == state.root_path:
            return Transition(state)
        return Transition(state.browse(parent_of(state.current_path)))

    index = parse_index(command)
    if index is None or listing is None:
        return Transition(state)

    entry = listing.directory_for_index(index)
    if entry is None:
        return Transition(state)
    return Transition(state.browse(os.path.join(state.current_path, entry.name)))


def transition(state: NavigationState, event: Event, listing: Listing | None) -> Transition:
    """Apply one event to the navigation state.

    Args:
        state: Current state.
        event: The event consumed this cycle.
        listing: Listing most recently shown to the user.

    Returns:
        The next state and the side effects to perform.
    """
    if state.is_exiting:
        return Transition(state)

    if isinstance(event, (SignalEvent, InputClosedEvent)):
        return Transition(state.exit(), (Farewell(),))
    if isinstance(event, CommandEvent):
        return apply_command(state, event.text, listing)

    return Transition(state)
