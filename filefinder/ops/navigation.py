from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Callable, Sequence

from filefinder.ops.listing import DirectoryEntry, list_directory

_logger = logging.getLogger(__name__)

Lister = Callable[[Path], Sequence[DirectoryEntry]]


@dataclass(frozen=True)
class NavigationState:
    current: Path
    back: tuple[Path, ...] = ()
    forward: tuple[Path, ...] = ()

    @property
    def parent(self) -> Path | None:
        parent = self.current.parent
        return None if parent == self.current else parent

    @property
    def can_go_back(self) -> bool:
        return bool(self.back)

    @property
    def can_go_forward(self) -> bool:
        return bool(self.forward)

    @property
    def can_go_up(self) -> bool:
        return self.parent is not None


@dataclass(frozen=True)
class Listing:
    state: NavigationState
    entries: tuple[DirectoryEntry, ...]


class NavigationController:
    """Owns the cursor and the back/forward histories.

    Every operation lists the resulting directory before committing the new
    state, so a ``ListError`` leaves cursor and histories untouched.
    """

    def __init__(
        self,
        home: Path | str,
        lister: Lister = list_directory,
        history_limit: int = 0,
    ) -> None:
        self._home = _normalize(home)
        self._lister = lister
        self._history_limit = max(0, int(history_limit))
        self._state = NavigationState(current=self._home)

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def home_path(self) -> Path:
        return self._home

    def navigate_to(self, target: Path | str) -> Listing:
        target = _normalize(target)
        current = self._state.current
        if target == current:
            return self.refresh()
        next_state = NavigationState(
            current=target,
            back=self._push(self._state.back, current),
            forward=(),
        )
        return self._commit(next_state, "navigate")

    def back(self) -> Listing:
        if not self._state.back:
            return self.refresh()
        *rest, previous = self._state.back
        next_state = NavigationState(
            current=previous,
            back=tuple(rest),
            forward=self._push(self._state.forward, self._state.current),
        )
        return self._commit(next_state, "back")

    def forward(self) -> Listing:
        if not self._state.forward:
            return self.refresh()
        *rest, following = self._state.forward
        next_state = NavigationState(
            current=following,
            back=self._push(self._state.back, self._state.current),
            forward=tuple(rest),
        )
        return self._commit(next_state, "forward")

    def up(self) -> Listing:
        parent = self._state.parent
        if parent is None:
            return self.refresh()
        return self.navigate_to(parent)

    def home(self) -> Listing:
        return self.navigate_to(self._home)

    def refresh(self) -> Listing:
        return self._commit(self._state, "refresh")

    def _commit(self, next_state: NavigationState, action: str) -> Listing:
        entries = tuple(self._lister(next_state.current))
        if next_state != self._state:
            _logger.debug("%s: %s -> %s", action, self._state.current, next_state.current)
        self._state = next_state
        return Listing(state=next_state, entries=entries)

    def _push(self, stack: tuple[Path, ...], path: Path) -> tuple[Path, ...]:
        stack = stack + (path,)
        if self._history_limit and len(stack) > self._history_limit:
            stack = stack[-self._history_limit :]
        return stack


def _normalize(path: Path | str) -> Path:
    return Path(path).expanduser().resolve()
