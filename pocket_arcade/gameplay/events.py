"""
Events and state publishing shared by every engine.
NO UI DEPENDENCIES.

Engines never push pixels. After each mutation that changed something they
hand a fresh immutable snapshot to whoever subscribed, and the real-time
engine also returns a list of GameEvent objects from tick() so the UI can
react (sounds, flashes) without diffing snapshots.
"""
from dataclasses import dataclass
from typing import Any, Callable, List

Listener = Callable[[Any], None]


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class ObstacleDestroyedEvent(GameEvent):
    """A projectile hit an obstacle."""
    obstacle_id: int
    projectile_id: int
    points: int


@dataclass
class LifeLostEvent(GameEvent):
    """An obstacle reached the bottom of the field."""
    obstacle_id: int
    lives_left: int


@dataclass
class MatchEndedEvent(GameEvent):
    """The shooter match reached a terminal state."""
    won: bool
    reason: str
    final_score: int


class StatePublisher:
    """
    Minimal observer list.

    Subclasses implement snapshot() and call _publish() after every
    mutation that actually changed state.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for snapshots.
        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> Any:
        raise NotImplementedError

    def _publish(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        # Copy so a listener may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(snap)
