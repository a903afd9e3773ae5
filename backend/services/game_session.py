"""
Game session: binds an engine to a tick timer and an input queue.

Direction inputs may arrive from any thread; they are only queued here and
applied by the tick callback, so the engine has a single owner.
"""

import logging
import queue
from typing import Callable, List, Optional

from game_engine import GameEngine
from domain.game_state import GameState
from mechanics import validate_direction
from services.tick_scheduler import TickScheduler


logger = logging.getLogger(__name__)

Observer = Callable[[GameState], None]


class GameSession:
    """
    Drives a GameEngine from a TickScheduler.

    Each tick:
      1) drain queued direction inputs into the engine
      2) advance the engine one tick
      3) reconfigure the timer if the tick interval changed
      4) stop the timer once the game is over
      5) notify observers with the new snapshot
    """

    def __init__(self, engine: GameEngine, scheduler: Optional[TickScheduler] = None):
        self.engine = engine
        self.scheduler = scheduler or TickScheduler(self.step, engine.tick_interval_ms)
        self._inputs: "queue.Queue[str]" = queue.Queue()
        self._observers: List[Observer] = []

    @property
    def state(self) -> GameState:
        return self.engine.state

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def submit(self, direction: str) -> None:
        """Queue a direction input; applied before the next tick."""
        validate_direction(direction)
        self._inputs.put(direction)

    def start(self) -> None:
        self.engine.flush_deferred_placement()
        self.scheduler.reconfigure(self.engine.tick_interval_ms)
        self.scheduler.start()
        self._notify(self.engine.state)

    def stop(self) -> None:
        self.scheduler.stop()

    def run(self, should_continue: Callable[[], bool] = lambda: True) -> None:
        """Start the timer and block until the game ends or `should_continue` says stop."""
        self.start()
        self.scheduler.run(should_continue)

    def _drain_inputs(self) -> None:
        while True:
            try:
                direction = self._inputs.get_nowait()
            except queue.Empty:
                return
            self.engine.submit_direction(direction)

    def step(self) -> GameState:
        """One tick cycle; this is the timer callback."""
        self._drain_inputs()

        previous_interval = self.engine.tick_interval_ms
        state = self.engine.tick()

        if state.tick_interval_ms != previous_interval:
            self.scheduler.reconfigure(state.tick_interval_ms)

        # Stop first: an observer may call reset(), which restarts the timer.
        if state.game_over:
            self.scheduler.stop()

        self._notify(state)
        return state

    def reset(self) -> GameState:
        """
        Start a new game after a game over (the 'play again' trigger).

        Ignored while the game is still running.
        """
        if not self.engine.game_over:
            logger.debug("Reset requested while running; ignored")
            return self.engine.state

        # Inputs queued against the finished game are discarded.
        try:
            while True:
                self._inputs.get_nowait()
        except queue.Empty:
            pass

        self.engine.reset()
        state = self.engine.flush_deferred_placement()
        self.scheduler.reconfigure(state.tick_interval_ms)
        self.scheduler.start()
        self._notify(state)
        return state

    def _notify(self, state: GameState) -> None:
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("Observer %r failed", observer)
