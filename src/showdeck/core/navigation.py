"""Navigation state machine — current slide, successor and back-history."""

import logging
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

logger = logging.getLogger("ShowDeck.core.navigation")


class Action(str, Enum):
    ADVANCE = "advance"
    RETREAT = "retreat"


ADVANCE_KEYS = {"ArrowRight", "Space", "Enter", "l", "n"}
RETREAT_KEYS = {"ArrowLeft", "Backspace", "h", "p"}


class KeyEvent(BaseModel):
    """A logical key press or release with the modifier keys held at the time."""
    model_config = {"frozen": True}

    key: str
    pressed: bool = True
    modifiers: frozenset[str] = Field(default_factory=frozenset)


def classify(event: KeyEvent) -> Optional[Action]:
    """Map a key event to a navigation action; any held modifier suppresses it."""
    if event.modifiers:
        return None
    if event.key in ADVANCE_KEYS:
        return Action.ADVANCE
    if event.key in RETREAT_KEYS:
        return Action.RETREAT
    return None


class NavigationState(BaseModel):
    """(current, next, history) owned by the viewer's control loop.

    ``next`` is written after each materialization of ``current`` and is only
    meaningful once the current slide has been materialized.
    """
    current: str
    next: str = ""
    history: list[str] = Field(default_factory=list)

    def advance(self) -> bool:
        """Move to ``next``. Returns False (no-op) on a terminal slide."""
        if not self.next:
            return False
        previous = self.current
        self.history.append(previous)
        self.current = self.next
        logger.debug(f"Advanced {previous} -> {self.current}")
        return True

    def retreat(self) -> bool:
        """Return to the most recent history entry. No-op when history is empty."""
        if not self.history:
            return False
        previous = self.current
        self.current = self.history.pop()
        logger.debug(f"Retreated {previous} -> {self.current}")
        return True

    def apply(self, action: Action) -> bool:
        if action == Action.ADVANCE:
            return self.advance()
        return self.retreat()

    def handle_key(self, event: KeyEvent) -> bool:
        """Feed one key event. Returns True when the event is consumed.

        Navigation keys are consumed on both press and release, and even when
        they cause no transition. Transitions only fire on press.
        """
        action = classify(event)
        if action is None:
            return False
        if event.pressed:
            self.apply(action)
        return True
