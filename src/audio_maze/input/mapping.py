from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .actions import InputAction, InputEvent

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical keys/words to logical actions.

    Keys are strings normalized internally (case-insensitive), so any backend
    can translate its own key constants to canonical names before lookup.

    Example usage:
        mapper = InputMapper.default()
        action = mapper.translate_key("ArrowUp")   # -> InputAction.MOVE_NORTH
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: Optional[str]) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    # ---------- Binding API ----------
    def bind(self, key: str, action: InputAction) -> None:
        """Bind a single key to an action."""
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str, canonical_name: str) -> None:
        """Register an alias from a backend-specific key name to a canonical one.

        Example: set_alias("ArrowUp", "UP").
        """
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    # ---------- Translation ----------
    def translate_key(self, key: str) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    def on_key_event(self, key: str, source: str = "keyboard") -> Optional[InputEvent]:
        """Produce an InputEvent for a key press, or None if the key is unbound."""
        action = self.translate_key(key)
        if action is None:
            return None
        return InputEvent(action=action, source=source)

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "InputMapper":
        """Arrow keys and compass words move; I/H/L/R query; clicks start and stop."""
        mapper = cls()

        mapper.bind_many(["UP", "N", "NORTH"], InputAction.MOVE_NORTH)
        mapper.bind_many(["DOWN", "S", "SOUTH"], InputAction.MOVE_SOUTH)
        mapper.bind_many(["RIGHT", "E", "EAST"], InputAction.MOVE_EAST)
        mapper.bind_many(["LEFT", "W", "WEST"], InputAction.MOVE_WEST)
        for arrow in ("UP", "DOWN", "LEFT", "RIGHT"):
            mapper.set_alias(f"ARROW{arrow}", arrow)

        mapper.bind_many(["I", "INVENTORY"], InputAction.INVENTORY)
        mapper.bind_many(["H", "HEALTH"], InputAction.HEALTH)
        mapper.bind_many(["L", "LOCATION"], InputAction.LOCATION)
        mapper.bind_many(["R", "REPEAT"], InputAction.REPEAT)

        mapper.bind_many(["START", "ENTER", "LEFT_CLICK"], InputAction.START)
        mapper.set_alias("RETURN", "ENTER")
        mapper.bind_many(["STOP", "ESCAPE", "RIGHT_CLICK"], InputAction.STOP)
        mapper.set_alias("ESC", "ESCAPE")
        mapper.bind_many(["Q", "QUIT", "EXIT"], InputAction.QUIT)

        return mapper


__all__ = ["InputMapper"]
