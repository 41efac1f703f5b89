from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, fields
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

ENV_PREFIX = "AUDIO_MAZE_"

# Option names used by the browser version of the game.
_ALIASES: Dict[str, str] = {
    "mazeSize": "maze_size",
    "startHealth": "start_health",
    "playerStartHealth": "start_health",
    "monsterDamage": "monster_damage",
    "potionHealing": "potion_healing",
    "shieldProtection": "shield_protection",
    "swordBypassesCombat": "sword_bypasses_combat",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    """
    Session configuration with the classic defaults.

    - maze_size: odd int >= 5. Even values are rounded up to the next odd size
      by ``validated()`` (the default of 12 plays on a 13x13 grid).
    - start_health: starting and maximum health, > 0.
    - monster_damage / potion_healing / shield_protection: ints >= 0.
    - sword_bypasses_combat: holding the sword defeats monsters at no cost.
    """

    maze_size: int = 12
    start_health: int = 100
    monster_damage: int = 25
    potion_healing: int = 40
    shield_protection: int = 15
    sword_bypasses_combat: bool = True

    @property
    def max_health(self) -> int:
        return self.start_health

    def validated(self) -> "GameConfig":
        """Return a normalised copy or raise InvalidConfiguration."""
        size = _require_int("maze_size", self.maze_size)
        if size < 5:
            raise InvalidConfiguration(f"maze_size must be >= 5, got {size}")
        if size % 2 == 0:
            logger.warning("maze_size %d is even; rounding up to %d", size, size + 1)
            size += 1

        start_health = _require_int("start_health", self.start_health)
        if start_health <= 0:
            raise InvalidConfiguration(f"start_health must be > 0, got {start_health}")
        for name in ("monster_damage", "potion_healing", "shield_protection"):
            value = _require_int(name, getattr(self, name))
            if value < 0:
                raise InvalidConfiguration(f"{name} must be >= 0, got {value}")
        if not isinstance(self.sword_bypasses_combat, bool):
            raise InvalidConfiguration(
                f"sword_bypasses_combat must be a bool, got {self.sword_bypasses_combat!r}"
            )
        return dataclasses.replace(self, maze_size=size)

    # ---- Loading ---------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional["GameConfig"] = None) -> "GameConfig":
        """Overlay ``data`` onto ``base`` (defaults when omitted).

        camelCase option names are accepted; unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfiguration(f"Unknown configuration option: {key!r}")
            values[name] = value
        return dataclasses.replace(base or cls(), **values)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GameConfig":
        """Load the packaged defaults, then overlay an optional YAML file."""
        with resources.files("audio_maze.data").joinpath("default_config.yaml").open("r", encoding="utf-8") as f:
            default_data = yaml.safe_load(f) or {}
        cfg = cls.from_dict(default_data)

        if path is not None:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {path}")
            try:
                with path.open("r", encoding="utf-8") as f:
                    user_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise InvalidConfiguration(f"Malformed config file {path}: {e}") from e
            if not isinstance(user_data, dict):
                raise InvalidConfiguration(f"Config file {path} must contain a mapping")
            cfg = cls.from_dict(user_data, base=cfg)
            logger.info("Loaded game config from %s", path)
        return cfg

    @classmethod
    def from_env(cls, base: Optional["GameConfig"] = None, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Overlay AUDIO_MAZE_<OPTION> environment variables onto ``base``."""
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _parse_env_value(f.name, raw, f.type)
            logger.debug("Config %s overridden from environment: %r", f.name, values[f.name])
        return dataclasses.replace(base or cls(), **values)

    # ---- Export ----------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved game config to %s", path)


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    return value


def _parse_env_value(name: str, raw: str, annotation: Any) -> Any:
    text = raw.strip()
    if annotation in (bool, "bool"):
        if text.lower() in _TRUTHY:
            return True
        if text.lower() in _FALSY:
            return False
        raise InvalidConfiguration(f"{ENV_PREFIX}{name.upper()} must be a boolean, got {raw!r}")
    try:
        return int(text)
    except ValueError:
        raise InvalidConfiguration(f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}") from None
