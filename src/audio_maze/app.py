from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, TextIO

from .config import GameConfig
from .engine.game_engine import GameEngine
from .engine.state import SessionState
from .input.controller import GameController
from .input.mapping import InputMapper
from .maze.grid import Point
from .narration import WELCOME, Narrator

logger = logging.getLogger(__name__)

PROMPT = "> "


def render_map(engine: GameEngine) -> str:
    """Glyph dump of the live maze: '@' player, item glyphs, '#' walls, '.' paths."""
    grid = engine.grid
    if grid is None:
        return ""
    overlay: Dict[Point, str] = {p: kind.glyph for p, kind in engine.items.items()}
    if engine.position is not None:
        overlay[engine.position] = "@"
    return "\n".join(grid.to_str_lines(overlay))


def run_console(
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    show_map: bool = False,
    mapper: Optional[InputMapper] = None,
) -> int:
    """Play in a line-based console loop.

    Each whitespace-separated word on a line is translated through the input
    mapper (``start``, ``n``/``s``/``e``/``w``, arrow names, ``i``, ``h``,
    ``l``, ``r``, ``stop``, ``quit``). Narration is printed to ``stdout``.

    Returns:
        Process exit code (0 on success, 130 on Ctrl+C).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    mapper = mapper or InputMapper.default()

    def speak(text: str) -> None:
        print(text, file=stdout)

    engine = GameEngine(config=config, seed=seed)
    narrator = Narrator(speak=speak)
    narrator.attach(engine)
    controller = GameController(engine, narrator, config=config)

    narrator.say(WELCOME)
    try:
        for line in stdin:
            for word in line.split():
                action = mapper.translate_key(word)
                if action is None:
                    speak(f"Unknown command: {word}")
                    continue
                if not controller.handle(action):
                    logger.info("Console session ended by player")
                    return 0
                if show_map and engine.state is SessionState.PLAYING:
                    speak(render_map(engine))
    except KeyboardInterrupt:
        speak("Interrupted by user")
        return 130
    return 0
