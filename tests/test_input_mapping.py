import pytest

from audio_maze import narration
from audio_maze.engine import SessionState
from audio_maze.input import GameController, InputAction, InputMapper
from audio_maze.maze import ItemKind, Point
from audio_maze.narration import Narrator


def test_default_mapping_movement():
    mapper = InputMapper.default()

    assert mapper.translate_key("UP") == InputAction.MOVE_NORTH
    assert mapper.translate_key("ArrowUp") == InputAction.MOVE_NORTH
    assert mapper.translate_key("n") == InputAction.MOVE_NORTH
    assert mapper.translate_key("south") == InputAction.MOVE_SOUTH
    assert mapper.translate_key("ArrowDown") == InputAction.MOVE_SOUTH
    assert mapper.translate_key("RIGHT") == InputAction.MOVE_EAST
    assert mapper.translate_key("e") == InputAction.MOVE_EAST
    assert mapper.translate_key("ArrowLeft") == InputAction.MOVE_WEST
    assert mapper.translate_key("W") == InputAction.MOVE_WEST


def test_default_mapping_queries_and_session():
    mapper = InputMapper.default()

    assert mapper.translate_key("i") == InputAction.INVENTORY
    assert mapper.translate_key("H") == InputAction.HEALTH
    assert mapper.translate_key("l") == InputAction.LOCATION
    assert mapper.translate_key("r") == InputAction.REPEAT
    assert mapper.translate_key("LEFT_CLICK") == InputAction.START
    assert mapper.translate_key("return") == InputAction.START
    assert mapper.translate_key("RIGHT_CLICK") == InputAction.STOP
    assert mapper.translate_key("esc") == InputAction.STOP
    assert mapper.translate_key("quit") == InputAction.QUIT


def test_unknown_and_invalid_keys():
    mapper = InputMapper.default()
    assert mapper.translate_key("F13") is None
    assert mapper.translate_key("   ") is None
    assert mapper.translate_key(None) is None
    assert mapper.on_key_event("F13") is None


def test_on_key_event_helper():
    event = InputMapper.default().on_key_event("up", source="console")
    assert event.action == InputAction.MOVE_NORTH
    assert event.source == "console"


def test_rebinding_changes_behavior():
    mapper = InputMapper.default()
    mapper.bind("K", InputAction.MOVE_NORTH)
    assert mapper.translate_key("k") == InputAction.MOVE_NORTH

    mapper.unbind("UP")
    assert mapper.translate_key("UP") is None
    assert mapper.translate_key("ArrowUp") is None

    mapper.bind("", InputAction.QUIT)
    assert mapper.translate_key("") is None


class TestController:
    @pytest.fixture
    def setup(self, make_engine):
        spoken = []
        engine = make_engine({Point(2, 1): ItemKind.SWORD}, start=False)
        narrator = Narrator(speak=spoken.append)
        narrator.attach(engine)
        return GameController(engine, narrator), engine, spoken

    def test_queries_need_a_running_game(self, setup):
        controller, engine, spoken = setup
        assert controller.handle(InputAction.MOVE_EAST) is True
        assert spoken[-1] == narration.NOT_PLAYING
        assert engine.state is SessionState.MENU

    def test_start_move_and_query(self, setup):
        controller, engine, spoken = setup
        controller.handle(InputAction.START)
        assert engine.state is SessionState.PLAYING

        controller.handle(InputAction.MOVE_EAST)
        assert engine.position == Point(2, 1)

        controller.handle(InputAction.INVENTORY)
        assert spoken[-1] == "Your inventory contains: sword."
        controller.handle(InputAction.HEALTH)
        assert spoken[-1] == "Your current health is 100 out of 100."
        controller.handle(InputAction.LOCATION)
        assert spoken[-1] == "You are at position 2, 1 in the maze."

        controller.handle(InputAction.REPEAT)
        assert spoken[-1] == spoken[-2]

    def test_start_ignored_while_playing_and_stop(self, setup):
        controller, engine, spoken = setup
        controller.handle(InputAction.START)
        controller.handle(InputAction.MOVE_EAST)

        controller.handle(InputAction.START)
        assert engine.position == Point(2, 1)

        controller.handle(InputAction.STOP)
        assert engine.state is SessionState.MENU
        assert spoken[-1] == narration.GAME_STOP

    def test_quit(self, setup):
        controller, _, _ = setup
        assert controller.handle(InputAction.QUIT) is False
