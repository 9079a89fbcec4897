import io

import pytest

from clickpath.actor import Actor, DrawableActor
from clickpath.core import Color, CursorType, Key
from clickpath.engine import Engine, KeyState, main
from clickpath.level import Level
from clickpath.vector2 import Vector2


@pytest.fixture
def engine():
    return Engine()


def _rows(engine):
    return engine.frame_text().split("\n")


def test_get_returns_latest_engine(engine):
    assert Engine.get() is engine
    other = Engine()
    assert Engine.get() is other


def test_default_screen_size(engine):
    assert engine.screen_size() == Vector2(40, 25)


def test_frame_matches_screen_size(engine):
    rows = _rows(engine)
    assert len(rows) == engine.screen_size().y
    assert all(len(row) == engine.screen_size().x for row in rows)


def test_render_clears_previous_frame(engine):
    engine.draw(Vector2(0, 0), "abc")
    engine.render()
    engine.render()
    assert engine.frame_text().strip() == ""


def test_draw_outside_screen_is_ignored(engine):
    engine.draw(Vector2(0, 100), "zz")
    engine.render()
    assert engine.frame_text().strip() == ""


def test_key_down_and_up_sequence(engine):
    engine.feed_key(Key.SPACE, True)
    assert engine.get_key(Key.SPACE)
    assert engine.get_key_down(Key.SPACE)
    engine.save_previous_key_states()
    assert engine.get_key(Key.SPACE)
    assert not engine.get_key_down(Key.SPACE)
    engine.feed_key(Key.SPACE, False)
    assert engine.get_key_up(Key.SPACE)
    engine.save_previous_key_states()
    assert not engine.get_key_up(Key.SPACE)


def test_key_out_of_range_raises(engine):
    with pytest.raises(IndexError):
        engine.get_key(255)
    with pytest.raises(IndexError):
        engine.feed_key(-1, True)


def test_feed_mouse_sets_position_and_buttons(engine):
    engine.feed_mouse(7, 9, True, False)
    assert engine.mouse_position() == Vector2(7, 9)
    assert engine.get_key_down(Key.LBUTTON)
    assert not engine.get_key(Key.RBUTTON)
    engine.feed_mouse(7, 9, False, True)
    assert engine.get_key(Key.RBUTTON)
    assert not engine.get_key(Key.LBUTTON)


def test_key_state_defaults():
    state = KeyState()
    assert (state.is_key_down, state.was_key_down) == (False, False)


def test_add_actor_without_level_is_ignored(engine):
    engine.add_actor(Actor())
    assert engine.main_level is None


def test_add_actor_with_level(engine):
    level = Level()
    engine.load_level(level)
    actor = Actor()
    engine.add_actor(actor)
    level.process_added_and_destroyed_actors()
    assert level.actors == [actor]


def test_destroy_actor_without_level_does_nothing(engine):
    actor = Actor()
    engine.destroy_actor(actor)
    assert actor.is_active()


def test_destroy_actor_with_level(engine):
    engine.load_level(Level())
    actor = Actor()
    engine.destroy_actor(actor)
    assert not actor.is_active()


def test_render_draws_level_actors(engine):
    level = Level()
    engine.load_level(level)
    actor = DrawableActor("@", Color.RED)
    actor.set_position(Vector2(5, 4))
    level.add_actor(actor)
    level.process_added_and_destroyed_actors()
    engine.render()
    assert _rows(engine)[4][5] == "@"


def test_invalid_frame_rate_raises(engine):
    with pytest.raises(ValueError):
        engine.set_target_frame_rate(0)


def test_quit_game_sets_flag(engine):
    assert not engine.should_quit
    engine.quit_game()
    assert engine.should_quit


def test_run_stops_after_quit():
    calls = []

    def source(engine):
        calls.append(engine)
        if len(calls) == 3:
            engine.quit_game()

    output = io.StringIO()
    engine = Engine(Vector2(5, 2), output=output, input_source=source)
    engine.set_target_frame_rate(1000)
    engine.run()
    assert len(calls) == 3
    assert all(item is engine for item in calls)
    assert output.getvalue().count("\x1b[H") == 4


def test_run_processes_level_actor_changes():
    level = Level()
    actor = Actor()

    def source(engine):
        if actor in level.actors:
            engine.quit_game()

    engine = Engine(Vector2(5, 2), input_source=source)
    engine.set_target_frame_rate(1000)
    engine.load_level(level)
    engine.add_actor(actor)
    engine.run()
    assert level.actors == [actor]


def test_cursor_type_shown_on_present():
    output = io.StringIO()
    engine = Engine(Vector2(3, 1), output=output)
    assert "\x1b[?25l" in output.getvalue()
    engine.set_cursor_type(CursorType.SOLID_CURSOR)
    engine.render()
    assert output.getvalue().endswith("\x1b[0m")
    assert "\x1b[?25h" in output.getvalue()


def test_main_runs_limited_frames(capsys):
    assert main(["--fps", "1000", "--frames", "2"]) == 0
    assert "\x1b[H" in capsys.readouterr().out