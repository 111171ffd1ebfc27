"""
Tests for the host collaborators: pointer input, rendering and ticks.
"""

import pytest

from shellgame.engine_core.state import Stage, Vec2
from shellgame.engine_core.action import OpenShell, SaveGuess
from shellgame.engine_core.reducer import apply_action
from shellgame.host import (
    CircleCommand,
    FrameRenderer,
    PointerInput,
    RectCommand,
    TextCommand,
    TextRenderer,
    TickSource,
    advance,
    hit_test,
    status_lines,
)


class TestHitTest:

    def test_hits_shell_box(self, fresh_state):
        assert hit_test(225, 125, fresh_state.shells) == 1
        assert hit_test(349, 149, fresh_state.shells) == 2

    def test_edges_are_outside(self, fresh_state):
        assert hit_test(200, 125, fresh_state.shells) is None
        assert hit_test(250, 125, fresh_state.shells) is None
        assert hit_test(225, 150, fresh_state.shells) is None

    def test_miss(self, fresh_state):
        assert hit_test(10, 10, fresh_state.shells) is None

    def test_first_match_in_id_order(self, fresh_state):
        shells = {
            3: fresh_state.shells[3].moved_to(Vec2(210, 100)),
            1: fresh_state.shells[1],
            2: fresh_state.shells[2],
        }
        assert hit_test(230, 125, shells) == 1


class TestPointerInput:

    def test_click_while_idle_starts(self, make_loop):
        loop = make_loop([("a", "b")])
        assert PointerInput(loop).click(0, 0)
        assert loop.state.stage == Stage.SHUFFLING

    def test_click_while_shuffling_is_ignored(self, make_loop):
        loop = make_loop([("a", "b")])
        pointer = PointerInput(loop)
        pointer.click(0, 0)

        assert not pointer.click(225, 125)
        assert loop.state.stage == Stage.SHUFFLING

    def test_click_on_shell_guesses(self, make_loop):
        loop = make_loop([("a", "b")])
        pointer = PointerInput(loop)
        pointer.click(0, 0)
        advance(loop, lambda s: s.stage == Stage.GUESSING)

        # Shell 2 was swapped into place a
        assert pointer.click(225, 125)
        assert loop.state.guess == 2
        assert loop.state.stage == Stage.SHOWING_RESULT

    def test_click_on_empty_space_while_guessing(self, make_loop):
        loop = make_loop([])
        pointer = PointerInput(loop)
        pointer.click(0, 0)

        assert not pointer.click(5, 5)
        assert loop.state.stage == Stage.GUESSING

    def test_click_on_result_resets(self, make_loop, fresh_state):
        loop = make_loop([])
        pointer = PointerInput(loop)
        pointer.click(0, 0)
        pointer.click(325, 125)

        assert pointer.click(0, 0)
        assert loop.state == fresh_state


class TestFrameRenderer:

    def test_idle_frame(self, fresh_state):
        frame = FrameRenderer().render(fresh_state)

        assert frame.stage == "idle"
        assert frame.outcome is None
        assert frame.status_lines == ["Click to start shuffling!"]
        assert [type(c) for c in frame.commands] == [
            TextCommand, CircleCommand, RectCommand, RectCommand, RectCommand,
        ]

    def test_ball_centred_on_ball_shell(self, fresh_state):
        frame = FrameRenderer().render(fresh_state)
        ball = frame.commands[1]

        assert (ball.x, ball.y, ball.radius) == (325, 125, 15)

    def test_open_shell_is_transparent(self, fresh_state):
        shells = {c.shell_id: c for c in FrameRenderer().render(fresh_state).shells}

        assert shells[2].fill == "rgba(54, 70, 236, 0)"
        assert shells[1].fill == "rgba(54, 70, 236, 1)"
        assert shells[1].stroke == "rgba(54, 70, 236, 1)"
        assert (shells[3].x, shells[3].y, shells[3].width) == (400, 100, 50)

    @pytest.mark.parametrize(
        "guess,message,outcome",
        [(2, "Awesome!", "win"), (1, "Maybe next time", "lose")],
    )
    def test_result_frame(self, fresh_state, guess, message, outcome):
        state = apply_action(fresh_state, SaveGuess(guess))
        state = apply_action(state, OpenShell(guess))
        state = state._copy_with(stage=Stage.SHOWING_RESULT)

        frame = FrameRenderer().render(state)

        assert frame.status_lines == [message, "Click to start again!"]
        assert frame.outcome == outcome
        assert frame.commands[1].y == 75

    def test_frame_serializes(self, fresh_state):
        data = FrameRenderer().render(fresh_state).model_dump()

        assert data["stage"] == "idle"
        assert [c["kind"] for c in data["commands"]] == ["text", "circle", "rect", "rect", "rect"]


class TestTextRenderer:

    def test_idle_track(self, fresh_state):
        renderer = TextRenderer()

        assert renderer.track(fresh_state) == "[ ]       (o)       [ ] "
        assert renderer.legend(fresh_state) == " a         b         c  "

    def test_render_includes_status(self, fresh_state):
        line = TextRenderer().render(fresh_state)
        assert line.endswith("Click to start shuffling!")

    @pytest.mark.parametrize("stage,text", [
        (Stage.SHUFFLING, "Shuffling..."),
        (Stage.GUESSING, "Click on the shell!"),
    ])
    def test_status_lines(self, fresh_state, stage, text):
        assert status_lines(fresh_state._copy_with(stage=stage)) == [text]


class TestTicks:

    def test_counter_increases(self):
        ticks = TickSource(start=5)
        assert [ticks.next(), ticks.next()] == [6, 7]

    def test_iterates(self):
        counter = iter(TickSource())
        assert [next(counter) for _ in range(3)] == [1, 2, 3]

    def test_advance_gives_up(self, make_loop):
        loop = make_loop([("a", "c")])
        loop.start()

        with pytest.raises(RuntimeError):
            advance(loop, lambda s: s.stage == Stage.GUESSING, max_ticks=5)
