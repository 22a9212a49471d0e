"""Tests for the headless editor session."""

import json

import pytest

from bezier_gap.editor import DEFAULT_CURVE, EditorMode, EditorSession
from bezier_gap.errors import DegenerateCurveError, InvalidSampleCount, MalformedCurveDescription
from bezier_gap.types import GapRow, PointId, PointSlot, PointState, SampleRow

UPPER = [{"pt": [0, 100]}, {"cp1": [0, 100], "cp2": [600, 100], "pt": [600, 100]}]
LOWER = [{"pt": [0, 200]}, {"cp1": [0, 200], "cp2": [600, 200], "pt": [600, 200]}]

MIDDLE = PointId(1, PointSlot.PT)


@pytest.fixture
def session() -> EditorSession:
    return EditorSession()


class TestLoad:
    def test_defaults(self, session: EditorSession) -> None:
        assert session.mode == EditorMode.SINGLE
        assert session.to_description() == DEFAULT_CURVE
        assert session.sample_count == 8
        assert len(session.coords) == 8
        assert all(isinstance(row, SampleRow) for row in session.coords)

    def test_pair(self, session: EditorSession) -> None:
        session.load({"curve1": UPPER, "curve2": LOWER})
        assert session.mode == EditorMode.PAIR
        assert len(session.paths) == 2
        assert all(isinstance(row, GapRow) for row in session.coords)

    def test_stringified_round_trip(self, session: EditorSession) -> None:
        session.load(json.dumps({"curve1": UPPER, "curve2": LOWER}))
        text = session.to_description(stringify=True)
        assert json.loads(text) == {"curve1": UPPER, "curve2": LOWER}

    def test_bad_json_keeps_session(self, session: EditorSession) -> None:
        with pytest.raises(MalformedCurveDescription):
            session.load("[{")
        assert session.mode == EditorMode.SINGLE
        assert session.to_description() == DEFAULT_CURVE

    def test_degenerate_pair_keeps_session(self, session: EditorSession) -> None:
        coords = session.coords
        with pytest.raises(DegenerateCurveError):
            session.load({"curve1": UPPER, "curve2": UPPER})
        assert session.mode == EditorMode.SINGLE
        assert session.coords is coords

    def test_load_clears_pointer_state(self, session: EditorSession) -> None:
        session.pointer_move(340, 290)
        session.pointer_down()
        session.load(DEFAULT_CURVE)
        assert session.hover is None
        assert not session.down


class TestSampleCount:
    def test_set_sample_count(self, session: EditorSession) -> None:
        session.set_sample_count(4)
        assert session.sample_count == 4
        assert len(session.coords) == 4

    def test_invalid_keeps_previous(self, session: EditorSession) -> None:
        with pytest.raises(InvalidSampleCount):
            session.set_sample_count(1)
        assert session.sample_count == 8
        assert len(session.coords) == 8


class TestPointer:
    def test_hover(self, session: EditorSession) -> None:
        session.pointer_move(340, 290)
        assert session.hover == (0, MIDDLE)
        assert session.point(0, MIDDLE).state == PointState.HOVER

    def test_hover_moves_off(self, session: EditorSession) -> None:
        session.pointer_move(340, 290)
        session.pointer_move(200, 200)
        assert session.hover is None
        assert session.point(0, MIDDLE).state == PointState.BASE

    def test_down_without_hover(self, session: EditorSession) -> None:
        assert session.pointer_down() is False
        assert not session.down

    def test_drag(self, session: EditorSession) -> None:
        received = []
        session.add_listener(received.append)

        session.pointer_move(340, 290)
        assert session.pointer_down() is True
        assert session.point(0, MIDDLE).state == PointState.ACTIVE

        session.pointer_move(350, 285)
        assert session.point(0, MIDDLE).to_pair() == (310.0, 245.0)
        assert session.point(0, PointId(1, PointSlot.CP2)).to_pair() == (110.0, 245.0)
        assert session.point(0, PointId(2, PointSlot.CP1)).to_pair() == (510.0, 245.0)
        assert len(received) == 1
        assert received[0] is session.coords

        session.pointer_up()
        assert not session.down
        assert session.point(0, MIDDLE).state == PointState.HOVER

    def test_removed_listener_not_called(self, session: EditorSession) -> None:
        received = []
        session.add_listener(received.append)
        session.remove_listener(received.append)
        session.refresh()
        assert received == []


class TestMovePoint:
    def test_clamped_to_frame(self, session: EditorSession) -> None:
        session.move_point(0, MIDDLE, -50, 700)
        assert session.point(0, MIDDLE).to_pair() == (0.0, 500.0)

    def test_head_pinned_to_left_edge(self, session: EditorSession) -> None:
        session.move_point(0, PointId(0, PointSlot.PT), 100, 30)
        assert session.point(0, PointId(0, PointSlot.PT)).to_pair() == (0.0, 30.0)
        assert session.point(0, PointId(1, PointSlot.CP1)).to_pair() == (100.0, 30.0)

    def test_tail_pinned_to_right_edge(self, session: EditorSession) -> None:
        session.move_point(0, PointId(2, PointSlot.PT), 300, 480)
        assert session.point(0, PointId(2, PointSlot.PT)).to_pair() == (600.0, 480.0)

    def test_unpinned(self) -> None:
        session = EditorSession(pin_endpoints=False)
        session.move_point(0, PointId(0, PointSlot.PT), 100, 30)
        assert session.point(0, PointId(0, PointSlot.PT)).to_pair() == (100.0, 30.0)

    def test_resamples(self, session: EditorSession) -> None:
        before = session.coords_json()
        session.move_point(0, MIDDLE, 200, 400)
        assert session.coords_json() != before

    def test_second_curve_of_pair(self, session: EditorSession) -> None:
        session.load({"curve1": UPPER, "curve2": LOWER})
        gap_before = session.coords[0].gap
        session.move_point(1, PointId(0, PointSlot.PT), 0, 300)
        assert session.coords[0].gap == 200
        assert gap_before == 100


class TestFailedMove:
    # Same start as UPPER, ends 50 lower; dragging its end anchor up makes the pair identical
    LEANING = [{"pt": [0, 100]}, {"cp1": [0, 100], "cp2": [600, 150], "pt": [600, 150]}]

    @pytest.fixture
    def pair_session(self) -> EditorSession:
        return EditorSession({"curve1": UPPER, "curve2": self.LEANING})

    def test_degenerate_move_is_rolled_back(self, pair_session: EditorSession) -> None:
        before = pair_session.to_description()
        coords = pair_session.coords
        received = []
        pair_session.add_listener(received.append)

        with pytest.raises(DegenerateCurveError):
            pair_session.move_point(1, PointId(1, PointSlot.PT), 600, 100)

        assert pair_session.to_description() == before
        assert pair_session.coords is coords
        assert received == []

    def test_session_still_editable_after_rollback(self, pair_session: EditorSession) -> None:
        with pytest.raises(DegenerateCurveError):
            pair_session.move_point(1, PointId(1, PointSlot.PT), 600, 100)

        pair_session.move_point(1, PointId(1, PointSlot.PT), 600, 200)
        assert pair_session.point(1, PointId(1, PointSlot.CP2)).to_pair() == (600.0, 200.0)
        assert pair_session.coords[-1].gap == 100
