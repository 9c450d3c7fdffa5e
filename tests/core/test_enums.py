"""Tests for geometry enums and the wall-legality states."""

from quoridie.core.enums import Axis, Color, Direction, WallLegality


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"


class TestDirection:
    def test_offsets(self) -> None:
        assert Direction.LEFT.offset((4, 4)) == (3, 4)
        assert Direction.RIGHT.offset((4, 4)) == (5, 4)
        assert Direction.UP.offset((4, 4)) == (4, 3)
        assert Direction.DOWN.offset((4, 4)) == (4, 5)

    def test_offset_may_leave_board(self) -> None:
        assert Direction.UP.offset((0, 0)) == (0, -1)

    def test_parallel(self) -> None:
        assert Direction.UP.are_parallel(Direction.DOWN)
        assert Direction.UP.are_parallel(Direction.UP)
        assert Direction.LEFT.are_parallel(Direction.RIGHT)
        assert not Direction.LEFT.are_parallel(Direction.UP)

    def test_perpendiculars(self) -> None:
        assert set(Direction.UP.perpendiculars) == {Direction.LEFT, Direction.RIGHT}
        assert set(Direction.RIGHT.perpendiculars) == {Direction.UP, Direction.DOWN}
        for d in Direction:
            assert all(not d.are_parallel(p) for p in d.perpendiculars)

    def test_opposite(self) -> None:
        for d in Direction:
            assert d.opposite.offset(d.offset((4, 4))) == (4, 4)


class TestWallLegality:
    def test_any_allows_both(self) -> None:
        assert WallLegality.ANY.allows(Axis.HORIZONTAL)
        assert WallLegality.ANY.allows(Axis.VERTICAL)

    def test_none_allows_nothing(self) -> None:
        assert not WallLegality.NONE.allows(Axis.HORIZONTAL)
        assert not WallLegality.NONE.allows(Axis.VERTICAL)

    def test_restrict_from_any(self) -> None:
        assert WallLegality.ANY.restrict(Axis.HORIZONTAL) == WallLegality.VERTICAL_ONLY
        assert WallLegality.ANY.restrict(Axis.VERTICAL) == WallLegality.HORIZONTAL_ONLY

    def test_restrict_is_idempotent(self) -> None:
        once = WallLegality.ANY.restrict(Axis.HORIZONTAL)
        assert once.restrict(Axis.HORIZONTAL) == once

    def test_restrict_both_axes_gives_none(self) -> None:
        a = WallLegality.ANY.restrict(Axis.HORIZONTAL).restrict(Axis.VERTICAL)
        b = WallLegality.ANY.restrict(Axis.VERTICAL).restrict(Axis.HORIZONTAL)
        assert a == b == WallLegality.NONE

    def test_none_stays_none(self) -> None:
        assert WallLegality.NONE.restrict(Axis.VERTICAL) == WallLegality.NONE
