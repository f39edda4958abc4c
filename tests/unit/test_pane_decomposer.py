"""Tests for PaneDecomposer.

Tests cover:
- Undivided openings and single full-length dividers
- Partial-span dividers and the greedy merge beneath them
- Pane id stability when extra all-frame grid lines appear
- Full coverage of the opening by panes and divider footprints
- Ignored dividers, clamping and degenerate openings
- Coordinate tolerance from LayoutSettings
"""

from __future__ import annotations

import logging

import pytest

from joinery.domain import (
    Divider,
    DividerFootprint,
    LayoutSettings,
    MemberThickness,
    Orientation,
    Pane,
    PaneDecomposer,
    Point2D,
    Rect,
    decompose,
)

THICK_100 = MemberThickness(mullion_thickness=100, transom_thickness=100)


def _mullion(offset: float, **kwargs) -> Divider:
    return Divider(kwargs.pop("id", "m1"), Orientation.VERTICAL, offset, **kwargs)


def _transom(offset: float, **kwargs) -> Divider:
    return Divider(kwargs.pop("id", "t1"), Orientation.HORIZONTAL, offset, **kwargs)


def _union_area(rects: list[Rect]) -> float:
    """Area covered by any of the rectangles, counting overlaps once."""
    xs = sorted({v for r in rects for v in (r.x, r.right)})
    ys = sorted({v for r in rects for v in (r.y, r.bottom)})
    total = 0.0
    for x0, x1 in zip(xs, xs[1:]):
        for y0, y1 in zip(ys, ys[1:]):
            cx, cy = (x0 + x1) / 2, (y0 + y1) / 2
            if any(r.x < cx < r.right and r.y < cy < r.bottom for r in rects):
                total += (x1 - x0) * (y1 - y0)
    return total


@pytest.fixture
def decomposer() -> PaneDecomposer:
    """Decomposer with default (exact) settings."""
    return PaneDecomposer()


class TestUndividedOpening:
    """Tests for openings without dividers."""

    def test_single_pane_fills_opening(self, decomposer: PaneDecomposer) -> None:
        """No dividers gives one pane covering the whole opening."""
        panes = decomposer.decompose(1000, 800, [], THICK_100)

        assert panes == [Pane("0-0", 0, 0, 1000, 800)]

    @pytest.mark.parametrize("width,height", [(0, 1000), (1000, 0), (-10, 500)])
    def test_empty_opening_gives_no_panes(
        self, decomposer: PaneDecomposer, width: float, height: float
    ) -> None:
        """A non-positive opening yields an empty list instead of raising."""
        assert decomposer.decompose(width, height, [_mullion(10)], THICK_100) == []

    def test_module_function_matches_class(self) -> None:
        """decompose() is a thin wrapper around PaneDecomposer."""
        dividers = [_mullion(500)]

        assert decompose(1000, 1000, dividers, THICK_100) == PaneDecomposer().decompose(
            1000, 1000, dividers, THICK_100
        )


class TestFullLengthDividers:
    """Tests for mullions and transoms spanning the whole opening."""

    def test_single_mullion_splits_in_two(self, decomposer: PaneDecomposer) -> None:
        """A 100 mm mullion at 500 leaves two 450 mm panes."""
        panes = decomposer.decompose(
            1000, 1000, [_mullion(500, thickness=100)], THICK_100
        )

        assert panes == [
            Pane("0-0", 0, 0, 450, 1000),
            Pane("0-1", 550, 0, 450, 1000),
        ]

    def test_mullion_with_default_thickness(self, decomposer: PaneDecomposer) -> None:
        """An 80 mm default mullion at 600 in a 1200 opening."""
        panes = decomposer.decompose(
            1200, 1200, [_mullion(600)], MemberThickness(80, 80)
        )

        assert [p.id for p in panes] == ["0-0", "0-1"]
        assert panes[0] == Pane("0-0", 0, 0, 560, 1200)
        assert panes[1] == Pane("0-1", 640, 0, 560, 1200)

    def test_cross_gives_row_major_grid(self, decomposer: PaneDecomposer) -> None:
        """A mullion and a transom crossing give four panes in row-major order."""
        panes = decomposer.decompose(
            1000, 1000, [_mullion(500), _transom(500)], THICK_100
        )

        assert [p.id for p in panes] == ["0-0", "0-1", "1-0", "1-1"]
        assert panes[3] == Pane("1-1", 550, 550, 450, 450)

    def test_divider_order_does_not_matter(self, decomposer: PaneDecomposer) -> None:
        """Dividers may be given in any order."""
        a = decomposer.decompose(
            1000, 1000, [_mullion(300, id="m1"), _mullion(700, id="m2")], THICK_100
        )
        b = decomposer.decompose(
            1000, 1000, [_mullion(700, id="m2"), _mullion(300, id="m1")], THICK_100
        )

        assert a == b

    def test_thickness_override_per_divider(self, decomposer: PaneDecomposer) -> None:
        """A divider's own thickness overrides the default."""
        panes = decomposer.decompose(
            1000, 1000, [_mullion(500, thickness=40)], THICK_100
        )

        assert panes[0].width == 480
        assert panes[1].x == 520

    def test_zero_thickness_divider_splits_without_gap(self) -> None:
        """With zero default thickness the panes meet at the divider line."""
        panes = decompose(1000, 1000, [_mullion(400)], MemberThickness(0, 0))

        assert panes == [
            Pane("0-0", 0, 0, 400, 1000),
            Pane("0-1", 400, 0, 600, 1000),
        ]


class TestPartialSpanDividers:
    """Tests for dividers that stop short of the opening edge."""

    def test_area_beneath_partial_mullion_is_fused(
        self, decomposer: PaneDecomposer
    ) -> None:
        """Below a transom the partial mullion no longer splits the glass."""
        dividers = [
            _transom(500, thickness=100),
            _mullion(500, thickness=100, span_end=450),
        ]

        panes = decomposer.decompose(1000, 1000, dividers, THICK_100)

        assert panes == [
            Pane("0-0", 0, 0, 450, 450),
            Pane("0-2", 550, 0, 450, 450),
            Pane("1-0", 0, 550, 1000, 450),
        ]
        above = [p for p in panes if p.y == 0]
        below = [p for p in panes if p.y > 0]
        assert len(below) < len(above)
        assert below[0].width > max(p.width for p in above)

    def test_lone_partial_mullion(self, decomposer: PaneDecomposer) -> None:
        """A mullion stopping mid-height leaves glass beneath its end."""
        panes = decomposer.decompose(
            1000, 1000, [_mullion(500, span_start=0, span_end=500)], THICK_100
        )

        assert panes == [
            Pane("0-0", 0, 0, 450, 1000),
            Pane("0-2", 550, 0, 450, 1000),
            Pane("1-1", 450, 500, 100, 500),
        ]

    def test_span_clamped_to_opening(self, decomposer: PaneDecomposer) -> None:
        """A span running past the opening behaves like a full-length divider."""
        clamped = decomposer.decompose(
            1000, 1000, [_mullion(500, span_start=0, span_end=5000)], THICK_100
        )
        full = decomposer.decompose(1000, 1000, [_mullion(500)], THICK_100)

        assert clamped == full


class TestPaneIdStability:
    """Pane ids count only rows and columns that hold glass."""

    def test_extra_frame_rows_do_not_shift_ids(self, decomposer: PaneDecomposer) -> None:
        """A second transom adjoining the first leaves the same pane ids."""
        one = decomposer.decompose(1000, 1000, [_transom(500)], THICK_100)
        two = decomposer.decompose(
            1000, 1000, [_transom(500), _transom(600, id="t2")], THICK_100
        )

        assert [p.id for p in one] == ["0-0", "1-0"]
        assert [p.id for p in two] == ["0-0", "1-0"]

    def test_partial_divider_inside_transom_band(
        self, decomposer: PaneDecomposer
    ) -> None:
        """A short mullion hidden in a transom adds grid lines but changes nothing."""
        base = decomposer.decompose(1000, 1000, [_transom(500)], THICK_100)
        with_hidden = decomposer.decompose(
            1000,
            1000,
            [_transom(500), _mullion(500, span_start=460, span_end=540)],
            THICK_100,
        )

        assert with_hidden == base


class TestCoverage:
    """Panes and divider footprints tile the opening exactly."""

    @pytest.mark.parametrize(
        "dividers",
        [
            [],
            [_mullion(500)],
            [_mullion(500), _transom(500)],
            [_transom(500), _mullion(500, span_end=450)],
            [_mullion(300, id="m1"), _mullion(700, id="m2", span_start=200), _transom(400)],
            [_mullion(20)],
        ],
    )
    def test_panes_plus_footprints_cover_opening(
        self, decomposer: PaneDecomposer, dividers: list[Divider]
    ) -> None:
        """Glass area plus the union of divider area equals the opening area."""
        footprints, panes = decomposer.decompose_with_footprints(
            1000, 1000, dividers, THICK_100
        )

        glass = sum(p.area for p in panes)
        frame = _union_area([fp.rect for fp in footprints])
        assert glass + frame == pytest.approx(1000 * 1000)

        for i, a in enumerate(panes):
            for b in panes[i + 1 :]:
                assert not a.rect.overlaps(b.rect)
            for fp in footprints:
                assert not a.rect.overlaps(fp.rect)

    def test_fully_covered_opening_gives_no_panes(
        self, decomposer: PaneDecomposer
    ) -> None:
        """A divider wider than the opening leaves no glass."""
        panes = decomposer.decompose(100, 1000, [_mullion(50, thickness=500)], THICK_100)

        assert panes == []


class TestFootprints:
    """Tests for divider footprints."""

    def test_footprint_band_clamped_to_opening(self, decomposer: PaneDecomposer) -> None:
        """A thick divider near the edge is clipped to the opening."""
        footprints = decomposer.footprints(1000, 800, [_mullion(20)], THICK_100)

        assert footprints == [
            DividerFootprint("m1", Orientation.VERTICAL, Rect(0, 0, 70, 800))
        ]

    def test_transom_footprint(self, decomposer: PaneDecomposer) -> None:
        """Transom footprints run along x with their span."""
        footprints = decomposer.footprints(
            1000, 800, [_transom(400, span_start=100, span_end=600)], THICK_100
        )

        assert footprints[0].rect == Rect(100, 350, 500, 100)

    @pytest.mark.parametrize("offset", [1000, 1500, 0.0])
    def test_offset_outside_opening_ignored(
        self,
        decomposer: PaneDecomposer,
        caplog: pytest.LogCaptureFixture,
        offset: float,
    ) -> None:
        """Dividers whose centreline is not inside the opening are skipped."""
        with caplog.at_level(logging.WARNING, logger="joinery"):
            footprints, panes = decomposer.decompose_with_footprints(
                1000, 1000, [_mullion(offset)], THICK_100
            )

        assert footprints == []
        assert panes == [Pane("0-0", 0, 0, 1000, 1000)]
        assert "Ignoring divider 'm1'" in caplog.text

    def test_empty_span_ignored(
        self, decomposer: PaneDecomposer, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A span that is empty after clamping is skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="joinery"):
            footprints = decomposer.footprints(
                1000, 1000, [_mullion(500, span_start=1200, span_end=1500)], THICK_100
            )

        assert footprints == []
        assert "is empty" in caplog.text

    def test_zero_thickness_footprint_covers_no_glass(self) -> None:
        """The thickness band is exclusive, so a zero-width band covers nothing."""
        fp = DividerFootprint("m1", Orientation.VERTICAL, Rect(500, 0, 0, 1000))

        assert not fp.covers(Point2D(500, 500))


class TestCoordinateTolerance:
    """Tests for LayoutSettings.coordinate_tolerance."""

    dividers = [
        _mullion(500, id="m1", thickness=100),
        _mullion(650.2, id="m2", thickness=200),
    ]

    def test_exact_dedup_keeps_sliver(self) -> None:
        """Without tolerance a 0.2 mm gap between dividers becomes a pane."""
        panes = PaneDecomposer().decompose(1000, 1000, self.dividers, THICK_100)

        assert [p.id for p in panes] == ["0-0", "0-1", "0-2"]
        assert panes[1].width == pytest.approx(0.2)

    def test_tolerance_merges_close_cut_lines(self) -> None:
        """With a tolerance the sliver disappears."""
        decomposer = PaneDecomposer(LayoutSettings(coordinate_tolerance=0.5))

        panes = decomposer.decompose(1000, 1000, self.dividers, THICK_100)

        assert [p.id for p in panes] == ["0-0", "0-1"]
        assert panes[1].x == pytest.approx(750.2)
        assert panes[1].width == pytest.approx(249.8)
