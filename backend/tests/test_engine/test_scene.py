"""Tests for scene composition and geometry validation."""

from __future__ import annotations

import pytest

from chordwheel.engine.layout import build
from chordwheel.engine.paths import arc_path, ribbon_path
from chordwheel.engine.scene import PathKind, SceneOptions, ScenePath, arc_stroke_width, compose_scene
from chordwheel.engine.sentiment import SentimentBand
from chordwheel.svg.parser import path_polygon
from chordwheel.engine.validation import validate_scene
from tests.conftest import CLOCK_WORDS, JOY_WORDS, POLARIZED_WORDS


def test_ribbons_come_before_arcs():
    layout = build(9, CLOCK_WORDS)
    paths = compose_scene(layout)
    kinds = [p.kind for p in paths]
    n_ribbons = len(layout.ribbons)
    assert kinds[:n_ribbons] == [PathKind.RIBBON] * n_ribbons
    assert kinds[n_ribbons:] == [PathKind.ARC] * len(layout.arcs)


def test_ribbon_uses_neighbouring_arc_edges():
    layout = build(3, POLARIZED_WORDS)
    opts = SceneOptions(size=400)
    paths = compose_scene(layout, opts)
    first = paths[0]
    r = layout.ribbons[0]
    expected = ribbon_path(72.0, 168.0, layout.arcs[r.i].end_angle, layout.arcs[r.j].start_angle)
    assert first.d == expected
    assert first.nodes == (0, 1)
    assert first.band is SentimentBand.NEUTRAL


def test_arc_paths_and_colors():
    layout = build(2, JOY_WORDS)
    paths = compose_scene(layout, SceneOptions(size=200, outer_radius=90.0))
    arcs = [p for p in paths if p.kind is PathKind.ARC]
    assert arcs[0].d == arc_path(90.0, layout.arcs[0].start_angle, layout.arcs[0].end_angle)
    assert arcs[0].band is SentimentBand.POSITIVE
    assert arcs[1].band is SentimentBand.NEUTRAL
    assert arcs[0].stroke_width > arcs[1].stroke_width


def test_ribbon_opacity_from_overlap():
    layout = build(3, POLARIZED_WORDS)
    paths = compose_scene(layout)
    strongest = paths[0]
    # (0, 1) carries max_flow, so overlap = 1 and opacity saturates
    assert strongest.opacity == pytest.approx(0.55)
    for p in paths[1:len(layout.ribbons)]:
        assert 0.35 <= p.opacity < 0.55


def test_default_radii_scale_with_size():
    opts = SceneOptions(size=1000)
    assert opts.r_inner == pytest.approx(180.0)
    assert opts.r_outer == pytest.approx(420.0)


@pytest.mark.parametrize(
    "weight, expected",
    [(0.3, 3.08), (7.5, 5.0), (15.0, 7.0), (40.0, 7.0)],
)
def test_arc_stroke_width(weight, expected):
    assert arc_stroke_width(weight) == pytest.approx(expected)


def test_to_dict_is_json_ready():
    layout = build(2, JOY_WORDS)
    data = compose_scene(layout)[0].to_dict()
    assert data["kind"] == "ribbon"
    assert data["band"] == "positive"
    assert data["nodes"] == [0, 1]


@pytest.mark.parametrize("n", [1, 2, 4, 9])
def test_validate_composed_scene(n):
    layout = build(n, CLOCK_WORDS)
    opts = SceneOptions()
    report = validate_scene(compose_scene(layout, opts), outer_radius=opts.r_outer)
    assert report["valid"], report["issues"]
    assert report["path_count"] == len(layout.ribbons) + n


def test_validate_flags_arc_drawn_before_ribbon():
    layout = build(3, POLARIZED_WORDS)
    paths = compose_scene(layout)
    reordered = paths[-1:] + paths[:-1]
    report = validate_scene(reordered)
    assert not report["valid"]
    assert any("after an arc" in issue for issue in report["issues"])


@pytest.mark.parametrize("angle", [0.0, 1.3, 4.9])
def test_sliver_ribbon_is_simple(angle):
    # Adjacent arcs one pad apart: a short outer arc next to long radial lines
    d = ribbon_path(72.0, 168.0, angle, angle + 0.015)
    poly = path_polygon(d)
    assert poly is not None
    assert poly.is_valid
    assert poly.area > 0


def _arc_scene_path(d: str) -> ScenePath:
    return ScenePath(
        kind=PathKind.ARC,
        d=d,
        band=SentimentBand.NEUTRAL,
        fill="#000000",
        gradient_id="chord-neutral",
        nodes=(0,),
    )


def test_zero_length_arc_is_degenerate_not_an_issue():
    report = validate_scene([_arc_scene_path(arc_path(3.0, 1.0, 1.0))])
    assert report["valid"]
    assert report["degenerate"] == ["arc[0]"]


def test_unreadable_path_is_reported():
    report = validate_scene([_arc_scene_path("M 0 0 Q garbage")])
    assert not report["valid"]
    assert report["degenerate"] == []
    assert any("unreadable" in issue for issue in report["issues"])
