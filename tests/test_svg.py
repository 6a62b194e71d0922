"""Tests for parcel/svg.py: viewport transform."""
import pytest
from parcel.geometry import dist
from parcel.svg import Viewport, bounding_box, make_svg_transform, W, H, PAD_X, PAD_Y


def test_canvas_constants():
    assert (W, H) == (640, 400)
    assert (PAD_X, PAD_Y) == (80, 40)


def test_bounding_box():
    assert bounding_box([(1, 5), (-2, 3), (4, -1)]) == (-2, -1, 4, 5)


class TestMakeSvgTransform:
    def test_wide_box_limited_by_width(self):
        vp = make_svg_transform([(0, 0), (200, 0), (200, 10), (0, 10)])
        assert vp.scale == pytest.approx((W - 2*PAD_X) / 200)

    def test_tall_box_limited_by_height(self):
        vp = make_svg_transform([(0, 0), (10, 0), (10, 200), (0, 200)])
        assert vp.scale == pytest.approx((H - 2*PAD_Y) / 200)

    def test_box_centre_maps_to_canvas_centre(self):
        vp = make_svg_transform([(10, 20), (110, 20), (110, 70), (10, 70)])
        assert vp.to_svg((60, 45)) == pytest.approx((W/2, H/2))

    def test_y_axis_flipped(self):
        vp = make_svg_transform([(0, 0), (100, 0), (100, 100), (0, 100)])
        _, y_low = vp.to_svg((0, 0))
        _, y_high = vp.to_svg((0, 100))
        assert y_high < y_low

    def test_flat_box_uses_default_extent(self):
        vp = make_svg_transform([(0, 0), (100, 0)])
        assert vp.scale == pytest.approx(min((W - 2*PAD_X) / 100, (H - 2*PAD_Y) / 100))

    def test_custom_canvas(self):
        vp = make_svg_transform([(0, 0), (10, 10)], width=100, height=100, pad_x=0, pad_y=0)
        assert vp.scale == pytest.approx(10)
        assert vp.to_svg((0, 0)) == pytest.approx((0, 100))
        assert vp.to_svg((10, 10)) == pytest.approx((100, 0))

    def test_apply_matches_to_svg(self):
        vp = Viewport(2.0, 0.0, 0.0, 10.0, 10.0)
        assert vp.apply([(1, 1), (0, 0)]) == (vp.to_svg((1, 1)), vp.to_svg((0, 0)))
        assert vp.to_svg((1, 1)) == (12.0, 8.0)


class TestUniformScale:
    """The same scale applies to every segment of a transformed parcel."""

    def test_edges_scale_uniformly(self, quad):
        verts = [quad.p0, quad.p1, quad.p2, quad.p3]
        vp = make_svg_transform(verts)
        out = vp.apply(verts)
        for i in range(4):
            j = (i + 1) % 4
            assert dist(out[i], out[j]) == pytest.approx(vp.scale * dist(verts[i], verts[j]))

    def test_cut_lines_scale_uniformly(self, quad, local_lines):
        vp = make_svg_transform([quad.p0, quad.p1, quad.p2, quad.p3])
        for ln in local_lines:
            s, e = vp.to_svg(ln.start), vp.to_svg(ln.end)
            assert dist(s, e) == pytest.approx(vp.scale * dist(ln.start, ln.end))
