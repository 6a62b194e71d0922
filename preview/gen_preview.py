"""Render a parcel preview SVG from four side lengths and optional cut results.

Usage:
    python preview/gen_preview.py --left 220 --right 170 --bottom 180 --top 200 \\
        --results results.json --measure-from right -o preview.svg
"""
import os, sys, argparse, logging

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _root not in sys.path:
    sys.path.insert(0, _root)

from parcel.types import EdgeLengths, Scene
from parcel.lengths import lengths_from_raw, is_complete, is_usable
from parcel.scene import build_scene
from parcel.results import load_results, ResultsError
from parcel.geometry import poly_area
from parcel.constants import MEASURE_FROM
from preview.labels import ShapeLabels, DEFAULT_LABELS, label_for, parse_labels, fmt_num, escape
from preview.view import ViewContext
from preview.constants import (
    FONT,
    OUTLINE_STROKE, OUTLINE_FILL, PLACEHOLDER_STROKE, PLACEHOLDER_FILL, OUTLINE_WIDTH,
    CUT_STROKE, CUT_WIDTH, CUT_DASH, HOVER_FILL,
    PART_LABEL_SIZE, PART_LABEL_COLOR, PART_SIDE_DX, PART_EDGE_DY,
    SIDE_LABEL_SIZE, SIDE_LABEL_COLOR,
    BASE_LABEL_DY, TOP_LABEL_DY, LEFT_LABEL_DX, RIGHT_LABEL_DX,
    EDIT_BASE_DY, EDIT_TOP_DY, EDIT_LEFT_DX, EDIT_RIGHT_DX,
    EDIT_BOX_W, EDIT_BOX_H, EDIT_STROKE,
    TOOLTIP_W, TOOLTIP_H, TOOLTIP_FILL, TOOLTIP_AREA_COLOR, TOOLTIP_TEXT_COLOR,
    PLACEHOLDER_TEXT, PLACEHOLDER_TEXT_COLOR,
)

# ============================================================
# Text helpers
# ============================================================
def _text(out: list, x: float, y: float, text: str, size: float, color: str,
          anchor: str = "middle", bold: bool = True, baseline: str | None = None):
    weight = ' font-weight="bold"' if bold else ""
    base = f' dominant-baseline="{baseline}"' if baseline else ""
    out.append(f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{anchor}"{base}'
               f' font-family="{FONT}" font-size="{size}"{weight}'
               f' fill="{color}">{escape(text)}</text>')

# ============================================================
# Layers
# ============================================================
def render_outline(out: list, scene: Scene, active: bool):
    stroke, fill = (OUTLINE_STROKE, OUTLINE_FILL) if active else (PLACEHOLDER_STROKE, PLACEHOLDER_FILL)
    out.append(f'<path d="{scene.path}" fill="{fill}" stroke="{stroke}"'
               f' stroke-width="{OUTLINE_WIDTH}" stroke-linecap="round" stroke-linejoin="round"/>')


def render_cut_lines(out: list, scene: Scene):
    for ln in scene.cut_lines:
        (x1, y1), (x2, y2) = ln
        out.append(f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}"'
                   f' stroke="{CUT_STROKE}" stroke-width="{CUT_WIDTH}" stroke-dasharray="{CUT_DASH}"/>')


def render_partitions(out: list, scene: Scene, view: ViewContext):
    """Partition polygons, their side lengths, and the hovered partition's area."""
    for idx, poly in enumerate(scene.partition_polygons):
        part = poly.partition
        fill = HOVER_FILL if view.hovered == idx else "transparent"
        out.append(f'<g class="partition" data-index="{idx}">')
        out.append(f'<polygon points="{poly.points}" fill="{fill}" stroke="none"/>')
        # Partition i's right side is partition i+1's left side: label it once
        if idx == 0:
            _text(out, poly.mid_left[0] - PART_SIDE_DX, poly.mid_left[1], fmt_num(part.left_side),
                  PART_LABEL_SIZE, PART_LABEL_COLOR, anchor="end", baseline="middle")
        _text(out, poly.mid_right[0] + PART_SIDE_DX, poly.mid_right[1], fmt_num(part.right_side),
              PART_LABEL_SIZE, PART_LABEL_COLOR, anchor="start", baseline="middle")
        _text(out, poly.mid_bottom[0], poly.mid_bottom[1] + PART_EDGE_DY, fmt_num(part.bottom_side),
              PART_LABEL_SIZE, PART_LABEL_COLOR, baseline="middle")
        _text(out, poly.mid_top[0], poly.mid_top[1] - PART_EDGE_DY, fmt_num(part.top_side),
              PART_LABEL_SIZE, PART_LABEL_COLOR, baseline="middle")
        if view.hovered == idx:
            render_area_tooltip(out, poly.center, part.area.sq_ft, part.area.guntha)
        out.append('</g>')


def render_area_tooltip(out: list, center, sq_ft: float, guntha: float):
    cx, cy = center
    out.append(f'<rect x="{cx - TOOLTIP_W/2:.1f}" y="{cy - TOOLTIP_H/2:.1f}"'
               f' width="{TOOLTIP_W}" height="{TOOLTIP_H}" rx="6" fill="{TOOLTIP_FILL}"/>')
    _text(out, cx, cy - 3, f"Area: {fmt_num(sq_ft)} sq ft", 10, TOOLTIP_AREA_COLOR)
    _text(out, cx, cy + 10, f"{fmt_num(guntha)} Guntha", 9, TOOLTIP_TEXT_COLOR, bold=False)


def _side_anchors(scene: Scene, editing: bool) -> dict:
    """Canvas position of each outer side's label (or edit box centre)."""
    tl, tr, br, bl = scene.outline
    if editing:
        base_dy, top_dy, left_dx, right_dx = EDIT_BASE_DY, EDIT_TOP_DY, EDIT_LEFT_DX, EDIT_RIGHT_DX
    else:
        base_dy, top_dy, left_dx, right_dx = BASE_LABEL_DY, TOP_LABEL_DY, LEFT_LABEL_DX, RIGHT_LABEL_DX
    return {
        "bottom": ((bl[0] + br[0])/2, bl[1] + base_dy),
        "top": ((tl[0] + tr[0])/2, tl[1] + top_dy),
        "left": (tl[0] + left_dx, (tl[1] + bl[1])/2),
        "right": (tr[0] + right_dx, (tr[1] + br[1])/2),
    }


def render_side_labels(out: list, scene: Scene, lengths: EdgeLengths,
                       labels: ShapeLabels, editing: bool):
    """Outer "Name: value" labels, or one dimension box per side while editing."""
    for side, (x, y) in _side_anchors(scene, editing).items():
        value = getattr(lengths, side)
        name = label_for(labels, side)
        if not editing:
            _text(out, x, y, f"{name}: {fmt_num(value)}", SIDE_LABEL_SIZE, SIDE_LABEL_COLOR)
            continue
        shown = fmt_num(value) if is_usable(value) else ""
        out.append(f'<g class="dimension-input" data-side="{side}">')
        out.append(f'<rect x="{x - EDIT_BOX_W/2:.1f}" y="{y - EDIT_BOX_H/2:.1f}"'
                   f' width="{EDIT_BOX_W}" height="{EDIT_BOX_H}" rx="3" fill="white"'
                   f' stroke="{EDIT_STROKE}"/>')
        _text(out, x, y, shown, SIDE_LABEL_SIZE, SIDE_LABEL_COLOR, baseline="middle")
        _text(out, x, y + EDIT_BOX_H, name, PART_LABEL_SIZE, SIDE_LABEL_COLOR)
        out.append('</g>')

# ============================================================
# Page
# ============================================================
def render_preview_svg(scene: Scene, lengths: EdgeLengths, view: ViewContext | None = None,
                       labels: ShapeLabels = DEFAULT_LABELS) -> str:
    """Render the complete preview SVG. Returns SVG string."""
    view = view or ViewContext()
    active = is_complete(lengths) or view.editing

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{scene.width:g}"'
               f' height="{scene.height:g}" viewBox="{scene.viewbox}">')
    render_outline(out, scene, active)
    render_cut_lines(out, scene)
    render_partitions(out, scene, view)
    if active:
        render_side_labels(out, scene, lengths, labels, view.editing)
    else:
        _text(out, scene.width/2, scene.height/2, PLACEHOLDER_TEXT, 14,
              PLACEHOLDER_TEXT_COLOR, bold=False, baseline="middle")
    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================
def parse_args(argv=None):
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--left", default="", help="left side length (a)")
    ap.add_argument("--right", default="", help="right side length (b)")
    ap.add_argument("--bottom", default="", help="bottom base length (L)")
    ap.add_argument("--top", default="", help="top slant length (l)")
    ap.add_argument("--measure-from", choices=MEASURE_FROM, default="left")
    ap.add_argument("--results", help="JSON response from the cut calculation service")
    ap.add_argument("--edit", action="store_true", help="render dimension edit boxes")
    ap.add_argument("--hover", type=int, help="partition index to show the area tooltip for")
    ap.add_argument("--labels", type=parse_labels, default=DEFAULT_LABELS,
                    help='side names as "left,right,base,top"')
    ap.add_argument("-o", "--output", default="preview.svg")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    lengths = lengths_from_raw(args.left, args.right, args.bottom, args.top)
    cuts, partitions = (), ()
    if args.results:
        try:
            results = load_results(args.results)
        except ResultsError as e:
            print(f"Bad results file {args.results}: {e}", file=sys.stderr)
            return 1
        cuts, partitions = results.cuts, results.partitions
        print(f"Total area: {fmt_num(results.total_area.sq_ft)} sq ft"
              f" ({fmt_num(results.total_area.guntha)} Guntha)")

    view = ViewContext(editing=args.edit, hovered=args.hover)
    scene = build_scene(lengths, args.measure_from, cuts, partitions, editing=view.editing)
    svg_content = render_preview_svg(scene, lengths, view, args.labels)
    with open(args.output, "w") as f:
        f.write(svg_content)

    print(f"Preview written to {args.output}")
    if not is_complete(lengths) and not view.editing:
        print("Incomplete dimensions: placeholder shape")
        return 0
    print(f"Valid shape: {scene.is_valid}")
    print(f"Diagonal:    {scene.diagonal:.4f}")
    print(f"Scale:       {scene.scale:.4f} px/unit")
    for poly in scene.partition_polygons:
        p = poly.partition
        drawn = poly_area(poly.vertices)/scene.scale**2
        print(f"  #{p.partition_index:<3d} {fmt_num(p.area.sq_ft):>10s} sq ft"
              f"  drawn {drawn:10.1f}"
              f"  centre ({poly.center[0]:7.1f}, {poly.center[1]:7.1f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
