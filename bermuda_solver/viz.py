"""
Visualization utilities for the Bermuda Triangle board.
"""

import math

from .board import Arrangement, Placement, Position
from .pieces import DOT_COLORS, EMPTY_COLOR, PIECE_COLOR


def format_arrangement(arrangement: Arrangement) -> str:
    """
    One line per row, `piece.rotation` per cell and '.' for open cells,
    indented so the rows form a triangle.
    """
    width = len(arrangement.rows[-1])
    lines = []
    for cells in arrangement.rows:
        pad = " " * 5 * ((width - len(cells)) // 2)
        shown = [f"{str(p) if p else '.':>5}" for p in cells]
        lines.append(f"{pad}{''.join(shown)}".rstrip())
    return "\n".join(lines)


def display_arrangement(arrangement: Arrangement) -> None:
    """Display the arrangement in a simple triangle format."""
    print(format_arrangement(arrangement))


def cell_vertices(pos: Position, scale: float, apex_x: float) -> list[tuple[float, float]]:
    """Pixel corners of a cell, clockwise from the leftmost corner.

    △: bottom-left, apex, bottom-right. ▽: top-left, top-right, bottom.
    """
    h = scale * math.sqrt(3) / 2
    top = pos.row * h
    bottom = top + h
    row_left = apex_x - (pos.row + 1) * scale / 2
    if pos.points_up:
        x = row_left + (pos.col // 2) * scale
        return [(x, bottom), (x + scale / 2, top), (x + scale, bottom)]
    x = row_left + (pos.col // 2) * scale + scale / 2
    return [(x, top), (x + scale, top), (x + scale / 2, bottom)]


def edge_midpoints(pos: Position, verts: list[tuple[float, float]]) -> list[tuple[float, float]]:
    """Midpoints of the cell's edges, in edge-position order (0, 1, 2)."""
    def mid(a, b):
        return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)

    v0, v1, v2 = verts
    if pos.points_up:
        # left, right, bottom
        return [mid(v0, v1), mid(v1, v2), mid(v2, v0)]
    # left, top, right
    return [mid(v2, v0), mid(v0, v1), mid(v1, v2)]


def render_svg(arrangement: Arrangement, filename: str = "solution.svg") -> str:
    """
    Render arrangement to SVG file with a colored dot on each piece edge.
    Returns the filename.
    """
    scale = 80  # pixels per triangle side
    margin = 20
    h = scale * math.sqrt(3) / 2
    rows = len(arrangement.rows)

    width = margin * 2 + rows * scale
    height = margin * 2 + rows * h
    apex_x = margin + rows * scale / 2

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.0f}" height="{height:.0f}">',
        f'<rect width="100%" height="100%" fill="{EMPTY_COLOR}"/>',
        f'<g transform="translate(0,{margin})">',
    ]

    for pos, placement in arrangement.cells():
        verts = cell_vertices(pos, scale, apex_x)
        points_str = " ".join(f"{px:.1f},{py:.1f}" for px, py in verts)
        color = PIECE_COLOR if placement else EMPTY_COLOR
        svg_parts.append(
            f'<polygon points="{points_str}" fill="{color}" stroke="#000" stroke-width="1"/>'
        )
        if placement:
            svg_parts.extend(_piece_marks(pos, placement, verts))

    svg_parts.append('</g>')
    svg_parts.append('</svg>')
    svg_content = "\n".join(svg_parts)

    with open(filename, "w", encoding="utf-8") as f:
        f.write(svg_content)

    return filename


def _piece_marks(pos: Position, placement: Placement, verts) -> list[str]:
    """Edge dots pulled toward the centroid, plus the piece label."""
    cx = sum(v[0] for v in verts) / 3
    cy = sum(v[1] for v in verts) / 3
    marks = []
    for edge, (mx, my) in enumerate(edge_midpoints(pos, verts)):
        dx = cx + (mx - cx) * 0.7
        dy = cy + (my - cy) * 0.7
        dot = placement.edge(edge)
        marks.append(
            f'<circle cx="{dx:.1f}" cy="{dy:.1f}" r="5" '
            f'fill="{DOT_COLORS[dot]}" stroke="#000" stroke-width="0.5"/>'
        )
    marks.append(
        f'<text x="{cx:.1f}" y="{cy:.1f}" text-anchor="middle" '
        f'dominant-baseline="middle" font-size="10" fill="#333">{placement}</text>'
    )
    return marks
