"""
Serialize a Scene into an animated SVG document.

Layout of the document:
  - background rect + faint radial vignette
  - one stroke-only closed path per orbit
  - the Sun (filled disc + faint ring) at the origin
  - one glow-filtered circle per planet, its cx/cy driven by two
    linear <animate> elements looping over config.dur_seconds

All coordinates and keyframe values are written with one decimal.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List
from xml.sax.saxutils import escape, quoteattr

from orrery.core.frames import Vector2
from orrery.simulation.scene import BodyTrack, Scene

BACKGROUND = "#05070d"
SUN_COLOR = "#ffd257"
ORBIT_OPACITY = 0.45
ORBIT_STROKE_WIDTH = 1.0
SUN_RADIUS = 7.0
SUN_RING_RADIUS = 12.0


def slug(name: str) -> str:
    """Lower-case id fragment: runs of anything but [a-z0-9_-] become one hyphen."""
    s = re.sub(r"[^a-z0-9_-]+", "-", name.lower()).strip("-")
    return s or "body"


def _num(v: float) -> str:
    s = f"{v:.1f}"
    # avoid "-0.0" in the output
    return "0.0" if s == "-0.0" else s


def path_data(points: Iterable[Vector2]) -> str:
    """SVG path 'd' attribute for a closed polyline."""
    parts: List[str] = []
    for k, (x, y) in enumerate(points):
        parts.append(f"{'M' if k == 0 else 'L'}{_num(x)},{_num(y)}")
    if not parts:
        return ""
    return " ".join(parts) + " Z"


def keyframe_values(values: Iterable[float]) -> str:
    """Semicolon-separated values list for <animate values=...>."""
    return ";".join(_num(v) for v in values)


def _defs() -> str:
    return f'''  <defs>
    <radialGradient id="sunGradient">
      <stop offset="0%" stop-color="#fff6d5"/>
      <stop offset="60%" stop-color="{SUN_COLOR}"/>
      <stop offset="100%" stop-color="#ff9d2e"/>
    </radialGradient>
    <radialGradient id="vignette">
      <stop offset="0%" stop-color="#111a2e" stop-opacity="0.9"/>
      <stop offset="100%" stop-color="{BACKGROUND}" stop-opacity="1"/>
    </radialGradient>
    <filter id="glow" x="-200%" y="-200%" width="500%" height="500%">
      <feGaussianBlur in="SourceGraphic" stdDeviation="2.5" result="blur"/>
      <feMerge>
        <feMergeNode in="blur"/>
        <feMergeNode in="SourceGraphic"/>
      </feMerge>
    </filter>
  </defs>
'''


def _orbit(body: BodyTrack) -> str:
    return (
        f'  <path id="orbit-{slug(body.name)}" d="{path_data(body.outline_px)}" fill="none" '
        f'stroke={quoteattr(body.color)} stroke-opacity="{ORBIT_OPACITY}" stroke-width="{ORBIT_STROKE_WIDTH}"/>\n'
    )


def _sun() -> str:
    return (
        f'  <circle cx="0" cy="0" r="{SUN_RING_RADIUS}" fill="none" stroke="{SUN_COLOR}" '
        f'stroke-opacity="0.25" stroke-width="1"/>\n'
        f'  <circle cx="0" cy="0" r="{SUN_RADIUS}" fill="url(#sunGradient)" filter="url(#glow)"/>\n'
    )


def _planet(body: BodyTrack, dur_seconds: float) -> str:
    x0, y0 = body.start_px
    dur = f"{dur_seconds:g}s"
    return (
        f'  <circle id="planet-{slug(body.name)}" cx="{_num(x0)}" cy="{_num(y0)}" r="{body.radius_px:g}" '
        f'fill={quoteattr(body.color)} filter="url(#glow)">\n'
        f'    <title>{escape(body.name)}</title>\n'
        f'    <animate attributeName="cx" values="{keyframe_values(body.xs)}" dur="{dur}" '
        f'calcMode="linear" repeatCount="indefinite"/>\n'
        f'    <animate attributeName="cy" values="{keyframe_values(body.ys)}" dur="{dur}" '
        f'calcMode="linear" repeatCount="indefinite"/>\n'
        f'  </circle>\n'
    )


def render_svg(scene: Scene) -> str:
    """
    Build the SVG text. Draw order: orbits, Sun, planets on top.
    """
    vh = scene.config.view_half
    size = 2.0 * vh
    out: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size:g}" height="{size:g}" '
        f'viewBox="{-vh:g} {-vh:g} {size:g} {size:g}">\n',
        _defs(),
        f'  <rect x="{-vh:g}" y="{-vh:g}" width="{size:g}" height="{size:g}" fill="{BACKGROUND}"/>\n',
        f'  <rect x="{-vh:g}" y="{-vh:g}" width="{size:g}" height="{size:g}" fill="url(#vignette)"/>\n',
    ]

    out.append('  <g id="orbits">\n')
    out.extend("  " + _orbit(body) for body in scene.bodies)
    out.append("  </g>\n")

    out.append(_sun())

    out.append('  <g id="planets">\n')
    for body in scene.bodies:
        out.append("".join("  " + line + "\n" for line in _planet(body, scene.config.dur_seconds).splitlines()))
    out.append("  </g>\n")

    out.append("</svg>\n")
    return "".join(out)


def write_svg(scene: Scene, out_path: str = "out/orrery.svg") -> str:
    """
    Render and write the document all-or-nothing. OSError propagates to the
    caller and leaves any existing file at out_path untouched.
    """
    text = render_svg(scene)
    target = Path(out_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    # write next to the target, then swap it in: no half-written document
    tmp = target.with_name(target.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, target)
    except OSError:
        if tmp.exists():
            tmp.unlink()
        raise
    return out_path
