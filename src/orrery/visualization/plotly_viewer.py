from __future__ import annotations

from pathlib import Path
from typing import List

import plotly.graph_objects as go

from orrery.core.timescales import iso_date_from_jd
from orrery.simulation.scene import Scene


def build_scene_figure(scene: Scene, frame_ms: int = 40) -> go.Figure:
    """
    Interactive 2D preview of a scene (same screen coordinates as the SVG):
      - orbit outline per planet
      - the Sun at the origin
      - one marker per planet, moved by animation frames
    """
    fig = go.Figure()

    # Orbit outlines
    for body in scene.bodies:
        fig.add_trace(go.Scatter(
            x=[p[0] for p in body.outline_px],
            y=[p[1] for p in body.outline_px],
            mode="lines",
            line=dict(color=body.color, width=1),
            opacity=0.45,
            name=f"{body.name} orbit",
            hoverinfo="skip",
        ))

    fig.add_trace(go.Scatter(
        x=[0.0], y=[0.0],
        mode="markers",
        marker=dict(size=14, color="#ffd257"),
        name="Sun",
    ))

    # Markers at t = start; these traces are the ones frames update
    first_marker = len(fig.data)
    for body in scene.bodies:
        x0, y0 = body.start_px
        fig.add_trace(go.Scatter(
            x=[x0], y=[y0],
            mode="markers",
            marker=dict(size=2 * body.radius_px, color=body.color),
            name=body.name,
        ))
    marker_traces = list(range(first_marker, len(fig.data)))

    frames: List[go.Frame] = []
    for i in range(len(scene.times_jd)):
        frames.append(go.Frame(
            name=str(i),
            data=[
                go.Scatter(x=[body.xs[i]], y=[body.ys[i]], mode="markers")
                for body in scene.bodies
            ],
            traces=marker_traces,
        ))
    fig.frames = frames

    vh = scene.config.view_half
    n = len(scene.times_jd)
    fig.update_layout(
        title=f"Solar System {iso_date_from_jd(scene.span.start_jd)} to {iso_date_from_jd(scene.span.end_jd)}",
        plot_bgcolor="#05070d",
        xaxis=dict(range=[-vh, vh], visible=False),
        # screen y grows downward, as in the SVG
        yaxis=dict(range=[vh, -vh], visible=False, scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": frame_ms, "redraw": False}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": False}}],
                        label=iso_date_from_jd(scene.times_jd[i])) for i in range(0, n, max(1, n // 20))],
            active=0,
        )],
    )
    return fig


def render_scene_html(scene: Scene, out_html: str = "out/orrery.html") -> str:
    fig = build_scene_figure(scene)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
