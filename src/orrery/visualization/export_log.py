from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from orrery.core.timescales import iso_date_from_jd
from orrery.simulation.scene import Scene


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    """
    Playback data for external viewers:
    {
      "config": {"view_half": ..., "r_px_max": ..., "step_days": ..., ...},
      "span": {"start_jd": ..., "end_jd": ...},
      "r_max_au": 31.2,
      "times_jd": [2460000.5, ...],
      "dates": ["2023-02-25", ...],
      "bodies": {
        "Earth": {"color": "#...", "radius_px": 4.8,
                  "outline_px": [[x, y], ...],
                  "start_px": [x, y],
                  "xs": [...], "ys": [...]},
        ...
      }
    }
    Coordinates are screen units (y down).
    """
    data: Dict[str, Any] = {
        "config": asdict(scene.config),
        "span": asdict(scene.span),
        "r_max_au": scene.r_max_au,
        "times_jd": list(scene.times_jd),
        "dates": [iso_date_from_jd(jd) for jd in scene.times_jd],
        "bodies": {},
    }

    for body in scene.bodies:
        if len(body.xs) != len(scene.times_jd) or len(body.ys) != len(scene.times_jd):
            raise ValueError(f"{body.name} keyframe length mismatch.")
        data["bodies"][body.name] = {
            "color": body.color,
            "radius_px": body.radius_px,
            "outline_px": [[x, y] for (x, y) in body.outline_px],
            "start_px": list(body.start_px),
            "xs": list(body.xs),
            "ys": list(body.ys),
        }

    return data


def export_scene_to_json(scene: Scene, out_path: str = "out/orrery.json") -> str:
    data = scene_to_dict(scene)
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
