"""
Render the log-radial orrery for a date range.

    python -m orrery.scripts.render_orrery --start 2025-01-01 --days 365 -o out/orrery.svg
"""

from __future__ import annotations

import argparse
import datetime as _dt
import logging
import sys
from typing import List, Optional

from orrery.core.timescales import iso_date_from_jd, julian_day_from_date
from orrery.simulation.scenario import default_scenario
from orrery.simulation.scene import SceneConfig, TimeSpan, build_scene
from orrery.visualization.export_log import export_scene_to_json
from orrery.visualization.plotly_viewer import render_scene_html
from orrery.visualization.svg_writer import write_svg

log = logging.getLogger(__name__)


def _iso_date(text: str) -> _dt.date:
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{text}', expected YYYY-MM-DD") from None


def build_parser() -> argparse.ArgumentParser:
    defaults = SceneConfig()
    parser = argparse.ArgumentParser(
        description="Animated SVG of the planets with a logarithmic radial scale.",
    )
    parser.add_argument("--start", type=_iso_date, default=None,
                        help="First date, YYYY-MM-DD (default: today)")
    end_group = parser.add_mutually_exclusive_group()
    end_group.add_argument("--end", type=_iso_date, default=None,
                           help="Last date, YYYY-MM-DD")
    end_group.add_argument("--days", type=float, default=365.0,
                           help="Span length in days when --end is not given (default: 365)")
    parser.add_argument("--step-days", type=float, default=defaults.step_days,
                        help=f"Keyframe step in days (default: {defaults.step_days:g})")
    parser.add_argument("--duration", type=float, default=defaults.dur_seconds,
                        help=f"Animation loop length in seconds (default: {defaults.dur_seconds:g})")
    parser.add_argument("--view-half", type=float, default=defaults.view_half,
                        help=f"Half-width of the square canvas (default: {defaults.view_half:g})")
    parser.add_argument("--r-px-max", type=float, default=defaults.r_px_max,
                        help=f"Radius of the outermost aphelion on the canvas (default: {defaults.r_px_max:g})")
    parser.add_argument("--planets", nargs="+", metavar="NAME", default=None,
                        help="Only draw these planets (default: all eight)")
    parser.add_argument("-o", "--out", default="out/orrery.svg",
                        help="Output SVG path (default: out/orrery.svg)")
    parser.add_argument("--json", dest="json_path", default=None,
                        help="Also export playback data as JSON")
    parser.add_argument("--html", dest="html_path", default=None,
                        help="Also write an interactive plotly preview")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    start = args.start or _dt.date.today()
    start_jd = julian_day_from_date(start)
    if args.end is not None:
        end_jd = julian_day_from_date(args.end)
    else:
        end_jd = start_jd + args.days

    try:
        span = TimeSpan(start_jd=start_jd, end_jd=end_jd)
        config = SceneConfig(
            view_half=args.view_half,
            r_px_max=args.r_px_max,
            step_days=args.step_days,
            dur_seconds=args.duration,
        )
        scenario = default_scenario()
        if args.planets:
            scenario = scenario.only(args.planets)
    except (ValueError, KeyError) as e:
        parser.error(str(e.args[0]) if e.args else str(e))

    log.info("Rendering %s to %s (%d planets)",
             iso_date_from_jd(span.start_jd), iso_date_from_jd(span.end_jd), len(scenario.planets))
    scene = build_scene(span, config, scenario)
    log.info("%d keyframes per planet, r_max = %.3f AU", len(scene.times_jd), scene.r_max_au)

    written: List[str] = []
    try:
        written.append(write_svg(scene, args.out))
        if args.json_path:
            written.append(export_scene_to_json(scene, args.json_path))
        if args.html_path:
            written.append(render_scene_html(scene, args.html_path))
    except OSError as e:
        print(f"ERROR: could not write output: {e}", file=sys.stderr)
        return 1

    for path in written:
        print(f"Wrote: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
