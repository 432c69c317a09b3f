"""
Tests for the command-line entry point.
"""
import json
import pytest

from orrery.scripts.render_orrery import build_parser, main


def test_writes_svg(tmp_path, capsys):
    out = tmp_path / "orrery.svg"
    rc = main(["--start", "2025-01-01", "--days", "30", "--step-days", "10", "-o", str(out)])
    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith("<svg")
    assert text.count("<animate ") == 16
    assert f"Wrote: {out}" in capsys.readouterr().out


def test_end_date_and_extra_outputs(tmp_path):
    svg = tmp_path / "a.svg"
    js = tmp_path / "a.json"
    html = tmp_path / "a.html"
    rc = main([
        "--start", "2025-01-01", "--end", "2025-01-11", "--step-days", "5",
        "--planets", "Earth", "Mars",
        "-o", str(svg), "--json", str(js), "--html", str(html),
    ])
    assert rc == 0
    data = json.loads(js.read_text(encoding="utf-8"))
    assert list(data["bodies"]) == ["Earth", "Mars"]
    assert data["dates"] == ["2025-01-01", "2025-01-06", "2025-01-11"]
    assert html.exists()


def test_layout_options_reach_document(tmp_path):
    out = tmp_path / "o.svg"
    rc = main(["--start", "2025-01-01", "--days", "4", "--view-half", "250", "--r-px-max", "200",
               "--duration", "8", "-o", str(out)])
    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert 'viewBox="-250 -250 500 500"' in text
    assert 'dur="8s"' in text


def test_write_failure_is_reported_not_raised(tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    rc = main(["--start", "2025-01-01", "--days", "2", "-o", str(blocker / "orrery.svg")])
    assert rc == 1
    assert "could not write output" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--start", "2025-13-01"],
    ["--start", "2025-02-01", "--end", "2025-01-01"],
    ["--step-days", "0"],
    ["--planets", "Pluto"],
    ["--start", "2025-01-01", "--days", "4", "--r-px-max", "nan"],
    ["--start", "2025-01-01", "--days", "4", "--view-half", "nan"],
    ["--start", "2025-01-01", "--days", "4", "--duration", "inf"],
])
def test_bad_arguments_exit_with_usage_error(argv, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["-o", str(tmp_path / "x.svg")])
    assert exc.value.code == 2


def test_end_and_days_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--end", "2025-01-01", "--days", "3"])


def test_defaults():
    args = build_parser().parse_args([])
    assert args.start is None
    assert args.days == 365.0
    assert args.out == "out/orrery.svg"
