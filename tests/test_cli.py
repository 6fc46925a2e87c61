import sys

import pytest

from sun_control.__main__ import main


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["sun-control", *args])
    main()


def test_verify_prints_hourly_positions(monkeypatch, capsys):
    run_cli(monkeypatch, "--verify", "--date", "21.06.2024", "--lat", "51.5", "--lon", "0")
    out = capsys.readouterr().out

    assert "21/06/2024" in out
    lines = [line for line in out.splitlines() if "azimuth=" in line]
    assert len(lines) == 24
    assert lines[0].startswith("00:00")
    assert lines[-1].startswith("23:00")
    # Sun is up at noon in London in June
    assert lines[12].startswith("12:00 *")


def test_invalid_date_exits(monkeypatch):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "--verify", "--date", "11 10")


def test_invalid_latitude_exits(monkeypatch):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "--verify", "--lat", "95")


def test_track_writes_png(monkeypatch, tmp_path):
    output = tmp_path / "track.png"
    run_cli(monkeypatch, "--track", "--date", "21.06.2024", "--output", str(output))
    assert output.exists()
    assert output.stat().st_size > 0


def test_ui_render_frame():
    gr = pytest.importorskip("gradio")
    from sun_control.ui import render_frame

    image, info = render_frame("21.06.2024", 0.5, 51.5, 0.0, "negative_z", 15.0)
    assert image.size == (640, 360)
    assert "Azimuth" in info

    with pytest.raises(gr.Error):
        render_frame("abc", 0.5, 51.5, 0.0, "positive_x", 0.0)


def test_verify_uses_configured_default_location(monkeypatch, capsys):
    run_cli(monkeypatch, "--verify")
    out = capsys.readouterr().out
    assert "11/10/1996 at (0.0, 0.0)" in out


def test_ui_render_frame_with_cleared_fields():
    gr = pytest.importorskip("gradio")
    from sun_control.ui import render_frame

    image, info = render_frame("11.10.1996", 0.5, None, None, "positive_x", 0.0)
    assert image.size == (640, 360)

    with pytest.raises(gr.Error):
        render_frame("11.10.1996", 0.5, 0.0, 0.0, "positive_x", None)
