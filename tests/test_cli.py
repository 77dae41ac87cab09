# tests/test_cli.py

import json

import pytest

from moonphase.cli import main


def test_age_command(capsys):
    assert main(["age", "2000-01-06T18:14:00Z"]) == 0
    out = capsys.readouterr().out
    assert "Age      = 0.000000 d" in out
    assert "New Moon" in out


def test_today_with_date_json(capsys):
    assert main(["today", "--date", "2000-01-21T18:14:00+00:00", "--json"]) == 0
    rec = json.loads(capsys.readouterr().out)
    assert rec["age"] == pytest.approx(15.0)
    assert rec["name"] == "Full Moon"


def test_date_shortcut(capsys):
    assert main(["2000-01-21"]) == 0
    out = capsys.readouterr().out
    assert "Friday, January 21" in out


def test_forecast_json(capsys):
    assert main(["forecast", "--start", "2000-01-06T18:14:00+00:00", "--days", "7", "--json"]) == 0
    recs = json.loads(capsys.readouterr().out)
    assert len(recs) == 7
    assert [r["date"] for r in recs][:2] == ["2000-01-07", "2000-01-08"]
    assert recs[0]["age"] == pytest.approx(1.0)


def test_models_command(capsys):
    assert main(["models"]) == 0
    out = capsys.readouterr().out
    assert "mean:" in out
    assert "octants:" in out
    assert "29.53058" in out


def test_bad_date_reports_error(capsys):
    assert main(["age", "not-a-date"]) == 2
    err = capsys.readouterr().err
    assert "Cannot parse date" in err


def test_bad_forecast_length_reports_error(capsys):
    assert main(["forecast", "--days", "0"]) == 2
    assert "positive integer" in capsys.readouterr().err


def test_unknown_model_reports_error(capsys):
    assert main(["age", "2000-01-06", "--model", "nope"]) == 2
    assert "Unknown model" in capsys.readouterr().err


def test_month_diagnostic(capsys):
    assert main(["month", "--greg", "2000", "1"]) == 0
    out = capsys.readouterr().out
    assert "mean phases  2000-01" in out
    assert "Full Moon" in out


def test_html_command(tmp_path, capsys):
    pytest.importorskip("jinja2")
    out = tmp_path / "page.html"
    assert main(["html", "--out", str(out), "--date", "2000-01-06T18:14:00Z"]) == 0
    assert "Saved:" in capsys.readouterr().out
    assert out.read_text(encoding="utf-8").count('class="forecast-item"') == 7
