# tests/test_cli.py

import json

from calperiods.cli import main


def test_generate_text(capsys):
    assert main(["generate", "2024", "QUARTERLY"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert lines[0].split()[:3] == ["2024Q1", "2024-01-01", "2024-03-31"]
    assert lines[0].endswith("January - March 2024")


def test_generate_json(capsys):
    assert main(["generate", "2024", "FYAPR", "--years-count", "2", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["2023April", "2024April"]
    assert rows[1]["startDate"] == "2024-04-01"
    assert rows[1]["endDate"] == "2025-03-31"


def test_generate_options(capsys):
    assert main(["generate", "2024", "WEEKLY", "--starting-day", "7", "--ends-before", "2024-01-15", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["2024W01", "2024W02"]
    assert rows[0]["startDate"] == "2023-12-31"


def test_generate_nepali_labels(capsys):
    assert main(["generate", "2080", "MONTHLY", "--calendar", "nepali", "--locale", "ne", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["displayName"] == "बैशाख २०८०"
    assert rows[0]["calendar"] == "nepali"


def test_convert(capsys):
    assert main(["convert", "1943-04-14", "--calendar", "nepali"]) == 0
    assert capsys.readouterr().out.strip() == "2000-01-01 (Wed)"


def test_convert_shortcut(capsys):
    assert main(["2024-01-14", "--calendar", "julian", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {
        "gregorian": "2024-01-14", "date": "2024-01-01", "calendar": "julian", "era": "ce", "weekday": "Sun",
    }


def test_locate(capsys):
    assert main(["locate", "QUARTERLY", "2024-05-15", "--json"]) == 0
    (row,) = json.loads(capsys.readouterr().out)
    assert row["id"] == "2024Q2"


def test_previous(capsys):
    assert main(["previous", "WEEKLY", "3", "--date", "2024-01-01"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split()[0] for line in lines] == ["2023W50", "2023W51", "2023W52"]


def test_resolve(capsys):
    assert main(["resolve", "ethiopian", "--json"]) == 0
    info = json.loads(capsys.readouterr().out)
    assert info["id"] == "ethiopic"
    assert info["requested_id"] == "ethiopian"
    assert info["locale"] == "en"


def test_calendars(capsys):
    assert main(["calendars"]) == 0
    out = capsys.readouterr().out
    assert "nepali" in out
    assert "custom" in out


def test_today(capsys):
    assert main(["today", "--timezone", "UTC", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["calendar"] == "iso8601"


def test_errors_exit_with_code_2(capsys):
    assert main(["resolve", "martian"]) == 2
    assert "error: Unknown calendar 'martian'" in capsys.readouterr().err

    assert main(["generate", "2080", "MONTHLY", "--calendar", "nepali", "--locale", "fr"]) == 2
    assert "only specific locales are allowed" in capsys.readouterr().err

    assert main(["generate", "twenty", "MONTHLY"]) == 2
    assert main(["locate", "HOURLY", "2024-01-01"]) == 2


def test_json_log_events_on_stderr(capsys):
    assert main(["generate", "2024", "YEARLY", "--log-level", "debug", "--log-json"]) == 0
    captured = capsys.readouterr()
    assert captured.out.split()[0] == "2024"
    events = [json.loads(line) for line in captured.err.splitlines()]
    generated = [e for e in events if e["event"] == "periods_generated"]
    assert generated[0]["logger"] == "calperiods.periods.generate"
    assert generated[0]["count"] == 1
