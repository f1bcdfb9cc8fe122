# tests/test_cli.py

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from vtodo.cli import build_parser, main
from vtodo.render import EMPTY_MESSAGE

from .conftest import WORDS


def run(data_dir: Path, *argv: str) -> None:
    main(["--dir", str(data_dir), "--no-color", *argv])


def entries(data_dir: Path) -> list[dict]:
    return json.loads((data_dir / "data.json").read_text(encoding="utf-8"))["entries"]


def test_list_is_the_default_and_empty_store_is_fine(data_dir: Path, capsys) -> None:
    run(data_dir)
    assert capsys.readouterr().out.strip() == EMPTY_MESSAGE
    run(data_dir, "list")
    assert capsys.readouterr().out.strip() == EMPTY_MESSAGE
    assert not (data_dir / "data.json").exists()


def test_add_then_list(data_dir: Path, capsys) -> None:
    run(data_dir, "add", "write report", "-p", "3")
    out = capsys.readouterr().out
    [saved] = entries(data_dir)
    assert saved["id"] in WORDS
    assert saved["status"] == "NotStarted"
    assert saved["priority"] == 3
    assert saved["deadline"] is None
    assert f"Adding {saved['id']} - 'write report'" in out

    run(data_dir, "list")
    out = capsys.readouterr().out
    assert f"Task: {saved['id']} Priority: 3 | write report | Not Started" in out


def test_add_with_today_deadline(data_dir: Path) -> None:
    run(data_dir, "add", "pay rent", "--deadline", "today")
    [saved] = entries(data_dir)
    deadline = datetime.fromisoformat(saved["deadline"])
    assert (deadline.hour, deadline.minute) == (23, 30)
    assert deadline.date() == datetime.now().astimezone().date()


def test_adds_never_share_an_id(data_dir: Path, monkeypatch) -> None:
    monkeypatch.setenv("VTODO_NAME_ATTEMPTS", "10000")
    for i in range(len(WORDS)):
        run(data_dir, "add", f"task {i}")
    ids = [e["id"] for e in entries(data_dir)]
    assert sorted(ids) == sorted(WORDS)


def test_start_resolve_remove(data_dir: Path, capsys) -> None:
    run(data_dir, "add", "a thing")
    [saved] = entries(data_dir)
    name = saved["id"]

    run(data_dir, "start", name)
    assert entries(data_dir)[0]["status"] == "Started"
    run(data_dir, "resolve", name)
    assert entries(data_dir)[0]["status"] == "Resolved"
    assert "Resolved" in capsys.readouterr().out

    run(data_dir, "remove", name)
    assert entries(data_dir) == []
    assert EMPTY_MESSAGE in capsys.readouterr().out


@pytest.mark.parametrize("verb", ["start", "resolve", "remove"])
def test_unknown_id_leaves_file_untouched(data_dir: Path, capsys, verb: str) -> None:
    run(data_dir, "add", "keep me")
    before = (data_dir / "data.json").read_bytes()
    capsys.readouterr()

    run(data_dir, verb, "not-a-task")

    assert "Could not find 'not-a-task'" in capsys.readouterr().out
    assert (data_dir / "data.json").read_bytes() == before


def test_bad_deadline_aborts_without_writing(data_dir: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        run(data_dir, "add", "whenever", "-d", "someday")
    assert "don't understand" in str(exc.value.code)
    assert not (data_dir / "data.json").exists()


def test_corrupted_data_aborts(data_dir: Path) -> None:
    (data_dir / "data.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        run(data_dir, "list")
    assert "corrupted" in str(exc.value.code)


def test_missing_word_list_aborts(data_dir: Path) -> None:
    (data_dir / "nouns.txt").unlink()
    with pytest.raises(SystemExit) as exc:
        run(data_dir, "add", "x")
    assert "Word list" in str(exc.value.code)
    assert not (data_dir / "data.json").exists()


def test_word_list_exhausted_aborts(data_dir: Path, monkeypatch) -> None:
    (data_dir / "nouns.txt").write_text("solo\n", encoding="utf-8")
    monkeypatch.setenv("VTODO_NAME_ATTEMPTS", "5")
    run(data_dir, "add", "first")
    with pytest.raises(SystemExit) as exc:
        run(data_dir, "add", "second")
    assert "unused name" in str(exc.value.code)
    assert len(entries(data_dir)) == 1


def test_data_dir_from_environment(data_dir: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("VTODO_DIR", str(data_dir))
    main(["--no-color", "add", "via env"])
    assert len(entries(data_dir)) == 1


@pytest.mark.parametrize("value", ["-1", "256", "high"])
def test_priority_must_fit_a_byte(value: str, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["add", "x", "-p", value])
    assert exc.value.code == 2


def test_unreadable_data_file_aborts_with_message(data_dir: Path) -> None:
    (data_dir / "data.json").mkdir()
    with pytest.raises(SystemExit) as exc:
        run(data_dir, "list")
    assert "Could not read data file" in str(exc.value.code)
