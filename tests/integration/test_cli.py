"""Tests de integración del CLI keyed_store_cli."""

import json
from pathlib import Path

import pytest

from keyed_store_cli import main


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.mark.integration
class TestCli:
    def test_merge_records_json_output(self, tmp_path: Path, capsys) -> None:
        a = write_json(tmp_path / "a.json", {"x": 1, "tmp": True})
        b = write_json(tmp_path / "b.json", {"x": 2, "y": 3})

        code = main(["--record", str(a), "--record", str(b), "--remove", "tmp"])

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["size"] == 2
        assert report["keys"] == ["x", "y"]
        assert report["entries"] == [{"key": "x", "value": 2}, {"key": "y", "value": 3}]
        assert report["removed"] == {"tmp": True}
        assert report["missing"] == []

    def test_text_output(self, tmp_path: Path, capsys) -> None:
        a = write_json(tmp_path / "a.json", {"name": "demo"})

        code = main(["--record", str(a), "--out", "text"])

        out = capsys.readouterr().out
        assert code == 0
        assert "1 entradas" in out
        assert "name" in out
        assert '"demo"' in out

    def test_require_missing_key_fails(self, tmp_path: Path, capsys) -> None:
        a = write_json(tmp_path / "a.json", {"x": 1})

        code = main(["--record", str(a), "--require", "x", "--require", "y"])

        captured = capsys.readouterr()
        assert code == 1
        assert json.loads(captured.out)["missing"] == ["y"]
        assert "y" in captured.err

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        code = main(["--record", str(tmp_path / "nope.json")])
        assert code == 1
        assert "no existe" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path: Path, capsys) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        assert main(["--record", str(bad)]) == 1
        assert "JSON inválido" in capsys.readouterr().err

    def test_json_not_object(self, tmp_path: Path, capsys) -> None:
        arr = write_json(tmp_path / "arr.json", [1, 2])
        assert main(["--record", str(arr)]) == 1
        assert "no contiene un objeto" in capsys.readouterr().err

    def test_no_records_is_empty_store(self, capsys) -> None:
        assert main([]) == 0
        assert json.loads(capsys.readouterr().out)["size"] == 0
