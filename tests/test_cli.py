"""
Тесты для интерфейса командной строки.
"""

import json

from spanish_prosody import cli
from spanish_prosody.config import Config


def test_cli_words(capsys):
    assert cli.main(["casa", "árbol"]) == 0
    out = capsys.readouterr().out
    assert "CA-sa" in out
    assert "ÁR-bol" in out
    assert "paroxítona" in out


def test_cli_without_input_prints_help(capsys):
    assert cli.main([]) == 1
    assert "spanish-prosody" in capsys.readouterr().out


def test_cli_blank_word_fails(capsys):
    assert cli.main(["casa", " "]) == 1
    assert "Ошибка анализа" in capsys.readouterr().err


def test_cli_skip_errors(capsys):
    assert cli.main(["casa", " ", "--skip-errors"]) == 0
    assert "Всего слов: 1" in capsys.readouterr().out


def test_cli_text_export_json(tmp_path, capsys):
    code = cli.main([
        "--text", "El murciélago vuela.",
        "--export", "json",
        "--output-dir", str(tmp_path),
    ])
    assert code == 0
    exported = list(tmp_path.glob("*.json"))
    assert len(exported) == 1
    data = json.loads(exported[0].read_text(encoding="utf-8"))
    assert [w['word'] for w in data['words']] == ["El", "murciélago", "vuela"]


def test_cli_html_file(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<p>La <b>canción</b></p>", encoding="utf-8")
    assert cli.main(["--file", str(page)]) == 0
    assert "can-CIÓN" in capsys.readouterr().out


def test_cli_html_file_with_inline_stress_markup(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<p>El mur<b>cié</b>lago</p>", encoding="utf-8")
    assert cli.main(["--file", str(page)]) == 0
    out = capsys.readouterr().out
    assert "mur-CIÉ-la-go" in out
    assert "Всего слов: 2" in out


def test_cli_export_with_numeric_prefix(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SPANISH_PROSODY_FILES__RESULTS_FILENAME_PREFIX", "2024")
    monkeypatch.setattr(cli, "config", Config(config_path=str(tmp_path / "nonexistent.yaml")))

    assert cli.main(["casa", "--export", "json", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "2024.json").exists()


def test_cli_missing_file(tmp_path, capsys):
    assert cli.main(["--file", str(tmp_path / "missing.txt")]) == 1
