"""Tests for the command-line tool."""
import json
import sys
import pytest
import main


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    return main.main()


class TestTransliterateCommands:
    """Test the mora and rtgs subcommands."""

    def test_mora(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "mora", "ko", "SHI", "xyz") == 0
        assert capsys.readouterr().out.splitlines() == ["ko\tโค", "SHI\tชิ", "xyz\txyz"]

    def test_mora_kana(self, monkeypatch, capsys):
        """Kana words are split into moras before lookup."""
        assert run_cli(monkeypatch, "mora", "--kana", "コーヒー") == 0
        assert capsys.readouterr().out.splitlines() == ["コーヒー\tko-o-hi-i\tโคโอฮิอิ"]

    def test_rtgs(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "rtgs", "sa-wat", "khun") == 0
        assert capsys.readouterr().out.splitlines() == ["sa-wat\tサワト", "khun\tクン"]


class TestAnnotateCommand:
    """Test the annotate subcommand."""

    def test_unknown_language(self, monkeypatch):
        """An unknown language code exits with status 1."""
        assert run_cli(monkeypatch, "annotate", "nope") == 1

    def test_missing_file(self, monkeypatch, tmp_path):
        """A path that does not exist exits with status 1."""
        assert run_cli(monkeypatch, "annotate", str(tmp_path / "missing.json")) == 1

    def test_invalid_file(self, monkeypatch, tmp_path):
        """A vocabulary file that fails validation exits with status 1."""
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        assert run_cli(monkeypatch, "annotate", str(path)) == 1

    def test_output_file(self, monkeypatch, tmp_path, vocabulary_file):
        """--output writes the vocabulary with every hint filled in."""
        output = tmp_path / "annotated.json"
        assert run_cli(monkeypatch, "annotate", vocabulary_file, "-o", str(output)) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert [s["thai"] for s in data[0]["syllables"]] == ["โอ", "ฮา", "โยะ", "อุ"]
        assert [s["katakana"] for s in data[1]["syllables"]] == ["カーウ", "スワイ"]

    def test_bundled_language(self, monkeypatch, tmp_path):
        """A language code reads the bundled vocabulary."""
        output = tmp_path / "ja.json"
        assert run_cli(monkeypatch, "annotate", "ja", "-o", str(output)) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data
        assert all("thai" in s for entry in data for s in entry["syllables"])

    def test_prints_hints(self, monkeypatch, capsys, vocabulary_file):
        assert run_cli(monkeypatch, "annotate", vocabulary_file) == 0
        assert "ข้าว\tkhaaw-suay\tカーウ スワイ" in capsys.readouterr().out.splitlines()


class TestScoreCommand:
    """Test the score subcommand."""

    def test_prints_json(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "score", "abcd", "abce") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is True
        assert data["accuracy"] == 75
        assert data["charDiff"][-1] == {"char": "e", "status": "wrong"}

    def test_requires_both_arguments(self, monkeypatch):
        with pytest.raises(SystemExit):
            run_cli(monkeypatch, "score", "abcd")
