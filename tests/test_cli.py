"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from palabra.__main__ import cli

GENESIS_ES = "En el principio creó Dios los cielos y la tierra"
GENESIS_EN = "In the beginning God created the heaven and the earth"


class TestWordCommand:
    def test_offline_known_word(self):
        result = CliRunner().invoke(cli, ["word", "Dios", "--offline"])
        assert result.exit_code == 0
        assert "God" in result.output

    def test_offline_with_context(self):
        result = CliRunner().invoke(
            cli, ["word", "el", "--offline", "-c", "he that believeth"]
        )
        assert result.exit_code == 0
        assert "he" in result.output

    def test_offline_unknown_word(self):
        result = CliRunner().invoke(cli, ["word", "Zorobabel", "--offline"])
        assert result.exit_code == 0
        assert "no distinct translation" in result.output


class TestAlignCommand:
    def test_table(self):
        result = CliRunner().invoke(cli, ["align", GENESIS_ES, GENESIS_EN])
        assert result.exit_code == 0
        assert "Alignment" in result.output
        assert "Dios" in result.output

    def test_json(self):
        result = CliRunner().invoke(cli, ["align", GENESIS_ES, GENESIS_EN, "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["spanish_words"]) == 10
        dios = next(link for link in data["links"] if link["spanish_index"] == 4)
        assert dios["english_indices"] == [3]

    def test_nothing_aligned(self):
        result = CliRunner().invoke(cli, ["align", "Zorobabel", "Zerubbabel"])
        assert result.exit_code == 0
        assert "No alignments found" in result.output


class TestOtherCommands:
    def test_books(self):
        result = CliRunner().invoke(cli, ["books"])
        assert result.exit_code == 0
        assert "Apocalipsis" in result.output

    def test_verse_bad_reference(self):
        result = CliRunner().invoke(cli, ["verse", "Enoc 1:1", "--text", "Dios"])
        assert result.exit_code == 1
        assert "Unknown book" in result.output

    def test_log_level_option(self):
        result = CliRunner().invoke(cli, ["--log-level", "debug", "books"])
        assert result.exit_code == 0

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
