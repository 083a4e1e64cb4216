"""Tests for the holopass command-line interface."""

import json
from unittest.mock import patch

import pytest

from holopass import RandomSourceUnavailableError
from holopass.cli import (
    EXIT_INFEASIBLE,
    EXIT_NO_CATEGORY,
    EXIT_RANDOM_UNAVAILABLE,
    main,
)

DIGITS_ONLY_FLAGS = ["--no-lowercase", "--no-uppercase", "--no-symbols"]
NO_CATEGORY_FLAGS = DIGITS_ONLY_FLAGS + ["--no-digits"]


class TestGenerateCommand:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        out = capsys.readouterr().out
        assert "Excellent" in out
        assert "bits" in out

    def test_json_count_and_length(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3", "--json"]) == 0
        results = json.loads(capsys.readouterr().out)
        assert len(results) == 3
        for item in results:
            assert len(item["password"]) == 20
            assert set(item) == {"password", "score", "label", "bits"}

    def test_length_clamped(self, capsys):
        assert main(["generate", "-n", "1000", "--json"]) == 0
        results = json.loads(capsys.readouterr().out)
        assert len(results[0]["password"]) == 128

    def test_digits_only_with_ambiguous(self, capsys):
        args = ["generate", "-n", "30", "--json", "--allow-ambiguous"]
        assert main(args + DIGITS_ONLY_FLAGS) == 0
        pwd = json.loads(capsys.readouterr().out)[0]["password"]
        assert pwd.isdigit()

    def test_no_category(self, capsys):
        assert main(["generate"] + NO_CATEGORY_FLAGS) == EXIT_NO_CATEGORY
        assert "at least one" in capsys.readouterr().err

    def test_infeasible(self, capsys):
        args = ["generate", "-n", "10", "--no-repeats"] + DIGITS_ONLY_FLAGS
        assert main(args) == EXIT_INFEASIBLE
        err = capsys.readouterr().err
        assert "10" in err
        assert "pool of 5" in err

    def test_no_repeats(self, capsys):
        assert main(["generate", "-n", "40", "--no-repeats", "--json"]) == 0
        pwd = json.loads(capsys.readouterr().out)[0]["password"]
        assert len(set(pwd)) == 40

    @patch("holopass.cli.generate_password")
    def test_random_source_unavailable(self, mock_generate, capsys):
        mock_generate.side_effect = RandomSourceUnavailableError("no entropy")
        assert main(["generate"]) == EXIT_RANDOM_UNAVAILABLE
        assert "Error: no entropy" in capsys.readouterr().err

    @pytest.mark.parametrize("count", ["0", "-3"])
    def test_count_must_be_positive(self, count, capsys):
        with pytest.raises(SystemExit) as info:
            main(["generate", "-c", count, "--json"])
        assert info.value.code == 2
        captured = capsys.readouterr()
        assert "at least 1" in captured.err
        assert captured.out == ""

    def test_exit_codes_distinct_from_usage_error(self):
        assert 2 not in {EXIT_NO_CATEGORY, EXIT_INFEASIBLE, EXIT_RANDOM_UNAVAILABLE}


class TestEstimateCommand:
    def test_digits_weak(self, capsys):
        args = ["estimate", "123456", "--allow-ambiguous"] + DIGITS_ONLY_FLAGS
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "Weak (19.9 bits)" in out
        assert "[#---]" in out

    def test_multiple_passwords(self, capsys):
        assert main(["estimate", "abc", "x" * 16]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert "Excellent" in lines[1]

    def test_no_category(self, capsys):
        assert main(["estimate", "abc"] + NO_CATEGORY_FLAGS) == EXIT_NO_CATEGORY


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_log_level_option(capsys):
    assert main(["--log-level", "DEBUG", "generate", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)
