"""Tests for pair_stats.cli module."""

import json
from unittest.mock import patch

import pytest
import requests

from pair_stats.cli import main
from pair_stats.config import reset_config


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_config()


@pytest.fixture
def pairs_file(tmp_path):
    path = tmp_path / "pairs.tsv"
    path.write_text("A\tB\t1\nB\tA\t1\nA\tC\t1\nD\tE\t1\n", encoding="utf-8")
    return path


class TestMain:
    def test_prints_text_report(self, pairs_file, capsys) -> None:
        main(["--source", str(pairs_file), "--config", "prod"])
        out = capsys.readouterr().out
        assert "Components: 2 | Threshold: 2" in out
        assert "- A-B: 2" in out
        assert "A-C: 1" not in out

    def test_threshold_flag_overrides_config(self, pairs_file, capsys) -> None:
        main(["--source", str(pairs_file), "--config", "prod", "--threshold", "1", "--json"])
        lines = capsys.readouterr().out.strip().splitlines()
        records = [json.loads(line) for line in lines]
        assert records[0] == {"first": "A", "second": "B", "count": 2}
        assert len(records) == 3

    def test_negative_threshold_rejected_by_parser(self, pairs_file) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", str(pairs_file), "--threshold", "-1"])
        assert exc_info.value.code == 2

    def test_missing_file_exits_nonzero(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", str(tmp_path / "missing.tsv"), "--config", "prod"])
        assert exc_info.value.code == 1

    def test_strict_malformed_exits_nonzero(self, tmp_path) -> None:
        path = tmp_path / "bad.tsv"
        path.write_text("A\tB\t1\nshort\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", str(path), "--config", "prod", "--strict"])
        assert exc_info.value.code == 1

    @patch("pair_stats.cli.load_entity_pairs")
    def test_http_failure_exits_nonzero(self, mock_load) -> None:
        mock_load.side_effect = requests.HTTPError("503")
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", "https://example.com/pairs.tsv", "--config", "prod"])
        assert exc_info.value.code == 1

    def test_non_mapping_config_exits_nonzero(self, pairs_file, tmp_path) -> None:
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- 1\n- 2\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", str(pairs_file), "--config", str(config_path)])
        assert exc_info.value.code == 1

    def test_non_numeric_timeout_config_exits_nonzero(self, pairs_file, tmp_path) -> None:
        config_path = tmp_path / "timeout.yaml"
        config_path.write_text("timeout: abc\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--source", str(pairs_file), "--config", str(config_path)])
        assert exc_info.value.code == 1

    def test_non_ascii_delimiter(self, tmp_path, capsys) -> None:
        path = tmp_path / "pairs.txt"
        path.write_text("A¦B¦1\nB¦A¦1\n", encoding="utf-8")
        main(["--source", str(path), "--config", "prod", "--delimiter", "¦", "--json"])
        assert json.loads(capsys.readouterr().out) == {"first": "A", "second": "B", "count": 2}
