"""Tests for the ratecore command-line entry point."""

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from ratecore.main import main


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("RATECORE_LOG_LEVEL", "WARNING")
    yield
    # main() installs a stderr handler bound to this test's captured stream
    logging.getLogger().handlers.clear()


class TestMain:
    def test_reads_file_and_prints_json(
        self, tmp_path: Path, snapshot_payload: dict, now: int, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "request.json"
        source.write_text(json.dumps({"snapshot": snapshot_payload, "now": now}), encoding="utf-8")

        assert main(["funding_and_interest", "--input", str(source)]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["long"] == "31028"
        assert result["maker"] == "-9034"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        request = {
            "curve": {
                "minRate": "10000",
                "targetRate": "50000",
                "maxRate": "1000000",
                "targetUtilization": "800000",
            },
            "utilization": "800000",
        }
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request)))

        assert main(["interest_rate"]) == 0
        assert json.loads(capsys.readouterr().out) == {"rate": "50000"}

    def test_invalid_payload_exits_1(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"utilization": 1.5})))

        assert main(["interest_rate"]) == 1
        assert "error" in capsys.readouterr().err

    def test_unreadable_input_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["interest_rate", "--input", str(tmp_path / "missing.json")]) == 1
        assert "cannot read payload" in capsys.readouterr().err

    def test_unknown_operation_is_argparse_error(self) -> None:
        with pytest.raises(SystemExit):
            main(["marketSnapshots"])
