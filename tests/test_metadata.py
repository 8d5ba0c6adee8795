"""로컬 메타데이터 테스트."""

import time
from pathlib import Path

import psutil

from bot_commands import metadata
from bot_commands.metadata import load_bot_metadata, read_version


class TestReadVersion:
    """read_version 테스트."""

    def test_reads_project_version(self, tmp_path: Path) -> None:
        """[project].version을 읽는다."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "bot"\nversion = "2.1.0"\n', encoding="utf-8")
        assert read_version(path) == "2.1.0"

    def test_missing_file(self, tmp_path: Path) -> None:
        """파일이 없으면 None이다."""
        assert read_version(tmp_path / "nope.toml") is None

    def test_malformed_file(self, tmp_path: Path) -> None:
        """형식이 잘못되면 None이다."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[project\nversion = ", encoding="utf-8")
        assert read_version(path) is None

    def test_missing_version(self, tmp_path: Path) -> None:
        """버전 항목이 없으면 None이다."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.other]\nkey = "x"\n', encoding="utf-8")
        assert read_version(path) is None


def test_load_bot_metadata(tmp_path: Path) -> None:
    """버전이 없어도 실행 시간은 채운다."""
    metadata = load_bot_metadata(tmp_path / "nope.toml")
    assert metadata.version is None
    assert metadata.uptime_seconds >= 0


class TestUptime:
    """uptime_seconds 테스트."""

    def test_measured_from_process_start(self, monkeypatch) -> None:
        """모듈을 불러온 시점이 아니라 프로세스 시작 시각을 기준으로 한다."""

        class FakeProcess:
            def create_time(self) -> float:
                return time.time() - 3600

        monkeypatch.setattr(metadata.psutil, "Process", FakeProcess)
        assert 3600 <= metadata.uptime_seconds() < 3660

    def test_matches_current_process(self) -> None:
        """실제 프로세스 시작 시각과 일치한다."""
        expected = time.time() - psutil.Process().create_time()
        assert abs(metadata.uptime_seconds() - expected) < 5

    def test_process_error(self, monkeypatch) -> None:
        """시작 시각을 읽지 못하면 0이다."""

        class BrokenProcess:
            def create_time(self) -> float:
                raise psutil.AccessDenied()

        monkeypatch.setattr(metadata.psutil, "Process", BrokenProcess)
        assert metadata.uptime_seconds() == 0.0
