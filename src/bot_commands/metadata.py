"""로컬 봇 메타데이터 (버전, 실행 시간)."""

import logging
import time
import tomllib
from pathlib import Path

import psutil

from bot_commands.models import BotMetadata

logger = logging.getLogger(__name__)


def uptime_seconds() -> float:
    """현재 프로세스가 시작된 뒤 지난 시간 (초)."""
    try:
        started_at = psutil.Process().create_time()
    except psutil.Error as e:
        logger.warning(f"Failed to read process start time: {e}")
        return 0.0
    return max(time.time() - started_at, 0.0)


def read_version(path: Path) -> str | None:
    """``pyproject.toml`` 의 ``[project].version`` 을 읽는다.

    파일이 없거나 형식이 잘못되면 None을 반환한다.
    """
    if not path.is_file():
        return None
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to read version file {path}: {e}")
        return None

    version = data.get("project", {}).get("version")
    return str(version) if version else None


def load_bot_metadata(version_file: Path) -> BotMetadata:
    """버전과 실행 시간을 모은다."""
    return BotMetadata(
        version=read_version(version_file),
        uptime_seconds=uptime_seconds(),
    )
