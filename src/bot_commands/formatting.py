"""리포트 문자열 포맷 유틸리티."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from bot_commands.models import LanguageShare

DATE_FORMAT = "%d/%m/%y - %H:%M:%S"


def human_duration(seconds: float) -> str:
    """초 단위 시간을 ``1d 2h 3m 4s`` 형태로 변환한다.

    값이 0인 단위는 생략하지만 초는 항상 표시한다.
    """
    remaining = max(int(seconds), 0)
    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, secs = divmod(remaining, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def _plural(count: int, unit: str, single: str) -> str:
    return single if count == 1 else f"{count} {unit}s"


def relative_time(moment: datetime, now: datetime | None = None) -> str:
    """``3 days ago`` 같은 상대 시간 문자열을 만든다."""
    now = now or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    delta = (now - moment).total_seconds()
    future = delta < 0
    seconds = abs(delta)

    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24

    if seconds < 45:
        text = "a few seconds"
    elif seconds < 90:
        text = "a minute"
    elif minutes < 45:
        text = _plural(round(minutes), "minute", "a minute")
    elif minutes < 90:
        text = "an hour"
    elif hours < 22:
        text = _plural(round(hours), "hour", "an hour")
    elif hours < 36:
        text = "a day"
    elif days < 26:
        text = _plural(round(days), "day", "a day")
    elif days < 46:
        text = "a month"
    elif days < 320:
        text = _plural(round(days / 30.4), "month", "a month")
    elif days < 548:
        text = "a year"
    else:
        text = _plural(round(days / 365), "year", "a year")

    return f"in {text}" if future else f"{text} ago"


def format_timestamp(moment: datetime, timezone: str) -> str:
    """지정한 타임존 기준 ``DD/MM/YY - HH:MM:SS`` 문자열을 만든다."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(ZoneInfo(timezone)).strftime(DATE_FORMAT)


def format_size_mb(size_kb: int | None) -> str:
    """KB 크기를 MB 문자열로 변환한다 (소수 둘째 자리)."""
    if not size_kb:
        return "N/A"
    return f"{size_kb / 1024:.2f}"


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def language_breakdown(languages: dict[str, int], limit: int = 4) -> list[LanguageShare]:
    """언어별 바이트 수를 비율 내림차순 목록으로 변환한다.

    Args:
        languages: 언어 이름 -> 바이트 수
        limit: 반환할 최대 개수

    Returns:
        LanguageShare 리스트. 비율은 전체 바이트 대비 정수 반올림 값.
    """
    total = sum(languages.values()) or 1
    ranked = sorted(languages.items(), key=lambda item: item[1], reverse=True)
    return [
        LanguageShare(
            name=name,
            byte_count=count,
            percent=_round_half_up(count / total * 100),
        )
        for name, count in ranked[:limit]
    ]
