"""설정 관리 모듈."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# src/bot_commands/config.py 기준 프로젝트 루트
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """애플리케이션 설정.

    프로세스 시작 시 한 번 로드되며 이후 변경할 수 없다.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # GitHub
    github_repo: str = Field(
        default="RC-JESTOR/KNIGHT-BOT-RC-JESTOR",
        description="메시지에 저장소가 없을 때 사용할 기본 저장소 (owner/repo)",
    )
    github_token: str | None = Field(default=None, description="GitHub API 토큰")
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 주소",
    )

    timezone: str = Field(default="Asia/Colombo", description="시각 표시용 타임존")
    http_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP 요청 타임아웃 (초)",
    )

    # 로컬 리소스
    version_file: Path = Field(
        default=PROJECT_ROOT / "pyproject.toml",
        description="봇 버전을 읽을 패키지 정의 파일",
    )
    image_path: Path = Field(
        default=PROJECT_ROOT / "assets" / "bot_image.jpg",
        description="저장소 정보와 함께 보낼 로컬 이미지",
    )

    # 저장소 리포트 문구
    bot_name: str = Field(default="Knight Bot MD", description="리포트 제목에 쓰는 봇 이름")
    bot_tagline: str = Field(
        default="KnightBot MD",
        description="부가 정보 위에 표시하는 봇 이름",
    )
    bot_developer: str = Field(default="Navida Wijesuriya", description="개발자 이름")
    bot_features: str = Field(
        default="Auto-Reply, Group Tools, Fun Commands",
        description="주요 기능 소개 문구",
    )
    bot_status: str = Field(default="🚀 Live and Improving", description="상태 문구")
    suggested_commands: list[str] = Field(
        default=[".tagall", ".tts", ".sticker", ".welcome"],
        description="리포트 하단에 추천할 명령 목록",
    )


settings = Settings()
