"""GitHub 저장소 정보 명령."""

import asyncio
import logging
import random
from typing import Any

from bot_commands.config import Settings, settings
from bot_commands.fallback import first_success
from bot_commands.fetcher import HttpJsonFetcher
from bot_commands.formatting import (
    format_size_mb,
    format_timestamp,
    human_duration,
    relative_time,
)
from bot_commands.messages import extract_text, parse_repository
from bot_commands.metadata import load_bot_metadata
from bot_commands.models import AuxiliaryFacts, BotMetadata, RepositorySnapshot
from bot_commands.notifiers.chat import ChatReplier, Connection
from bot_commands.sources.github import GitHubRepositorySource

logger = logging.getLogger(__name__)

COMMUNITY_MOODS = (
    "🌟 Open to contributors",
    "🔥 Active development",
    "🤝 Welcomes PRs & ideas",
    "✨ Community-driven",
)

BADGE_TEMPLATES = (
    "https://img.shields.io/github/v/release/{repo}?style=for-the-badge",
    "https://img.shields.io/github/license/{repo}?style=for-the-badge",
    "https://img.shields.io/github/commit-activity/y/{repo}?style=for-the-badge",
)

FETCH_FAILED_TEXT = "❌ Could not fetch repository info for *{repo}*."
ERROR_TEXT = "❌ Error fetching repository information."


def build_github_headers(token: str | None) -> dict[str, str]:
    """GitHub API 요청 헤더를 생성한다."""
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "KnightBot-GitHub-Info",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class RepositoryInfoReporter:
    """저장소 정보를 모아 채팅방에 리포트를 보낸다."""

    def __init__(
        self,
        config: Settings | None = None,
        fetcher: HttpJsonFetcher | None = None,
    ) -> None:
        """
        Args:
            config: 애플리케이션 설정. None이면 전역 설정 사용.
            fetcher: HTTP JSON 요청 헬퍼. None이면 설정값으로 생성.
        """
        self.config = config or settings
        self.fetcher = fetcher or HttpJsonFetcher(
            timeout=self.config.http_timeout,
            headers=build_github_headers(self.config.github_token),
        )
        self.source = GitHubRepositorySource(self.fetcher, self.config.github_api_url)

    def _format_header(self, repo: RepositorySnapshot, metadata: BotMetadata) -> str:
        """리포트 상단 블록을 만든다."""
        cfg = self.config
        lines = [
            f"*乂  {cfg.bot_name}  乂*",
            "",
            f"✩ *Name*: {repo.name}",
            f"✩ *Size*: {format_size_mb(repo.size_kb)} MB",
        ]
        if repo.updated_at:
            formatted = format_timestamp(repo.updated_at, cfg.timezone)
            lines.append(
                f"✩ *Last Updated*: {formatted} ({relative_time(repo.updated_at)})"
            )
        else:
            lines.append("✩ *Last Updated*: N/A")
        lines += [
            f"✩ *URL*: {repo.html_url}",
            f"✩ *Developer*: {cfg.bot_developer}",
            f"✩ *Features*: {cfg.bot_features}",
            f"✩ *Status*: {cfg.bot_status}",
            "",
            f"✩ *Stars*: {repo.stars}  •  *Forks*: {repo.forks}  •  *Watchers*: {repo.watchers}",
        ]
        if metadata.version:
            lines.append(f"✩ *Bot Version*: v{metadata.version}")
        lines += [
            f"✩ *Uptime*: {human_duration(metadata.uptime_seconds)}",
            "",
            f"💥 *{cfg.bot_tagline}*",
            "",
            "✨ *Extra Info* ✨",
        ]
        return "\n".join(lines) + "\n"

    def _format_extras(self, repo: RepositorySnapshot, facts: AuxiliaryFacts) -> str:
        """부가 정보 블록을 만든다. 수집에 실패한 항목은 생략한다."""
        lines: list[str] = []

        if facts.latest_commit:
            commit = facts.latest_commit
            age = relative_time(commit.date) if commit.date else "unknown time"
            lines.append(f'🔧 Latest commit: "{commit.message}" — {commit.author} ({age})')

        if facts.languages:
            shares = " • ".join(f"{lang.name} {lang.percent}%" for lang in facts.languages)
            lines.append(f"🧩 Languages: {shares}")

        if facts.open_pulls is not None:
            lines.append(f"🔁 Open PRs: {facts.open_pulls}")

        if facts.release:
            title = f" — {facts.release.name}" if facts.release.name else ""
            lines.append(f"🏷️ Latest release: {facts.release.tag}{title}")
        elif facts.latest_tag:
            lines.append(f"🏷️ Latest tag: {facts.latest_tag}")

        topics = repo.topics or facts.topics
        if topics:
            lines.append(f"🏷️ Topics: {' · '.join(topics[:6])}")

        if facts.top_level_items is not None:
            lines.append(f"📁 Top-level items: {facts.top_level_items} (files & folders)")

        lines += [
            "",
            f"💡 Quick Tip: Clone → `git clone {repo.html_url}.git`",
            f"🚀 Try commands: {' | '.join(self.config.suggested_commands)}",
            "",
            f"🔔 Community: {random.choice(COMMUNITY_MOODS)}",
            "",
            "🔗 Badges:",
        ]
        lines += [template.format(repo=repo.full_name) for template in BADGE_TEMPLATES]

        if facts.contributors:
            lines += ["", "👥 Top Contributors:"]
            lines += [
                f"{rank}. {c.login} — {c.contributions} contribs"
                for rank, c in enumerate(facts.contributors, 1)
            ]

        return "\n".join(lines) + "\n"

    async def _load_local_image(self) -> bytes | None:
        """로컬 이미지 파일을 읽는다."""
        path = self.config.image_path
        if not path.is_file():
            return None
        return await asyncio.to_thread(path.read_bytes)

    async def _load_image(self, repo: RepositorySnapshot) -> bytes | None:
        """로컬 이미지, 소유자 아바타 순으로 이미지를 구한다."""

        async def owner_avatar() -> bytes | None:
            return await self.source.fetch_avatar(repo.avatar_url)

        return await first_success([self._load_local_image, owner_avatar])

    async def build_report(self, repo: RepositorySnapshot) -> str:
        """리포트 본문을 만든다."""
        metadata = load_bot_metadata(self.config.version_file)
        text = self._format_header(repo, metadata)

        facts = await self.source.fetch_auxiliary(repo.full_name)
        text += self._format_extras(repo, facts)

        workflows = await self.source.fetch_workflow_count(repo.full_name)
        if workflows:
            text += f"\n⚙️ CI Workflows: {workflows} workflow(s) detected\n"

        return text

    async def report(self, connection: Connection, chat_id: str, message: Any) -> None:
        """저장소 정보를 조회해 리포트를 전송한다.

        Args:
            connection: 메신저 연결
            chat_id: 응답할 채팅방 ID
            message: 명령을 보낸 원본 메시지 (인용 답장에 사용)
        """
        replier = ChatReplier(connection, chat_id, quoted=message)
        try:
            text = extract_text(message)
            repo_id = parse_repository(text, self.config.github_repo)

            result = await self.source.fetch_repository(repo_id)
            if not result.ok or not isinstance(result.data, dict):
                logger.warning(f"Repository fetch failed: {repo_id} (status={result.status})")
                await replier.send_text(FETCH_FAILED_TEXT.format(repo=repo_id))
                return

            repo = RepositorySnapshot.from_api(result.data, repo_id)
            caption = await self.build_report(repo)
            image = await self._load_image(repo)

            if image:
                await replier.send_image(image, caption)
            else:
                await replier.send_text(caption)
            logger.info(f"Repository report sent: {repo.full_name} -> {chat_id}")
        except Exception:
            logger.exception("Repository info command failed")
            await replier.send_failure(ERROR_TEXT)


async def github_command(connection: Connection, chat_id: str, message: Any) -> None:
    """디스패처용 진입점."""
    await RepositoryInfoReporter().report(connection, chat_id, message)
