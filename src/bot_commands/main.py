"""CLI 엔트리포인트.

메신저 연결 없이 명령 핸들러를 실행하고 응답을 터미널에 출력한다.
"""

import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console

from bot_commands.commands import LyricsReporter, RepositoryInfoReporter
from bot_commands.notifiers import ConsoleConnection

console = Console()

app = typer.Typer(
    name="bot-commands",
    help="채팅 봇 명령(.github, .lyrics)을 터미널에서 실행합니다.",
    no_args_is_help=True,
)

CHAT_ID = "console"


@app.callback()
def _setup(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="디버그 로그 출력"),
    ] = False,
) -> None:
    """로깅을 설정한다."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def repo(
    text: Annotated[
        str,
        typer.Argument(help="명령 메시지 본문 (예: 'owner/repo'). 비우면 기본 저장소."),
    ] = "",
) -> None:
    """GitHub 저장소 리포트를 출력합니다."""
    connection = ConsoleConnection(console)
    message = {"text": text}
    try:
        asyncio.run(RepositoryInfoReporter().report(connection, CHAT_ID, message))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None


@app.command()
def lyrics(
    title: Annotated[
        str,
        typer.Argument(help="곡 제목 (예: 'Alan Walker - Faded')"),
    ] = "",
) -> None:
    """가사를 검색해 출력합니다."""
    connection = ConsoleConnection(console)
    message = {"text": f".lyrics {title}".strip()}
    try:
        asyncio.run(LyricsReporter().report(connection, CHAT_ID, title, message))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None


if __name__ == "__main__":
    app()
