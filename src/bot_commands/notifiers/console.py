"""터미널 출력용 연결 (CLI 테스트용)."""

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class ConsoleConnection:
    """전송할 메시지를 Rich 패널로 터미널에 출력한다."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.sent: list[dict[str, Any]] = []

    async def send_message(
        self,
        chat_id: str,
        content: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> None:
        """메시지를 출력하고 기록한다."""
        self.sent.append(content)

        if "image" in content:
            size = len(content["image"])
            self.console.print(f"[dim]🖼️ image attached ({size:,} bytes)[/dim]")
            body = content.get("caption", "")
        else:
            body = content.get("text", "")

        self.console.print(
            Panel(Text(body), title=f"[cyan]{chat_id}[/cyan]", border_style="blue")
        )
