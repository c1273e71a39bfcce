"""
Bot panel: the status surface the developer looks at.

Holds the current emotion, code stats and session stats and renders them as
a self-contained HTML page. When an ``output_path`` is given the page is
written there on every refresh, so a browser tab can stand in for an editor
webview.

buddybot/src/buddybot/panel.py
"""

import html
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from .emotion import CONCERNED, FOCUSED, FRUSTRATED, HAPPY, EmotionState

if TYPE_CHECKING:
    from .analyzer import AnalysisResult

logger = logging.getLogger(__name__)

__all__ = ["BotPanel", "CodeStats", "EMOJI_MAP", "format_duration"]

PANEL_TITLE = "Coding Buddy Bot"

EMOJI_MAP = {
    HAPPY: "😊",
    FRUSTRATED: "😤",
    CONCERNED: "😟",
    FOCUSED: "🤓",
}
DEFAULT_EMOJI = EMOJI_MAP[HAPPY]

WELCOME_MESSAGES = [
    "🎯 Welcome to your coding session!",
    "💪 I'm here to cheer you on and keep you healthy!",
    "🌟 Remember: Every great developer started somewhere!",
]


class CodeStats(dict):
    """Subset of an analysis result the panel displays."""

    @classmethod
    def from_result(cls, result: "AnalysisResult") -> "CodeStats":
        return cls(
            lineCount=result.line_count,
            errorCount=result.error_count,
            complexity=result.complexity,
            quality=result.quality.value,
        )

    @classmethod
    def empty(cls) -> "CodeStats":
        return cls(lineCount=0, errorCount=0, complexity=0, quality="good")


def format_duration(milliseconds: float) -> str:
    """``1h 5m`` style for an hour or more, ``5m`` below that."""
    minutes = int(milliseconds // 60000)
    hours = minutes // 60
    return f"{hours}h {minutes % 60}m" if hours > 0 else f"{minutes}m"


class BotPanel:
    """Presentation shell for the bot.

    ``reveal_on_update`` decides what an emotion update does to a hidden
    panel: True opens it, False only refreshes a panel that is already shown.
    """

    def __init__(self, reveal_on_update: bool = True, output_path: Optional[Path] = None):
        self.reveal_on_update = reveal_on_update
        self.output_path = output_path
        self.visible = False
        self.reveal_count = 0
        self.state = EmotionState()
        self.code_stats = CodeStats.empty()
        self.session_duration = 0.0
        self.breakthrough_count = 0
        self.focus_time = 0.0
        self.last_html = ""
        self._commands: Dict[str, Callable[[], Any]] = {}

    def register_command(self, command: str, handler: Callable[[], Any]) -> None:
        """Bind a webview message command (``startSession``...) to a handler."""
        self._commands[command] = handler

    def show(self) -> None:
        """Create the panel, or bring it to front if it already exists."""
        if self.visible:
            self.reveal_count += 1
            return
        self.visible = True
        logger.debug("Bot panel created")
        self.refresh()

    def refresh(self) -> None:
        if not self.visible:
            return
        self.last_html = self.render()
        if self.output_path is not None:
            self.output_path.write_text(self.last_html, encoding="utf-8")

    def update_emotion(self, emotion: str, reason: Optional[str] = None) -> None:
        logger.debug(f"update_emotion called: {emotion}, reason: {reason}")
        self.state = EmotionState(emotion, reason or self.state.reason)
        if self.reveal_on_update:
            self.show()
        self.refresh()

    def update_code_stats(self, result: "AnalysisResult") -> None:
        self.code_stats = CodeStats.from_result(result)
        self.refresh()

    def update_session_stats(self, duration: float, breakthroughs: int, focus: float) -> None:
        """Durations are in milliseconds."""
        self.session_duration = duration
        self.breakthrough_count = breakthroughs
        self.focus_time = focus
        self.refresh()

    def handle_message(self, message: Dict[str, Any]) -> bool:
        """Dispatch a message posted by the page. Unknown commands are ignored."""
        handler = self._commands.get(message.get("command", ""))
        if handler is None:
            logger.debug(f"Ignoring panel message: {message}")
            return False
        handler()
        return True

    def bot_emoji(self) -> str:
        return EMOJI_MAP.get(self.state.emotion, DEFAULT_EMOJI)

    def dispose(self) -> None:
        self.visible = False
        logger.debug("Bot panel disposed")

    def render(self) -> str:
        esc = html.escape
        stats = self.code_stats
        session_cards = [
            ("⏱️", format_duration(self.session_duration), "Session Time"),
            ("🚀", str(self.breakthrough_count), "Breakthroughs"),
            ("🎯", f"{int(self.focus_time // 60000)}m", "Focus Time"),
        ]
        code_cards = [
            ("📝", stats["lineCount"], "Lines of Code"),
            ("❌", stats["errorCount"], "Errors"),
            ("🧠", stats["complexity"], "Complexity"),
            ("⭐", stats["quality"], "Quality"),
        ]
        session_html = "\n".join(_card("stat", icon, value, label) for icon, value, label in session_cards)
        code_html = "\n".join(_card("code-stat", icon, value, label) for icon, value, label in code_cards)
        messages_html = "\n".join(f'<div class="message">{esc(m)}</div>' for m in WELCOME_MESSAGES)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{PANEL_TITLE}</title>
<style>
body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 0; padding: 20px;
       background: #3b3f8f; color: white; min-height: 100vh; }}
.bot-container {{ text-align: center; max-width: 600px; margin: 0 auto; }}
.bot-avatar {{ font-size: 120px; margin: 20px 0; animation: pulse 2s infinite; }}
.bot-status, .code-analysis {{ background: rgba(255, 255, 255, 0.1); padding: 20px; border-radius: 15px; margin: 20px 0; }}
.emotion-display {{ font-size: 24px; margin: 15px 0; padding: 10px; background: rgba(255, 255, 255, 0.2); border-radius: 10px; }}
.reason-display {{ font-size: 18px; padding: 12px; background: rgba(255, 255, 255, 0.15); border-radius: 10px; font-style: italic; }}
.stats-grid, .code-stats-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(120px, 1fr)); gap: 15px; margin: 15px 0; }}
.stat-card, .code-stat-card {{ background: rgba(255, 255, 255, 0.15); padding: 12px; border-radius: 10px; }}
.stat-value, .code-stat-value {{ font-size: 24px; font-weight: bold; margin: 5px 0; }}
.stat-icon, .code-stat-icon {{ font-size: 18px; }}
.stat-label, .code-stat-label {{ font-size: 12px; opacity: 0.8; }}
.btn {{ background: rgba(255, 255, 255, 0.2); border: none; color: white; padding: 12px 24px; margin: 5px;
        border-radius: 25px; cursor: pointer; font-size: 16px; }}
.message-log {{ background: rgba(0, 0, 0, 0.2); padding: 15px; border-radius: 10px; text-align: left; }}
.message {{ margin: 5px 0; padding: 8px; background: rgba(255, 255, 255, 0.1); border-radius: 8px; font-size: 14px; }}
@keyframes pulse {{ 0% {{ transform: scale(1); }} 50% {{ transform: scale(1.05); }} 100% {{ transform: scale(1); }} }}
</style>
</head>
<body>
<div class="bot-container">
<div class="bot-avatar">{self.bot_emoji()}</div>
<h1>🤖 {PANEL_TITLE}</h1>
<div class="bot-status">
<h2>Current Status</h2>
<div class="emotion-display">🎭 Feeling: <strong>{esc(self.state.emotion)}</strong></div>
<div class="reason-display">💭 {esc(self.state.reason)}</div>
</div>
<div class="stats-grid">
{session_html}
</div>
<div class="code-analysis">
<h3>📊 Code Analysis</h3>
<div class="code-stats-grid">
{code_html}
</div>
</div>
<div class="controls">
<button class="btn" onclick="post('startSession')">🚀 Start Session</button>
<button class="btn" onclick="post('stopSession')">⏹️ Stop Session</button>
</div>
<div class="message-log">
<h3>💬 Recent Messages</h3>
{messages_html}
</div>
</div>
<script>
function post(command) {{
  if (typeof vscode !== 'undefined') {{ vscode.postMessage({{ command: command }}); }}
}}
</script>
</body>
</html>
"""


def _card(prefix: str, icon: str, value: Any, label: str) -> str:
    return (
        f'<div class="{prefix}-card">'
        f'<div class="{prefix}-icon">{icon}</div>'
        f'<div class="{prefix}-value">{html.escape(str(value))}</div>'
        f'<div class="{prefix}-label">{label}</div>'
        f"</div>"
    )
