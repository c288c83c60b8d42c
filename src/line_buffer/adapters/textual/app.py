"""Executable Textual app that hosts the line buffer."""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding as TextualBinding
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
    from rich.markup import escape
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use line_buffer.adapters.textual.app"
    ) from exc

from line_buffer.buffer import EditorState, Metadata, RenderedLine, sample_state
from line_buffer.buffer.view import DEFAULT_CARET
from line_buffer.engine import LineBuffer
from line_buffer.runtime import telemetry

from .controller import TextualBufferAdapter, TextualUIHooks

CARET = DEFAULT_CARET


def format_rows(rows: Tuple[RenderedLine, ...]) -> str:
    width = len(str(len(rows)))
    output = []
    for row in rows:
        text = escape(row.text)
        if row.caret is not None:
            head, tail = escape(row.text[: row.caret]), escape(row.text[row.caret :])
            text = f"{head}[reverse]{CARET}[/reverse]{tail}"
        if row.number is not None:
            text = f"[dim]{row.number:>{width}}[/dim] {text}"
        output.append(text)
    return "\n".join(output)


class LineBufferApp(App[None]):
    """Minimal Textual UI rendering a LineBuffer with a caret."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        TextualBinding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        state: Optional[EditorState] = None,
        line_numbers: bool = True,
    ) -> None:
        super().__init__()
        self._initial_state = state
        self._line_numbers = line_numbers
        self.buffer: LineBuffer | None = None
        self.adapter: TextualBufferAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("line_buffer.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.buffer = LineBuffer(self._initial_state, name="textual")
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._logger.debug,
        )
        self.adapter = TextualBufferAdapter(
            self.buffer, hooks, line_numbers=self._line_numbers
        )
        metadata = self.buffer.state.metadata
        if metadata is not None:
            self.sub_title = metadata.file_path

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result.prevent_default:
            event.prevent_default()
        event.stop()

    def _update_view(self, rows: Tuple[RenderedLine, ...]) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(format_rows(rows))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def load_state(path: Path) -> EditorState:
    """Seed a snapshot from ``path``, recording it in the metadata."""

    stat = path.stat()
    metadata = Metadata(
        file_path=str(path),
        created_at=datetime.fromtimestamp(stat.st_ctime),
        updated_at=datetime.fromtimestamp(stat.st_mtime),
    )
    return EditorState.from_text(path.read_text(encoding="utf-8"), metadata=metadata)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the line buffer Textual demo.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        type=Path,
        help="Seed the buffer with the contents of a text file",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Seed the buffer with the sample document",
    )
    parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        default=not telemetry.env_flag("LINE_NUMBERS", True),
        help="Hide line numbers (env: LINE_BUFFER_LINE_NUMBERS)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=telemetry.env("LOG_PRESET", "production"),
        help="Telemetry preset; console presets interleave with the UI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    state: Optional[EditorState] = None
    if args.file is not None:
        state = load_state(args.file)
    elif args.sample:
        state = sample_state()
    app = LineBufferApp(state=state, line_numbers=not args.no_line_numbers)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
