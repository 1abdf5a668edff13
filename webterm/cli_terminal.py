import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from webterm.container import container
from webterm.ports.events.event_bus_port import ENTITY_USE, THEME_CHANGED, EventBusPort
from webterm.ui.render import entity_controls, render_line
from webterm.ui.theme import ThemeName, build_theme, resolve_theme_name, toggle_theme
from webterm.use_cases.terminal.execute_command import ExecuteCommandUseCase

EXIT_COMMANDS = {"exit", "quit"}


class TranscriptRenderer:
    """Console observer of the session transcript.

    Each notification carries the full snapshot; lines already on screen are
    skipped, and a snapshot that no longer extends what was printed (clear,
    trim) triggers a full redraw.
    """

    def __init__(self, console: Console):
        self._console = console
        self._printed: list[str] = []

    def __call__(self, snapshot: list[str]) -> None:
        if snapshot[: len(self._printed)] != self._printed:
            self.redraw(snapshot)
            return
        for line in snapshot[len(self._printed) :]:
            self._console.print(render_line(line))
        self._printed = list(snapshot)

    def redraw(self, snapshot: list[str]) -> None:
        self._console.clear()
        for line in snapshot:
            self._console.print(render_line(line))
        self._printed = list(snapshot)


def _bind_events(
    bus: EventBusPort,
    console: Console,
    renderer: TranscriptRenderer,
    uc: ExecuteCommandUseCase,
) -> None:
    def on_theme(name: ThemeName) -> None:
        console.push_theme(build_theme(name))
        renderer.redraw(uc.session.transcript)

    def on_entity(name: str) -> None:
        console.print(Text(f"→ utilizzo {name}", style="ansi.gray"))

    bus.subscribe(THEME_CHANGED, on_theme)
    bus.subscribe(ENTITY_USE, on_entity)


async def _handle_meta(
    line: str,
    uc: ExecuteCommandUseCase,
    bus: EventBusPort,
    theme: ThemeName,
    console: Console,
) -> ThemeName:
    """Console-only commands: :up, :down, :use [name], :theme [name]."""
    name, _, arg = line[1:].partition(" ")
    arg = arg.strip()
    if name in ("up", "down"):
        recalled = uc.recall(name)  # type: ignore[arg-type]
        console.print(Text(recalled or "(riga corrente)", style="ansi.gray"))
    elif name == "use" and arg:
        await uc.activate_entity(arg)
    elif name == "use":
        controls = entity_controls("\n".join(uc.session.transcript))
        if controls:
            names = ", ".join(dict.fromkeys(controls))
            console.print(Text(names, style="entity.control"))
        else:
            console.print(Text("Nessuna entità da utilizzare", style="ansi.gray"))
    elif name == "theme":
        theme = resolve_theme_name(arg) if arg else toggle_theme(theme)
        bus.publish(THEME_CHANGED, theme)
    else:
        console.print(Text(f"{line}: comando console sconosciuto", style="ansi.red"))
    return theme


async def _repl(console: Console, theme: ThemeName) -> int:
    uc = container.get_execute_command_use_case()
    bus = container.get_event_bus()
    renderer = TranscriptRenderer(console)
    _bind_events(bus, console, renderer, uc)
    unsubscribe = uc.session.subscribe(renderer)

    console.rule(Text(uc.session.header, style="header"))
    console.print(
        Text(
            "Digita 'help' per la lista dei comandi, 'exit' per uscire.",
            style="ansi.gray",
        )
    )
    try:
        while True:
            try:
                prompt = f"[prompt]{escape(uc.session.prompt)}[/prompt] "
                line = await asyncio.to_thread(console.input, prompt)
            except KeyboardInterrupt:
                uc.cancel()
                continue
            except EOFError:
                break

            stripped = line.strip()
            if stripped in EXIT_COMMANDS:
                break
            if stripped.startswith(":"):
                theme = await _handle_meta(stripped, uc, bus, theme, console)
                continue
            await uc.execute(line)
    finally:
        unsubscribe()
        await container.aclose()
    return 0


async def _run_once(command: str) -> str:
    uc = container.get_execute_command_use_case()
    try:
        return await uc.execute(command)
    finally:
        await container.aclose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="webterm",
        description="Interactive terminal session with chaining (;) and pipes (|).",
    )
    parser.add_argument(
        "--theme",
        choices=["dark", "light"],
        default=None,
        help="Color theme (default: WEBTERM_THEME or dark)",
    )
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        help="Execute one line, print the result and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    theme = resolve_theme_name(args.theme)
    console = Console(theme=build_theme(theme), soft_wrap=True)

    if args.command is not None:
        output = asyncio.run(_run_once(args.command))
        console.print(render_line(output))
        return 0

    try:
        return asyncio.run(_repl(console, theme))
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
