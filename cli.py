"""CLI entry point — no TUI, quick interaction via Rich console.

Usage:
  python cli.py chat                      # Interactive conversation
  python cli.py ask "RRSP or TFSA first?" # One question, one reply
  python cli.py render reply.txt          # Show how a reply would render (offline)
  python cli.py starters                  # List the starter prompts
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from config.settings import Settings
from conversation.controller import ConversationController
from conversation.feedback import FEEDBACK_OPTIONS
from conversation.prompts import (
    ASSISTANT_NAME,
    FEEDBACK_THANKS,
    FEEDBACK_TITLE,
    QUICK_REPLY_HINT,
    STARTER_PROMPTS,
)
from core.turn import Speaker, Turn
from render.formatter import RenderedTurn, render_turn
from ui.markup import turn_to_text

console = Console()


def print_turn(rendered: RenderedTurn) -> None:
    """Print one turn, with numbered pills when it offers any."""
    console.print(turn_to_text(rendered))
    if rendered.quick_replies:
        pills = "  ".join(
            f"[bold]\\[{i}][/] {escape(option)}"
            for i, option in enumerate(rendered.quick_replies, start=1)
        )
        console.print(pills)
        console.print(f"[dim]{QUICK_REPLY_HINT}[/]")
    console.print()


def resolve_pill(user_input: str, options: tuple[str, ...] | None) -> str:
    """Map a bare pill number to its label; anything else is sent as typed."""
    choice = user_input.strip()
    if options and choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1]
    return user_input


def ask_feedback(controller: ConversationController) -> None:
    labels = list(FEEDBACK_OPTIONS)
    console.print(Panel(
        "  ".join(f"{FEEDBACK_OPTIONS[label]} {label}" for label in labels),
        title=FEEDBACK_TITLE,
        border_style="green",
    ))
    answer = Prompt.ask("Your pick (blank to skip)", choices=labels + [""], default="")
    if answer:
        controller.select_feedback(answer)
        console.print(f"[dim]{FEEDBACK_THANKS}[/]\n")


async def cmd_chat(args, settings: Settings) -> None:
    """Interactive conversation with MoneyBuddy."""
    controller = ConversationController(settings=settings)

    console.print(Panel(
        "Your money coach. [italic]No jargon. No judgment. 💸[/]\n"
        "[dim]Not financial advice — the final call is always yours.[/]",
        title=ASSISTANT_NAME,
        border_style="green",
    ))
    console.print("[dim]Type 'quit' or 'exit' to leave. Try one of these:[/]")
    for i, starter in enumerate(STARTER_PROMPTS, start=1):
        console.print(f"  [bold]s{i}[/] {starter.emoji} {starter.text}")
    console.print()

    try:
        while True:
            try:
                user_input = Prompt.ask("[bold cyan]You[/]")
            except (KeyboardInterrupt, EOFError):
                break

            if user_input.strip().lower() in ("quit", "exit", "/q", "/quit"):
                break
            if not user_input.strip():
                continue

            starter_keys = {f"s{i}": s.text for i, s in enumerate(STARTER_PROMPTS, start=1)}
            if not controller.started and user_input.strip().lower() in starter_keys:
                user_input = starter_keys[user_input.strip().lower()]
            else:
                user_input = resolve_pill(user_input, controller.latest_quick_replies())

            was_shown = controller.feedback.shown
            with console.status(f"{ASSISTANT_NAME} is thinking 💸💸💸"):
                await controller.submit(user_input)

            print_turn(controller.rendered()[-1])

            if controller.feedback.shown and not was_shown:
                ask_feedback(controller)
    finally:
        await controller.close()

    console.print("[dim]Conversation ended.[/]")


async def cmd_ask(args, settings: Settings) -> None:
    """Send a single message and print the reply."""
    controller = ConversationController(settings=settings)
    try:
        with console.status(f"{ASSISTANT_NAME} is thinking 💸💸💸"):
            await controller.submit(args.message)
        for rendered in controller.rendered():
            print_turn(rendered)
    finally:
        await controller.close()

    if controller.last_error is not None:
        sys.exit(2)


def cmd_render(args) -> None:
    """Render a reply text without calling the API."""
    if args.file and args.file != "-":
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    rendered = render_turn(Turn(speaker=Speaker.ASSISTANT, text=text))
    print_turn(rendered)

    table = Table(title="Render lines")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Bold")
    table.add_column("Content")
    for i, line in enumerate(rendered.lines, start=1):
        table.add_row(str(i), line.kind.value, "yes" if line.emphasized else "", Text(line.text))
    console.print(table)

    options = ", ".join(rendered.quick_replies) if rendered.quick_replies else "-"
    console.print(f"[bold]Quick replies:[/] {escape(options)}")
    console.print(f"[bold]Ends with question:[/] {rendered.ends_with_question}")


def cmd_starters(args) -> None:
    """List the starter prompts."""
    table = Table(title="Starter prompts")
    table.add_column("#", justify="right")
    table.add_column("", width=3)
    table.add_column("Prompt")
    for i, starter in enumerate(STARTER_PROMPTS, start=1):
        table.add_row(str(i), starter.emoji, starter.text)
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MoneyBuddy CLI",
        prog="python cli.py",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # chat
    subparsers.add_parser("chat", help="Interactive conversation")

    # ask
    p_ask = subparsers.add_parser("ask", help="Send one message and print the reply")
    p_ask.add_argument("message", help="Your message")

    # render
    p_render = subparsers.add_parser("render", help="Render a reply text offline")
    p_render.add_argument("file", nargs="?", default="-", help="Reply text file (default: stdin)")

    # starters
    subparsers.add_parser("starters", help="List starter prompts")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    settings = Settings()
    log_path = Path(settings.LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
    )

    # Offline commands need no API key
    if args.command == "render":
        cmd_render(args)
        return
    if args.command == "starters":
        cmd_starters(args)
        return

    if not settings.ANTHROPIC_API_KEY:
        console.print("[red]ERROR: ANTHROPIC_API_KEY not found in .env file.[/]")
        console.print("Please create a .env file: ANTHROPIC_API_KEY=sk-...")
        sys.exit(1)

    cmd_map = {
        "chat": cmd_chat,
        "ask": cmd_ask,
    }

    handler = cmd_map.get(args.command)
    if handler:
        asyncio.run(handler(args, settings))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
