# cli.py - command line interface for the dictionary assistant
"""
Usage:
    dictionary-assistant [--config PATH]                 interactive loop
    dictionary-assistant [--config PATH] lookup WORD     one-shot lookup
    dictionary-assistant [--config PATH] suggest PREFIX  one-shot autocomplete
    dictionary-assistant [--config PATH] tui             live terminal UI

Interactive commands: /lookup <word>, /suggest <prefix>, /stats,
/config [key val], /bench [n], /help, /quit. Bare text is looked up.
"""

import argparse
import random
import shlex
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from dictionary_assistant.assistant import DictionaryAssistant
from dictionary_assistant.core.errors import ConstructionError, DictionaryError
from dictionary_assistant.core.protocols import is_not_found
from dictionary_assistant.utils.timing import timed
from dictionary_assistant.utils.config_manager import Config
from dictionary_assistant.utils.logger_utils import configure_logging
from dictionary_assistant.utils.metrics_tracker import Metrics
from dictionary_assistant.utils.threaded_runner import run_parallel

BANNER = "Dictionary Assistant (type /help for cmds)"


class CLI:
    """Interactive loop plus the command handlers shared with one-shot mode."""

    def __init__(self, assistant: DictionaryAssistant, cfg: Config,
                 metrics: Optional[Metrics] = None, console: Optional[Console] = None):
        self.assistant = assistant
        self.cfg = cfg
        self.metrics = metrics or Metrics(cfg.get("metrics_path"))
        self.console = console or Console()
        self.running = True

    def start(self):
        self.console.rule(f"[bold magenta]{BANNER}[/bold magenta]")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console).strip()
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            if not line:
                continue
            self.handle(line)

    def handle(self, line: str):
        """Run one line of input; errors are reported, never raised."""
        try:
            if line.startswith("/"):
                self.cmd(line)
            else:
                self.lookup(line)
        except DictionaryError as e:
            self.console.print(f"[red]error:[/red] {escape(str(e))}")

    def cmd(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError:
            # unbalanced quote, e.g. an apostrophe in "it's"
            p = line.split()
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")

        elif c == "/help":
            self.console.print("cmds: /lookup <word>, /suggest <prefix>, /stats")
            self.console.print("      /config [key val], /bench [n], /quit")

        elif c == "/lookup" and len(p) > 1:
            self.lookup(" ".join(p[1:]))

        elif c == "/suggest" and len(p) > 1:
            self.suggest(" ".join(p[1:]))

        elif c == "/stats":
            self.show_stats()

        elif c == "/config":
            if len(p) == 1:
                self.show_config()
            elif len(p) == 3:
                try:
                    self.cfg.set(p[1], p[2])
                    self.console.print(f"{p[1]} = {self.cfg.get(p[1])} (takes effect on restart)")
                except ValueError as e:
                    self.console.print(f"[red]{e}[/red]")
            else:
                self.console.print("usage: /config [key val]")

        elif c == "/bench":
            n = int(p[1]) if len(p) > 1 and p[1].isdigit() else 100
            self.bench(n)

        else:
            self.console.print("unknown cmd")

    # commands ---------------------------------------------------------------
    def lookup(self, word: str):
        result, dt = timed(self.assistant.lookup)(word)
        self.metrics.record("lookup_time", dt)
        if is_not_found(result):
            self.console.print(f"[yellow]{result['error']}[/yellow]")
            return
        body = f"[bold]{escape(result['meaning'])}[/bold]"
        for usage in (result["usage1"], result["usage2"]):
            if usage:
                body += f"\n[dim]•[/dim] [italic]{escape(usage)}[/italic]"
        self.console.print(Panel(body, title=escape(word.strip()), subtitle=f"{dt * 1000:.2f} ms"))

    def suggest(self, prefix: str):
        words, dt = timed(self.assistant.suggest)(prefix)
        self.metrics.record("suggest_time", dt)
        if not words:
            self.console.print("[dim]No suggestions[/dim]")
            return
        limit = self.cfg.get("max_suggestions")
        for i, w in enumerate(words[:limit], 1):
            self.console.print(f"[b]{i}[/b] • [cyan]{escape(w)}[/cyan]")
        if len(words) > limit:
            self.console.print(f"[dim]... {len(words) - limit} more[/dim]")

    def show_stats(self):
        st = self.assistant.stats()
        table = Table(title="Stats")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("mode", st["mode"])
        table.add_row("words", str(st["words"]))
        table.add_row("uptime (s)", str(st["uptime_s"]))
        for k, v in st["cache"].items():
            table.add_row(f"cache {k}", str(v))
        for k, count, avg in self.metrics.summary():
            table.add_row(f"{k} avg (ms)", f"{avg * 1000:.3f} (n={count})")
        self.console.print(table)

    def show_config(self):
        table = Table(title="Config")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.show():
            table.add_row(k, str(v))
        self.console.print(table)

    def bench(self, n: int = 100):
        """Fire `n` concurrent lookups of random stored/unknown words."""
        pool = ["apple", "cat", "house", "zzz", "nothing", "dog"]
        tasks = [lambda w=random.choice(pool): self.assistant.lookup(w) for _ in range(n)]
        results, dt = timed(run_parallel)(tasks, max_workers=8)
        self.metrics.record("bench_time", dt)
        self.console.print(f"bench: {len(results)} lookups, {dt / max(n, 1) * 1000:.4f} ms avg")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dictionary-assistant", description="Dictionary lookup and autocomplete")
    ap.add_argument("--config", default="config.json", help="path to config JSON")
    sub = ap.add_subparsers(dest="command")
    lk = sub.add_parser("lookup", help="show a word's meaning")
    lk.add_argument("word")
    sg = sub.add_parser("suggest", help="list words starting with a prefix")
    sg.add_argument("prefix")
    sub.add_parser("tui", help="live autocomplete terminal UI")
    return ap


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)
    configure_logging(cfg.get("log_level"), cfg.get("log_path"))

    try:
        assistant = DictionaryAssistant.from_config(cfg)
    except ConstructionError as e:
        console.print(f"[red]startup failed:[/red] {escape(str(e))}")
        return 1

    if args.command == "tui":
        from dictionary_assistant.tui_app import DictionaryTUI
        DictionaryTUI(assistant, max_suggestions=cfg.get("max_suggestions")).run()
        return 0

    cli = CLI(assistant, cfg, console=console)
    if args.command == "lookup":
        cli.handle(f"/lookup {shlex.quote(args.word)}")
    elif args.command == "suggest":
        cli.handle(f"/suggest {shlex.quote(args.prefix)}")
    else:
        cli.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
