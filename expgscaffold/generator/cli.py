import argparse
from pathlib import Path
from rich.markup import escape

from .console import console, err_console
from .config import ConfigError, load_settings
from .orchestrator import run_scaffold
from .prompts import Ask, InvalidAnswerError, ask_question, collect_answers


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="create-expg-server",
        description="Scaffold an Express + PostgreSQL server project.",
    )
    p.add_argument("--cwd", default=None, help="Directory the project folder is created in (default: current)")
    p.add_argument("--config", "-c", default=None, help="YAML settings file")
    p.add_argument("--skip-git", action="store_true", help="Do not run git init / branch rename")
    p.add_argument("--skip-install", action="store_true", help="Do not run npm install")
    return p


def main(argv=None, ask: Ask = ask_question) -> int:
    args = build_parser().parse_args(argv)
    cwd = Path(args.cwd).resolve() if args.cwd else Path.cwd()

    try:
        settings = load_settings(Path(args.config).resolve() if args.config else None, cwd=cwd)
    except ConfigError as e:
        err_console.print(f"[red]Invalid config:[/] {escape(str(e))}")
        return 2

    console.print("Welcome to create-expg-server!")
    try:
        answers = collect_answers(ask)
    except InvalidAnswerError as e:
        err_console.print(f"[red]{escape(str(e))}[/]")
        return 1

    run_scaffold(
        answers,
        cwd,
        settings=settings,
        git=not args.skip_git,
        install=not args.skip_install,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
