"""Drive one scaffold run: render a profile, materialize it, then hand off to git and npm."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict
from rich.markup import escape

from .console import console, err_console
from .config import ScaffoldSettings
from .materializer import Outcome, materialize
from .prompts import Answers
from .renderer import TemplateRenderer, default_renderer, profile_for
from .shell import sh


@dataclass
class ScaffoldReport:
    target: Path
    profile: str
    outcomes: Dict[str, Outcome] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "target": str(self.target),
            "profile": self.profile,
            "outcomes": {k: v.value for k, v in self.outcomes.items()},
            "errors": dict(self.errors),
        }


def write_structure(target: Path, structure: Dict[str, str], report: ScaffoldReport) -> ScaffoldReport:
    """Materialize every entry under ``target`` in mapping order.

    A failing entry is reported and the loop moves on to the next one.
    """
    for rel_path, content in structure.items():
        try:
            report.outcomes[rel_path] = materialize(os.path.join(str(target), rel_path), content)
        except OSError as e:
            report.errors[rel_path] = str(e)
            err_console.print(f"[red]{escape(str(e))}[/]")
    return report


def write_gitignore(target: Path, settings: ScaffoldSettings) -> Outcome:
    return materialize(os.path.join(str(target), ".gitignore"), settings.gitignore)


def initialize_git_repo(target: Path, settings: ScaffoldSettings) -> None:
    console.print("Initializing git repository...")
    sh(settings.git_init, cwd=target)
    write_gitignore(target, settings)
    console.print("Git repository initialized with a .gitignore file.")


def install_dependencies(target: Path, settings: ScaffoldSettings, typescript: bool = False) -> None:
    if typescript:
        console.print("Setting up TypeScript...")
        sh(settings.types_install, cwd=target)
    console.print("Installing dependencies...")
    sh(settings.install, cwd=target)


def run_scaffold(
    answers: Answers,
    cwd: Path,
    settings: ScaffoldSettings | None = None,
    renderer: TemplateRenderer | None = None,
    git: bool = True,
    install: bool = True,
) -> ScaffoldReport:
    settings = settings or ScaffoldSettings()
    renderer = renderer or default_renderer()
    profile = profile_for(answers.typescript)
    target = Path(os.path.normpath(os.path.join(str(cwd), answers.project_name)))

    console.print(f"Creating project directory at {escape(str(target))}...")
    materialize(str(target) + os.sep)

    structure = renderer.render_structure(profile, answers.context)
    console.print("Creating project structure...")
    report = write_structure(target, structure, ScaffoldReport(target=target, profile=profile))

    if answers.has_remote:
        console.print("GitHub repository already exists.")
        write_gitignore(target, settings)
    elif git:
        console.print("Creating a new GitHub repository...")
        initialize_git_repo(target, settings)
        sh(settings.git_branch, cwd=target)
    else:
        write_gitignore(target, settings)

    if install:
        install_dependencies(target, settings, typescript=answers.typescript)

    console.print(f"\n[green]Success![/] Your Express app is ready at {escape(str(target))}")
    return report
