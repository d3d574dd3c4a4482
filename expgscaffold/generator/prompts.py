from dataclasses import dataclass
from typing import Callable
from .console import console


Ask = Callable[[str], str]


class InvalidAnswerError(ValueError):
    pass


@dataclass(frozen=True)
class Answers:
    project_name: str
    author_name: str
    has_remote: bool
    repo_url: str
    typescript: bool

    @property
    def context(self) -> dict:
        return {
            "project_name": self.project_name,
            "author_name": self.author_name,
            "repo_url": self.repo_url,
        }


def ask_question(query: str) -> str:
    return console.input(query)


def _yes_no(answer: str) -> bool:
    if answer not in ("y", "n"):
        raise InvalidAnswerError("Invalid input. Please enter 'y' or 'n'.")
    return answer == "y"


def collect_answers(ask: Ask = ask_question) -> Answers:
    """Run the prompt sequence. Raises InvalidAnswerError on the first bad y/n answer."""
    project_name = ask("Project name: ")
    author_name = ask("Author name: ")
    has_remote = _yes_no(ask("Do you have a GitHub repository? (y/n) ").lower())
    repo_url = ask("GitHub repository URL: ") if has_remote else ""
    # not lower-cased, unlike the remote question
    typescript = _yes_no(ask("Do you want to use TypeScript? (y/n) "))
    return Answers(project_name, author_name, has_remote, repo_url, typescript)
