from pathlib import Path
from typing import List
import yaml
from pydantic import BaseModel, ValidationError

DEFAULT_CONFIG = Path("config/create-expg-server.yml")

GITIGNORE = """
node_modules/
.env.*
""".strip()


class ConfigError(Exception):
    pass


class ScaffoldSettings(BaseModel):
    """External commands and generated ignore text; the argument lists are configuration."""

    git_init: List[str] = ["git", "init"]
    git_branch: List[str] = ["git", "branch", "-M", "main"]
    install: List[str] = ["npm", "install"]
    types_install: List[str] = [
        "npm", "install", "--save-dev",
        "@types/express", "@types/express-serve-static-core", "@types/node",
    ]
    gitignore: str = GITIGNORE


def load_settings(path: Path | None = None, cwd: Path | None = None) -> ScaffoldSettings:
    explicit = path is not None
    if explicit:
        cfg_path = Path(path)
    else:
        # only the default location follows the project base directory
        cfg_path = Path(cwd) / DEFAULT_CONFIG if cwd is not None else DEFAULT_CONFIG

    if not cfg_path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {cfg_path}")
        return ScaffoldSettings()

    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read {cfg_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping")

    try:
        return ScaffoldSettings(**data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
