import os
from pathlib import Path


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / ".git").is_dir() or (parent / "pyproject.toml").is_file():
            return parent

    return Path(__file__).resolve().parents[2]


def resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SMARTBUDGET_ENV_FILE env var (full path or relative to project root)
    2. .env in the project root
    """
    env_file_path = os.environ.get("SMARTBUDGET_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    default_env = _find_project_root() / ".env"
    if default_env.exists():
        return default_env

    return None
