from __future__ import annotations

import io
import json
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from .errors import ConfigError
from .models import RunConfig, mask_secret

DEFAULT_ENV_FILE = ".env"
DEFAULT_API_URL = "https://api.github.com"


def read_env_file(path: Path, required: bool = False) -> Dict[str, str]:
    """Parse a `.env`-style file into a dict.

    A missing file is only an error when the caller asked for it explicitly.
    A file that exists but cannot be read or contains a line python-dotenv
    cannot parse is always an error; python-dotenv itself would only warn
    and skip the line.
    """
    if not path.exists():
        if required:
            raise ConfigError(f"Env file not found: {path}")
        print(f"   ℹ️  No {path} file found, using process environment only")
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading env file {path}: {e}") from e

    for binding in parse_stream(io.StringIO(text)):
        if binding.error:
            raise ConfigError(
                f"Error loading env file {path}: could not parse line {binding.original.line}: "
                f"{binding.original.string.strip()!r}"
            )

    values = dotenv_values(stream=io.StringIO(text), interpolate=False)
    print(f"   📄 Loaded {len(values)} value(s) from {path}")
    return {k: v for k, v in values.items() if v is not None}


def parse_string_list(name: str, raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None or not raw.strip():
        raise ConfigError(f"{name} not set. Set it to a JSON array of strings.")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Error parsing {name}: {e}") from e
    if not isinstance(parsed, list):
        raise ConfigError(f"Error parsing {name}: expected a JSON array, got {type(parsed).__name__}")
    if not parsed:
        raise ConfigError(f"{name} is empty. List at least one option.")
    for item in parsed:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"Error parsing {name}: every entry must be a non-empty string, got {item!r}")
    return tuple(item.strip() for item in parsed)


def _require(values: Mapping[str, str], name: str, what: str) -> str:
    value = (values.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{what} not set. Set the {name} environment variable.")
    return value


def load_config(env_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> RunConfig:
    """Build the run configuration from an optional env file and the process environment.

    Process environment values take precedence over the file. Nothing is
    written back into ``os.environ``.
    """
    print("⚙️  Loading configuration...")
    if environ is None:
        environ = os.environ
    path = Path(env_file) if env_file else Path(DEFAULT_ENV_FILE)
    values: Dict[str, str] = read_env_file(path, required=env_file is not None)
    values.update(environ)

    token = _require(values, "GITHUB_ACCESS_TOKEN", "GitHub token")
    owner = _require(values, "REPOSITORY_OWNER", "Repository owner")
    repositories = parse_string_list("SELECTABLE_REPOSITORIES", values.get("SELECTABLE_REPOSITORIES"))
    branches = parse_string_list("SELECTABLE_BRANCHES", values.get("SELECTABLE_BRANCHES"))
    api_url = (values.get("GITHUB_API_URL") or "").strip() or DEFAULT_API_URL

    print(f"   Owner: {owner}")
    print(f"   Token: {mask_secret(token)} (masked)")
    print(f"   Repositories: {len(repositories)} selectable")
    print(f"   Branches: {len(branches)} selectable")
    return RunConfig(
        access_token=token,
        repository_owner=owner,
        selectable_repositories=repositories,
        selectable_branches=branches,
        api_url=api_url,
    )
