from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def mask_secret(secret: str) -> str:
    if len(secret) <= 14:
        return "*" * len(secret)
    return f"{secret[:10]}...{secret[-4:]}"


@dataclass(frozen=True)
class RunConfig:
    access_token: str = field(repr=False)
    repository_owner: str
    selectable_repositories: Tuple[str, ...]
    selectable_branches: Tuple[str, ...]
    api_url: str = "https://api.github.com"


@dataclass(frozen=True)
class UserSelection:
    selected_repositories: Tuple[str, ...]
    base_branch: str
    compare_branch: str
    pr_title: str = ""


@dataclass(frozen=True)
class ValidatedSelection:
    """A selection that passed `validation.validate`; warnings are informational."""

    selection: UserSelection
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConfirmedSelection:
    """A validated selection the operator explicitly approved."""

    validated: ValidatedSelection

    @property
    def selection(self) -> UserSelection:
        return self.validated.selection


@dataclass(frozen=True)
class PRResult:
    repository: str
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def summarize_results(results: List[PRResult]) -> Tuple[int, int]:
    created = sum(1 for r in results if r.ok)
    return created, len(results) - created
