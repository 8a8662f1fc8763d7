from __future__ import annotations

from typing import Optional

from .models import ConfirmedSelection, UserSelection, ValidatedSelection
from .prompts import PromptSession

SEPARATOR = "-" * 33
CONFIRM_QUESTION = "Is this information correct? (yes/no)"


def render_summary(selection: UserSelection) -> str:
    lines = [
        SEPARATOR,
        "You have entered the following information:",
        "- Target Repositories:",
    ]
    for i, repo in enumerate(selection.selected_repositories, start=1):
        lines.append(f"  {i}. {repo}")
    lines.append(f"- Base Branch:    {selection.base_branch}")
    lines.append(f"- Compare Branch: {selection.compare_branch}")
    lines.append(f"- PR Title:       {selection.pr_title}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() == "yes"


def confirm(validated: ValidatedSelection, session: PromptSession) -> Optional[ConfirmedSelection]:
    """Show the summary and ask for an explicit ``yes``; anything else declines."""
    print(render_summary(validated.selection))
    print(CONFIRM_QUESTION)
    if not is_affirmative(session.read_line()):
        return None
    return ConfirmedSelection(validated=validated)
