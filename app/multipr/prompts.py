from __future__ import annotations

from typing import List, Sequence

import questionary

from .errors import PromptIOError
from .models import RunConfig, UserSelection


class PromptSession:
    """Interactive terminal prompts used to collect a `UserSelection`.

    Picker prompts go through questionary; free text is read with ``input()``.
    Terminal failures surface as `PromptIOError`. Ctrl-C is left to propagate
    as ``KeyboardInterrupt`` so the CLI can report an interruption.
    """

    def multi_select(self, message: str, options: Sequence[str]) -> List[str]:
        try:
            chosen = questionary.checkbox(message, choices=list(options)).unsafe_ask()
        except (EOFError, OSError) as e:
            raise PromptIOError(f"Error reading selection for {message!r}: {e}") from e
        chosen = chosen or []
        # presentation order, whatever order the toggles happened in
        return [option for option in options if option in chosen]

    def single_select(self, message: str, options: Sequence[str]) -> str:
        try:
            chosen = questionary.select(message, choices=list(options)).unsafe_ask()
        except (EOFError, OSError) as e:
            raise PromptIOError(f"Error reading selection for {message!r}: {e}") from e
        return chosen or ""

    def read_line(self, message: str = "") -> str:
        try:
            return input(message).strip()
        except (EOFError, OSError) as e:
            raise PromptIOError(f"Error reading input: {e}") from e

    def collect_selection(self, config: RunConfig) -> UserSelection:
        repositories = self.multi_select("Choose repositories:", config.selectable_repositories)
        base_branch = self.single_select("Choose a base branch:", config.selectable_branches)
        compare_branch = self.single_select("Choose a compare branch:", config.selectable_branches)
        title = self.read_line("Enter the PR title: ")
        return UserSelection(
            selected_repositories=tuple(dict.fromkeys(repositories)),
            base_branch=base_branch,
            compare_branch=compare_branch,
            pr_title=title,
        )
