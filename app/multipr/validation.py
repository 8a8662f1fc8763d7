from __future__ import annotations

from typing import List

from .errors import ValidationError
from .models import UserSelection, ValidatedSelection


def validate(selection: UserSelection) -> ValidatedSelection:
    """Check a selection before anything is shown or sent.

    Rules run in order and the first failure wins. An empty PR title is only
    a warning.
    """
    if not selection.selected_repositories:
        raise ValidationError("no repositories selected")
    if not selection.base_branch:
        raise ValidationError("base branch not selected")
    if not selection.compare_branch:
        raise ValidationError("compare branch not selected")

    warnings: List[str] = []
    if not selection.pr_title:
        warnings.append("PR title is empty")
    for warning in warnings:
        print(f"⚠️  Warning: {warning}")
    return ValidatedSelection(selection=selection, warnings=tuple(warnings))
