from __future__ import annotations

from typing import Optional

from github import Github

from .confirmation import confirm
from .github_utils import create_pull_requests, get_github_client
from .models import RunConfig, summarize_results
from .prompts import PromptSession
from .validation import validate


def run_pipeline(config: RunConfig, session: Optional[PromptSession] = None, gh: Optional[Github] = None) -> int:
    """Prompt, validate, confirm, then open one PR per selected repository.

    Fatal problems are raised as `MultiPRError` subclasses for the caller to
    report. Returns the process exit code for the completed or cancelled run.
    """
    session = session or PromptSession()

    print("\n📄 STEP 1: Choosing repositories and branches")
    print("-" * 30)
    selection = session.collect_selection(config)

    print("\n📄 STEP 2: Validating input")
    print("-" * 30)
    validated = validate(selection)

    print("\n📄 STEP 3: Confirming")
    print("-" * 30)
    confirmed = confirm(validated, session)
    if confirmed is None:
        print("Operation cancelled by the user.")
        return 0

    print("\n📄 STEP 4: Creating pull requests")
    print("-" * 30)
    if gh is None:
        gh = get_github_client(config)
    results = create_pull_requests(gh, config, confirmed)

    created, failed = summarize_results(results)
    print()
    print("=" * 50)
    if failed:
        print(f"⚠️  Finished with errors: {created} created, {failed} failed")
        for result in results:
            if not result.ok:
                print(f"   ❌ {result.repository}: {result.error}")
    else:
        print(f"🎉 SUCCESS! {created} pull request(s) created")
    for result in results:
        if result.ok:
            print(f"   🔗 {result.repository}: {result.url}")
    return 0
