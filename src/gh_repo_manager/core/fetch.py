"""Fetch the repository list of an owner through `gh repo list`."""

import json
from typing import List, Optional

from ..domain.models import DEFAULT_VISIBILITY, RepoRecord
from ..infra.logger import log_info
from ..infra.process import ProcessRunner, SubprocessRunner

REPO_LIMIT = 1000
REPO_FIELDS = ("name", "url", "description", "pushedAt", "createdAt", "sshUrl", "visibility")


class FetchError(RuntimeError):
    """`gh repo list` could not be run or returned unusable output."""


def build_list_command(owner: str, visibility: str = DEFAULT_VISIBILITY) -> List[str]:
    command = ["gh", "repo", "list", owner, "--limit", str(REPO_LIMIT)]
    if visibility != DEFAULT_VISIBILITY:
        command += ["--visibility", visibility]
    command += ["--json", ",".join(REPO_FIELDS)]
    return command


def parse_repo_list(text: Optional[str]) -> List[RepoRecord]:
    """Parse the JSON array printed by `gh repo list --json`."""
    try:
        data = json.loads(text or "")
    except ValueError as exc:
        raise FetchError(f"invalid JSON from gh: {exc}") from exc

    if not isinstance(data, list):
        raise FetchError(f"unexpected response from gh: expected a JSON array, got {type(data).__name__}")

    repos = []
    for item in data:
        if not isinstance(item, dict) or not item.get("name"):
            raise FetchError(f"unexpected repository entry from gh: {item!r}")
        repos.append(RepoRecord.from_dict(item))
    return repos


def sort_repositories(repos: List[RepoRecord], sort: str) -> List[RepoRecord]:
    """Order repositories for display.

    ``pushed``/``created`` sort ascending by timestamp and then reverse the
    whole list, so the newest comes first and entries without a timestamp
    end up last. Anything else sorts by name, case-insensitively.
    """
    if sort == "pushed":
        return list(reversed(sorted(repos, key=lambda repo: repo.pushed_at or "")))
    if sort == "created":
        return list(reversed(sorted(repos, key=lambda repo: repo.created_at or "")))
    return sorted(repos, key=lambda repo: repo.name.lower())


def fetch_repositories(
    owner: str,
    visibility: str = DEFAULT_VISIBILITY,
    sort: str = "name",
    runner: Optional[ProcessRunner] = None,
) -> List[RepoRecord]:
    """List up to ``REPO_LIMIT`` repositories of ``owner``, sorted.

    Raises:
        FetchError: gh is missing, exits non-zero, or prints malformed JSON
    """
    runner = runner or SubprocessRunner()
    command = build_list_command(owner, visibility)

    log_info(f"Fetching repositories for owner: {owner}...")
    try:
        result = runner.run(command, capture_output=True)
    except OSError as exc:
        raise FetchError(f"failed to run {command[0]}: {exc}") from exc

    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
        raise FetchError(f"gh repo list failed: {detail}")

    return sort_repositories(parse_repo_list(result.stdout), sort)
