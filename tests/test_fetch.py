import json

import pytest

from gh_repo_manager.core.fetch import (
    FetchError,
    build_list_command,
    fetch_repositories,
    parse_repo_list,
    sort_repositories,
)
from gh_repo_manager.domain.models import RepoRecord
from gh_repo_manager.infra.process import ProcessResult


def _repo(name, pushed=None, created=None):
    return RepoRecord.from_dict({"name": name, "pushedAt": pushed, "createdAt": created})


def test_build_list_command_omits_visibility_for_all():
    assert build_list_command("acme") == [
        "gh", "repo", "list", "acme", "--limit", "1000",
        "--json", "name,url,description,pushedAt,createdAt,sshUrl,visibility",
    ]


def test_build_list_command_with_visibility():
    command = build_list_command("acme", "internal")

    assert command[command.index("--visibility") + 1] == "internal"
    assert command[-2] == "--json"


def test_sort_by_name_is_case_insensitive_and_stable():
    repos = [_repo("beta"), _repo("Alpha"), _repo("alpha"), _repo("Gamma")]

    names = [repo.name for repo in sort_repositories(repos, "name")]

    assert names == ["Alpha", "alpha", "beta", "Gamma"]


def test_sort_by_pushed_is_newest_first_with_missing_last():
    repos = [
        _repo("old", pushed="2020-01-01T00:00:00Z"),
        _repo("none"),
        _repo("new", pushed="2024-06-01T00:00:00Z"),
        _repo("mid", pushed="2022-03-01T00:00:00Z"),
    ]

    names = [repo.name for repo in sort_repositories(repos, "pushed")]

    assert names == ["new", "mid", "old", "none"]


def test_sort_by_created_uses_created_at():
    repos = [
        _repo("a", created="2019-01-01T00:00:00Z", pushed="2024-01-01T00:00:00Z"),
        _repo("b", created="2021-01-01T00:00:00Z", pushed="2020-01-01T00:00:00Z"),
    ]

    names = [repo.name for repo in sort_repositories(repos, "created")]

    assert names == ["b", "a"]


def test_parse_repo_list_rejects_malformed_output():
    with pytest.raises(FetchError):
        parse_repo_list("not json")
    with pytest.raises(FetchError):
        parse_repo_list('{"name": "x"}')
    with pytest.raises(FetchError):
        parse_repo_list("")


def test_fetch_repositories_runs_gh_and_sorts(fake_runner):
    payload = [
        {"name": "zeta", "url": "https://github.com/acme/zeta", "visibility": "PUBLIC"},
        {"name": "Alpha", "url": "https://github.com/acme/Alpha", "visibility": "PUBLIC"},
    ]
    runner = fake_runner(lambda command: ProcessResult(0, json.dumps(payload), ""))

    repos = fetch_repositories("acme", visibility="public", runner=runner)

    assert [repo.name for repo in repos] == ["Alpha", "zeta"]
    command, capture_output = runner.calls[0]
    assert command[:4] == ["gh", "repo", "list", "acme"]
    assert "--visibility" in command
    assert capture_output is True


def test_fetch_repositories_nonzero_exit_raises(fake_runner):
    runner = fake_runner(lambda command: ProcessResult(1, "", "HTTP 401: Bad credentials"))

    with pytest.raises(FetchError) as excinfo:
        fetch_repositories("acme", runner=runner)

    assert "Bad credentials" in str(excinfo.value)


def test_fetch_repositories_missing_gh_raises(fake_runner):
    def handler(command):
        raise FileNotFoundError(2, "No such file or directory", "gh")

    with pytest.raises(FetchError):
        fetch_repositories("acme", runner=fake_runner(handler))
