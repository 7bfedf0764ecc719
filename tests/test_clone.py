from gh_repo_manager.core.clone import (
    build_clone_command,
    build_pull_command,
    clone_repositories,
    clone_repository,
)
from gh_repo_manager.domain.models import RepoRecord
from gh_repo_manager.infra.process import ProcessResult


def _repos(*names):
    return [RepoRecord.from_dict({"name": name}) for name in names]


def test_existing_directory_triggers_pull(fake_runner, tmp_path):
    (tmp_path / "api").mkdir()
    runner = fake_runner()

    stats = clone_repositories(_repos("api", "web"), "acme", tmp_path, runner=runner)

    assert runner.commands == [
        build_pull_command(tmp_path / "api"),
        build_clone_command("acme", "web", tmp_path / "web"),
    ]
    assert runner.commands[0] == ["git", "-C", str(tmp_path / "api"), "pull"]
    assert runner.commands[1] == ["gh", "repo", "clone", "acme/web", str(tmp_path / "web")]
    assert (stats.cloned, stats.updated, stats.failed) == (1, 1, 0)


def test_first_clone_fails_second_succeeds(fake_runner, tmp_path):
    def handler(command):
        return ProcessResult(1 if command[3] == "acme/bad" else 0)

    runner = fake_runner(handler)

    stats = clone_repositories(_repos("bad", "good"), "acme", tmp_path, runner=runner)

    assert stats.to_dict() == {"cloned": 1, "updated": 0, "failed": 1}
    assert len(runner.commands) == 2


def test_failed_pull_counts_as_failed(fake_runner, tmp_path):
    (tmp_path / "api").mkdir()
    runner = fake_runner(lambda command: ProcessResult(128))

    assert clone_repository("acme", "api", tmp_path, runner) == "failed"


def test_missing_executable_counts_as_failed(fake_runner, tmp_path):
    def handler(command):
        raise FileNotFoundError(2, "No such file or directory", command[0])

    stats = clone_repositories(_repos("api"), "acme", tmp_path, runner=fake_runner(handler))

    assert stats.failed == 1


def test_clone_directory_is_created_and_progress_logged(fake_runner, tmp_path, capsys):
    target = tmp_path / "nested" / "repos"

    clone_repositories(_repos("a", "b"), "acme", target, runner=fake_runner())

    assert target.is_dir()
    out = capsys.readouterr().out
    assert "[1/2] Cloning a..." in out
    assert "[2/2] Cloning b..." in out
    assert "Successfully cloned b" in out
