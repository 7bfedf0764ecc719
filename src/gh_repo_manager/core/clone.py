# 仓库克隆模块：逐个克隆或更新仓库
#
# 主要功能：
#   - clone_repository()：目录已存在则 git pull，否则 gh repo clone
#   - clone_repositories()：按排序顺序串行处理全部仓库并统计结果
#
# 特性：
#   - 单个仓库失败只计数，不中断整体流程
#   - 不重试、不回滚

from pathlib import Path
from typing import List, Optional, Union

from ..domain.models import CloneStats, RepoRecord
from ..infra.logger import log_error, log_info, log_success, log_warning
from ..infra.process import ProcessRunner, SubprocessRunner

CLONED = "cloned"
UPDATED = "updated"
FAILED = "failed"


def build_clone_command(owner: str, repo_name: str, target_path: Path) -> List[str]:
    return ["gh", "repo", "clone", f"{owner}/{repo_name}", str(target_path)]


def build_pull_command(target_path: Path) -> List[str]:
    return ["git", "-C", str(target_path), "pull"]


def _run_ok(runner: ProcessRunner, command: List[str]) -> bool:
    """执行命令，返回是否以 0 退出（命令不存在视为失败）"""
    try:
        return runner.run(command).returncode == 0
    except OSError as exc:
        log_error(f"  {command[0]}: {exc}")
        return False


def clone_repository(
    owner: str,
    repo_name: str,
    clone_dir: Path,
    runner: ProcessRunner,
) -> str:
    """Clone ``owner/repo_name`` into ``clone_dir``, or pull if it is already there.

    Returns:
        ``"cloned"``, ``"updated"`` or ``"failed"``
    """
    target_path = clone_dir / repo_name

    if target_path.is_dir():
        log_warning(f"  Repository '{repo_name}' already exists, updating instead...")
        if _run_ok(runner, build_pull_command(target_path)):
            log_success(f"  Successfully updated {repo_name}")
            return UPDATED
        log_error(f"  Failed to update {repo_name}")
        return FAILED

    log_info(f"  Cloning repository '{repo_name}'...")
    if _run_ok(runner, build_clone_command(owner, repo_name, target_path)):
        log_success(f"  Successfully cloned {repo_name}")
        return CLONED
    log_error(f"  Failed to clone {repo_name}")
    return FAILED


def clone_repositories(
    repos: List[RepoRecord],
    owner: str,
    clone_dir: Union[str, Path],
    runner: Optional[ProcessRunner] = None,
) -> CloneStats:
    """Clone or update every repository in order and return the counters."""
    runner = runner or SubprocessRunner()
    clone_path = Path(clone_dir)
    stats = CloneStats()
    total = len(repos)

    try:
        clone_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        log_error(f"Failed to create directory {clone_path}: {exc}")
        stats.failed = total
        return stats

    print()
    log_info(f"Cloning repositories to: {clone_path}")

    for index, repo in enumerate(repos, start=1):
        print()
        log_info(f"[{index}/{total}] Cloning {repo.name}...")
        outcome = clone_repository(owner, repo.name, clone_path, runner)
        if outcome == CLONED:
            stats.cloned += 1
        elif outcome == UPDATED:
            stats.updated += 1
        else:
            stats.failed += 1

    return stats
