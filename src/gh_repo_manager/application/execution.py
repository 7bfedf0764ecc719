"""Top-level run: fetch, render, write, optionally clone, then summarize."""

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.args import parse_args
from ..core.clone import clone_repositories
from ..core.fetch import FetchError, fetch_repositories
from ..core.render import format_output
from ..domain.models import CloneStats, RepoRecord, RunOptions
from ..infra.logger import log_error, log_success
from ..infra.process import ProcessRunner, SubprocessRunner


def output_results(formatted_output: str, output_file: Optional[str] = None) -> bool:
    """Write the rendered text to ``output_file`` (overwriting) or stdout.

    A failed write is reported and swallowed; the text is not echoed.
    """
    if not output_file:
        print(formatted_output)
        return True

    try:
        Path(output_file).write_text(formatted_output, encoding="utf-8")
    except OSError as exc:
        log_error(f"Error writing to file: {exc}")
        return False

    log_success(f"Results written to {output_file}")
    return True


def resolve_clone_dir(options: RunOptions) -> Path:
    return Path(options.clone_dir) if options.clone_dir else Path.cwd()


def display_summary(
    repos: List[RepoRecord],
    options: RunOptions,
    stats: Optional[CloneStats] = None,
) -> None:
    """输出最终统计"""
    print()
    log_success("============ SUMMARY ============")
    log_success(f"Found {len(repos)} repositories for {options.owner}")

    if options.output_file:
        log_success(f"Results written to: {options.output_file}")

    if options.clone_repos:
        stats = stats or CloneStats()
        log_success(f"Clone directory: {resolve_clone_dir(options)}")
        log_success(f"Repositories cloned: {stats.cloned}")
        log_success(f"Repositories updated: {stats.updated}")
        if stats.failed > 0:
            log_error(f"Failed operations: {stats.failed}")

    log_success("====================================")


def run(options: RunOptions, runner: Optional[ProcessRunner] = None) -> int:
    """Execute one full run.

    Returns:
        退出码（0 完成，包括部分克隆失败；1 获取仓库列表失败）
    """
    runner = runner or SubprocessRunner()

    try:
        repos = fetch_repositories(
            options.owner,
            visibility=options.visibility,
            sort=options.sort,
            runner=runner,
        )
    except FetchError as exc:
        log_error(f"Error executing GitHub CLI command: {exc}")
        log_error("Make sure GitHub CLI (gh) is installed and you are authenticated")
        return 1

    color = not options.output_file and sys.stdout.isatty()
    formatted_output = format_output(repos, options.format, options.owner, color=color)
    output_results(formatted_output, options.output_file)

    stats = None
    if options.clone_repos:
        stats = clone_repositories(
            repos,
            options.owner,
            resolve_clone_dir(options),
            runner=runner,
        )

    display_summary(repos, options, stats)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """主函数

    Returns:
        退出码（0 成功，1 失败）
    """
    # 解析命令行参数（显示帮助或缺少 owner 时会在这里退出）
    options = parse_args(argv)
    return run(options)
