# 命令行参数解析模块
#
# 主要功能：
#   - parse_args()：解析命令行参数，返回 RunOptions
#   - 枚举参数校验：非法值只警告并回退到默认值
#   - 帮助信息生成

import argparse
import sys
from typing import Optional, Sequence

from ..domain.models import (
    DEFAULT_FORMAT,
    DEFAULT_SORT,
    DEFAULT_VISIBILITY,
    FORMATS,
    SORT_FIELDS,
    VISIBILITIES,
    RunOptions,
)
from ..infra.logger import log_error, log_warning


def _choose(value: Optional[str], allowed: Sequence[str], default: str, label: str) -> str:
    """校验枚举参数：不在允许范围内时输出警告并使用默认值"""
    if value is None:
        return default
    if value in allowed:
        return value
    log_warning(f"Invalid {label}. Using default: {default}")
    return default


class RepoArgumentParser(argparse.ArgumentParser):
    """参数错误时输出错误日志并以 1 退出（argparse 默认为 2）"""

    def error(self, message: str) -> None:
        log_error(f"Error: {message}")
        log_warning("Use --help for more information")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = RepoArgumentParser(
        description="List GitHub repositories of an owner and optionally clone them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s -o octocat                          # table of all repositories
  %(prog)s -o my-org -v private -f full        # private repositories, detailed
  %(prog)s -o my-org -f json --output repos.json
  %(prog)s -o my-org -s pushed -c -d ~/src     # clone (or pull) everything into ~/src

Requires the GitHub CLI (gh) to be installed and authenticated (gh auth login).
        """
    )

    parser.add_argument(
        '-o', '--owner',
        default=None,
        metavar='OWNER',
        help='GitHub owner/organization name (required)'
    )
    parser.add_argument(
        '-v', '--visibility',
        default=None,
        metavar='TYPE',
        help='Repository visibility (all, public, private, internal)'
    )
    parser.add_argument(
        '-f', '--format',
        default=None,
        metavar='FORMAT',
        help='Output format (simple, full, json)'
    )
    parser.add_argument(
        '-s', '--sort',
        default=None,
        metavar='FIELD',
        help='Sort repositories by (name, pushed, created)'
    )
    parser.add_argument(
        '--output',
        dest='output_file',
        default=None,
        metavar='FILE',
        help='Write output to file'
    )
    parser.add_argument(
        '-c', '--clone',
        dest='clone_repos',
        action='store_true',
        help='Clone repositories'
    )
    parser.add_argument(
        '-d', '--directory',
        dest='clone_dir',
        default=None,
        metavar='DIR',
        help='Directory to clone repositories into (default: current directory)'
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> RunOptions:
    """解析命令行参数

    -h/--help 由 argparse 处理（输出帮助后以 0 退出）。
    缺少 owner 时输出错误并以 1 退出。
    """
    args = build_parser().parse_args(argv)

    visibility = _choose(args.visibility, VISIBILITIES, DEFAULT_VISIBILITY, "visibility type")
    output_format = _choose(args.format, FORMATS, DEFAULT_FORMAT, "format")
    sort = _choose(args.sort, SORT_FIELDS, DEFAULT_SORT, "sort field")

    if not args.owner:
        log_error("Error: Owner parameter is required")
        log_warning("Use --help for more information")
        sys.exit(1)

    return RunOptions(
        owner=args.owner,
        visibility=visibility,
        format=output_format,
        sort=sort,
        output_file=args.output_file,
        clone_dir=args.clone_dir,
        clone_repos=args.clone_repos,
    )
