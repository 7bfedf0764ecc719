#!/usr/bin/env python3
# GitHub 仓库列表/克隆脚本：通过 gh 和 git 完成所有远程操作
#
# 主要功能：
#   - 解析命令行参数（-o 所有者，-v 可见性，-f 输出格式，-s 排序字段）
#   - 调用 gh repo list 获取仓库列表并排序
#   - 以表格、详细文本或 JSON 输出（可写入文件）
#   - 可选：逐个克隆仓库，已存在的仓库执行 git pull
#   - 输出最终统计
#
# 执行流程：
#   1. 解析命令行参数
#   2. 获取并排序仓库列表
#   3. 格式化输出
#   4. 克隆/更新（-c）
#   5. 输出统计报告

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if SRC_DIR.is_dir() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from gh_repo_manager.application import main  # noqa: E402


if __name__ == '__main__':
    sys.exit(main())
