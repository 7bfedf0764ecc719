# 日志输出模块：提供统一的日志输出功能
#
# 主要功能：
#   - log_info()：输出信息日志
#   - log_success()：输出成功日志
#   - log_error()：输出错误日志
#   - log_warning()：输出警告日志
#
# 特性：
#   - 带时间戳
#   - 终端输出时带颜色（colorama）

import sys
from datetime import datetime

from colorama import Fore, Style, init

init()

COLOR_INFO = Fore.CYAN
COLOR_SUCCESS = Fore.GREEN
COLOR_ERROR = Fore.RED
COLOR_WARNING = Fore.YELLOW


def _get_timestamp() -> str:
    """获取时间戳"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _format_message(level: str, color: str, message: str, stream) -> str:
    """格式化日志消息"""
    timestamp = _get_timestamp()
    if stream.isatty():
        return f"{color}[{level}]{Style.RESET_ALL} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def log_info(message: str) -> None:
    """输出信息日志"""
    print(_format_message("INFO", COLOR_INFO, message, sys.stdout))


def log_success(message: str) -> None:
    """输出成功日志"""
    print(_format_message("SUCCESS", COLOR_SUCCESS, message, sys.stdout))


def log_error(message: str) -> None:
    """输出错误日志（输出到 stderr）"""
    print(_format_message("ERROR", COLOR_ERROR, message, sys.stderr), file=sys.stderr)


def log_warning(message: str) -> None:
    """输出警告日志"""
    print(_format_message("WARNING", COLOR_WARNING, message, sys.stdout))
