"""Subprocess runner used for every `gh` and `git` invocation."""

import platform
import subprocess
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

IS_WINDOWS = platform.system() == "Windows"


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured output of one finished command."""

    returncode: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Run an argument list and report how it exited."""

    def run(self, command: Sequence[str], capture_output: bool = False) -> ProcessResult:
        ...


def background_subprocess_kwargs() -> Dict[str, Any]:
    """Return subprocess kwargs that hide console windows on Windows."""
    if not IS_WINDOWS:
        return {}

    startupinfo = subprocess.STARTUPINFO()
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    startupinfo.wShowWindow = subprocess.SW_HIDE
    return {
        "startupinfo": startupinfo,
        "creationflags": subprocess.CREATE_NO_WINDOW,
    }


class SubprocessRunner:
    """Blocking runner backed by ``subprocess.Popen``.

    Without ``capture_output`` the child inherits the terminal, so git/gh
    progress is shown as it happens. Missing executables raise ``OSError``
    (``FileNotFoundError``) to the caller.
    """

    def run(self, command: Sequence[str], capture_output: bool = False) -> ProcessResult:
        popen_kwargs: Dict[str, Any] = {}
        if capture_output:
            popen_kwargs.update(
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        for key, value in background_subprocess_kwargs().items():
            popen_kwargs.setdefault(key, value)

        args: List[str] = [str(part) for part in command]
        process = subprocess.Popen(args, **popen_kwargs)
        try:
            stdout, stderr = process.communicate()
        except BaseException:
            # Ctrl+C 等中断：确保子进程不会残留
            process.kill()
            process.wait()
            raise
        return ProcessResult(process.returncode, stdout, stderr)
