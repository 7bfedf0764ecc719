from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeRunner:
    """Records every command and answers with ``handler(command)``."""

    def __init__(self, handler=None):
        from gh_repo_manager.infra.process import ProcessResult

        self.calls = []
        self.handler = handler or (lambda command: ProcessResult(0, "", ""))

    def run(self, command, capture_output=False):
        self.calls.append((list(command), capture_output))
        return self.handler(list(command))

    @property
    def commands(self):
        return [command for command, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner
