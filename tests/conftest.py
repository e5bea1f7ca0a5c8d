import subprocess
from typing import List, Optional, Sequence

import pytest


class ScriptedConsole:
    """Console stub that answers prompts from a fixed script."""

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.errors: List[str] = []

    def feed(self, *answers: str) -> None:
        self._answers.extend(answers)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self._answers.pop(0)

    def echo(self, message: str = "") -> None:
        self.output.append(message)

    def echo_err(self, message: str) -> None:
        self.errors.append(message)

    @property
    def remaining(self) -> List[str]:
        return list(self._answers)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


class FakeGit:
    """Records git invocations and replies with scripted results."""

    def __init__(
        self,
        *,
        staged_returncode: int = 1,
        branch: Optional[str] = "main",
        commit_returncode: int = 0,
        commit_output: str = "[main abc1234] feat: msg",
    ) -> None:
        self.staged_returncode = staged_returncode
        self.branch = branch
        self.commit_returncode = commit_returncode
        self.commit_output = commit_output
        self.calls: List[tuple] = []

    def __call__(self, args: Sequence[str]) -> subprocess.CompletedProcess[str]:
        args = tuple(args)
        self.calls.append(args)

        if args[:2] == ("git", "diff"):
            return _completed(args, self.staged_returncode)
        if args[:2] == ("git", "rev-parse"):
            if self.branch is None:
                return _completed(args, 128, stderr="fatal: not a git repository")
            return _completed(args, 0, stdout=f"{self.branch}\n")
        if args[:2] == ("git", "commit"):
            if self.commit_returncode:
                return _completed(args, self.commit_returncode, stdout=self.commit_output)
            return _completed(args, 0, stdout=self.commit_output)

        raise AssertionError(f"Unexpected command: {args}")

    @property
    def commit_calls(self) -> List[tuple]:
        return [call for call in self.calls if call[:2] == ("git", "commit")]


def _completed(
    args: Sequence[str], returncode: int, stdout: str = "", stderr: str = ""
) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(
        args=list(args), returncode=returncode, stdout=stdout, stderr=stderr
    )


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()
