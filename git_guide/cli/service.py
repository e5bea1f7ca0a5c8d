import logging
import subprocess
from typing import Callable, Optional, Sequence

from git_guide.errors import CommitFailedError, GitCommandError
from git_guide.settings import git_guide_logger


class GitService:
    """The git operations a session needs: staged check, branch name, commit."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        run_process: Optional[
            Callable[[Sequence[str]], subprocess.CompletedProcess[str]]
        ] = None,
    ) -> None:
        self._logger = logger or git_guide_logger(__name__)
        self._run_process = run_process or self._default_run_process

    # --- Public API ---
    def has_staged_changes(self) -> bool:
        result = self._run(["git", "diff", "--cached", "--quiet"])

        # --quiet implies --exit-code: 1 means differences, 0 means none.
        if result.returncode == 1:
            return True
        if result.returncode == 0:
            return False

        error_message = self._combined_output(result) or "Unknown git diff error"
        self._logger.debug("git diff --cached failed: %s", error_message)
        raise GitCommandError(error_message)

    def current_branch(self) -> str:
        try:
            result = self._run(["git", "rev-parse", "--abbrev-ref", "HEAD"])
        except GitCommandError:
            return ""
        if result.returncode != 0:
            self._logger.debug("Could not determine current branch")
            return ""
        return result.stdout.strip()

    def commit(self, message: str) -> str:
        """Run ``git commit`` with *message* and return its output.

        Raises:
            CommitFailedError: If git cannot be run or exits with a non-zero status.
        """
        self._logger.info("Running git commit")
        try:
            result = self._run(["git", "commit", "-m", message])
        except GitCommandError as exc:
            raise CommitFailedError(str(exc)) from exc
        output = self._combined_output(result)

        if result.returncode != 0:
            self._logger.debug("git commit failed: %s", output)
            raise CommitFailedError(output)

        self._logger.debug("git commit output: %s", output)
        return output

    # --- Private helpers ---
    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess[str]:
        self._logger.debug("Running git command: git %s", args[1])
        try:
            result = self._run_process(args)
        except OSError as exc:
            self._logger.debug("Could not run git: %s", exc)
            raise GitCommandError(f"Could not run git: {exc}") from exc
        self._logger.debug("Git command exited with %d", result.returncode)
        return result

    @staticmethod
    def _combined_output(result: subprocess.CompletedProcess[str]) -> str:
        stdout = result.stdout.strip() if result.stdout else ""
        stderr = result.stderr.strip() if result.stderr else ""
        return "\n".join(part for part in (stdout, stderr) if part)

    # --- Static helpers ---
    @staticmethod
    def _default_run_process(
        args: Sequence[str],
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.run(args, capture_output=True, text=True, check=False)
