import logging
from typing import Callable, Optional

import click

from git_guide.config import PUSH_HINT, SEPARATOR
from git_guide.console import Console
from git_guide.core.collector import InputCollector
from git_guide.core.message import assemble_commit_message
from git_guide.core.preferences import PreferenceStore
from git_guide.errors import CommitFailedError, GitCommandError
from git_guide.schemas import PreferenceRecord
from git_guide.settings import git_guide_logger
from git_guide.utils import work_item_from_branch

from .service import GitService


CollectorFactory = Callable[[Console, PreferenceRecord, str], InputCollector]


class GitGuideController:
    """Main controller orchestrating one guided commit session."""

    def __init__(
        self,
        git_service: GitService,
        preference_store: PreferenceStore,
        console: Console,
        logger: Optional[logging.Logger] = None,
        collector_factory: CollectorFactory = InputCollector,
    ) -> None:
        self._logger = logger or git_guide_logger(__name__)
        self._console = console
        self._collector_factory = collector_factory
        self.git_service = git_service
        self.preference_store = preference_store

    # --- Public API ---
    def run(self) -> int:
        """Execute the session and return an exit code."""

        self._logger.debug("Starting guided commit session")

        try:
            staged = self.git_service.has_staged_changes()
        except GitCommandError as exc:
            self._console.echo_err(click.style(f"❌ {exc}", fg="red"))
            return 1

        if not staged:
            self._logger.debug("No staged changes")
            self._console.echo_err(
                click.style(
                    "❌ No staged changes. Stage files with 'git add' first.", fg="red"
                )
            )
            return 1

        self._console.echo(click.style("=== Git Commit Guide ===", fg="cyan"))

        preferences = self.preference_store.load()
        branch_hint = work_item_from_branch(self.git_service.current_branch())
        self._logger.debug("Branch work item suggestion: %r", branch_hint)

        collector = self._collector_factory(self._console, preferences, branch_hint)
        draft = collector.collect()
        message = assemble_commit_message(draft)

        # Saved before the final confirmation, so a cancelled session still
        # replaces the remembered values.
        self.preference_store.save(draft.to_preferences())

        self._display_message(message)

        if not collector.confirm_commit():
            self._logger.debug("Commit cancelled by user")
            self._console.echo(click.style("Commit cancelled.", fg="red"))
            return 0

        try:
            self.git_service.commit(message)
        except CommitFailedError as exc:
            self._console.echo_err(click.style(f"❌ Commit failed: {exc.output}", fg="red"))
            return 1

        self._console.echo("\n" + click.style("=== ✅ Commit created ===", fg="green"))
        self._console.echo(f"Commit message:\n{message}")
        self._console.echo(PUSH_HINT)
        return 0

    # --- Private helpers ---
    def _display_message(self, message: str) -> None:
        self._console.echo("\n" + click.style("Generated commit message:", fg="green"))
        self._console.echo(SEPARATOR)
        self._console.echo(message)
        self._console.echo(SEPARATOR)
