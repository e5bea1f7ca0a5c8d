"""Interactive, step-by-step collection of commit message fields.

Steps run in a fixed order and never go back. Every validated step loops
until the user provides an acceptable value; defaults come from the previous
session and, for the work item, from the current branch name.
"""

import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import click

from git_guide.catalog import (
    format_commit_type_menu,
    get_commit_types,
    is_valid_index,
    resolve_commit_type,
)
from git_guide.console import Console
from git_guide.schemas import CommitDraft, PreferenceRecord
from git_guide.settings import git_guide_logger
from git_guide.validators import valid_short_description, valid_work_item


YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("", "n", "no")

_MENU_CHOICE_RE = re.compile(r"\+?[0-9]+")


class Step(Enum):
    WORK_ITEM = "work_item"
    COMMIT_TYPE = "commit_type"
    SCOPE = "scope"
    DESCRIPTION = "description"
    BODY = "body"
    BREAKING_CHANGE = "breaking_change"
    ISSUE_REF = "issue_ref"


FIRST_STEP = Step.WORK_ITEM

NEXT_STEP: Dict[Step, Optional[Step]] = {
    Step.WORK_ITEM: Step.COMMIT_TYPE,
    Step.COMMIT_TYPE: Step.SCOPE,
    Step.SCOPE: Step.DESCRIPTION,
    Step.DESCRIPTION: Step.BODY,
    Step.BODY: Step.BREAKING_CHANGE,
    Step.BREAKING_CHANGE: Step.ISSUE_REF,
    Step.ISSUE_REF: None,
}


def _heading(text: str) -> str:
    return click.style(text, fg="yellow")


def _error(text: str) -> str:
    return click.style(text, fg="red")


class InputCollector:
    """Prompt for each commit message field through a :class:`Console`."""

    def __init__(
        self,
        console: Console,
        preferences: Optional[PreferenceRecord] = None,
        branch_hint: str = "",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or git_guide_logger(__name__)
        self._console = console
        self._preferences = preferences or PreferenceRecord()
        self._branch_hint = branch_hint
        self._handlers: Dict[Step, Callable[[], Any]] = {
            Step.WORK_ITEM: self.ask_work_item,
            Step.COMMIT_TYPE: self.ask_commit_type,
            Step.SCOPE: self.ask_scope,
            Step.DESCRIPTION: self.ask_description,
            Step.BODY: self.ask_body,
            Step.BREAKING_CHANGE: self.ask_breaking_change,
            Step.ISSUE_REF: self.ask_issue_ref,
        }

    # --- Public API ---
    def collect(self) -> CommitDraft:
        """Run every step in order and return the resulting draft."""

        answers: Dict[Step, Any] = {}
        step: Optional[Step] = FIRST_STEP
        while step is not None:
            self._logger.debug("Collecting step: %s", step.value)
            answers[step] = self._handlers[step]()
            step = NEXT_STEP[step]

        commit_type_index = answers[Step.COMMIT_TYPE]
        return CommitDraft(
            work_item=answers[Step.WORK_ITEM],
            commit_type=resolve_commit_type(commit_type_index).code,
            commit_type_index=commit_type_index,
            scope=answers[Step.SCOPE],
            description=answers[Step.DESCRIPTION],
            body=answers[Step.BODY],
            breaking_change=answers[Step.BREAKING_CHANGE],
            issue_ref=answers[Step.ISSUE_REF],
        )

    def ask_work_item(self) -> str:
        default = self._preferences.work_item or self._branch_hint
        while True:
            work_item = self.read_with_default(
                _heading("1. Work item (format: bcds-<number> or bcds-<number>-xxx): "),
                default,
            ).lower()
            if valid_work_item(work_item):
                return work_item
            self._console.echo(_error("Invalid work item, please try again."))

    def ask_commit_type(self) -> int:
        """Show the catalog menu and return the chosen 1-based index."""

        count = len(get_commit_types())
        self._console.echo("\n" + _heading("2. Choose the commit type:"))
        for line in format_commit_type_menu():
            self._console.echo(line)

        previous = self._preferences.commit_type_index
        default = str(previous) if is_valid_index(previous) else ""
        while True:
            answer = self.read_with_default(f"   Enter a number (1-{count}): ", default)
            choice = int(answer) if _MENU_CHOICE_RE.fullmatch(answer) else 0
            if is_valid_index(choice):
                return choice
            self._console.echo(_error(f"Please enter a valid number (1-{count})"))

    def ask_scope(self) -> str:
        return self.read_with_default(
            "\n" + _heading("3. Scope (optional, e.g. api or payment; Enter to skip): "),
            self._preferences.scope,
        ).strip()

    def ask_description(self) -> str:
        self._console.echo(
            "\n"
            + _heading(
                "4. Short description (at most 50 characters, lowercase first letter, no period):"
            )
        )
        while True:
            description = self.read_with_default("   Description: ", self._preferences.description)
            if valid_short_description(description):
                return description
            self._console.echo(_error("The description does not follow the rules, please try again."))

    def ask_body(self) -> str:
        if not self.ask_yes_no("\nAdd a detailed body?"):
            return ""
        return self.read_multiline("Enter the body, lines of at most 72 characters")

    def ask_breaking_change(self) -> str:
        if not self.ask_yes_no("\nDoes this commit introduce a breaking change?"):
            return ""
        return self.read_multiline("Describe the breaking change")

    def ask_issue_ref(self) -> str:
        return self.read_with_default(
            "\nLink an issue? Type the reference (e.g. Closes #123, Enter to skip): ",
            self._preferences.issue_ref,
        ).strip()

    def confirm_commit(self) -> bool:
        """Ask for the final go-ahead. Only an explicit yes proceeds."""

        answer = self.read_line("Commit with this message? (y/N): ").lower()
        return answer in YES_ANSWERS

    # --- Prompt helpers ---
    def read_line(self, prompt: str) -> str:
        return self._console.read_line(prompt).strip()

    def read_with_default(self, prompt: str, default: str) -> str:
        """Read a line, returning *default* when the answer is blank.

        The default is shown dimmed after the prompt.
        """
        display = prompt
        if default:
            display = f"{prompt}{click.style(default, dim=True)} "
        answer = self.read_line(display)
        if not answer:
            return default
        return answer

    def read_multiline(self, prompt: str) -> str:
        """Read lines until a blank one and return them joined with newlines."""

        self._console.echo(f"{prompt} (finish with an empty line):")
        lines: List[str] = []
        while True:
            line = self._console.read_line("")
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = self.read_line(f"{prompt} (y/N): ").lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self._console.echo(_error("Please answer y or n."))
