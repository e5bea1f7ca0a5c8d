"""Persistence of the values entered in the last session.

The record lives at ``<root>/.git-guide/.git-commit.json``. Reading and
writing are best effort: a missing or broken file yields an empty record and
a failed write leaves the session untouched.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from git_guide.catalog import is_valid_index
from git_guide.config import PREFERENCE_DIR_NAME, PREFERENCE_FILE_NAME
from git_guide.schemas import PreferenceRecord
from git_guide.settings import git_guide_logger


class PreferenceStore:
    def __init__(
        self,
        root: Optional[Union[str, Path]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or git_guide_logger(__name__)
        self.root = Path(root) if root is not None else Path.cwd()

    @property
    def path(self) -> Path:
        return self.root / PREFERENCE_DIR_NAME / PREFERENCE_FILE_NAME

    def load(self) -> PreferenceRecord:
        """Return the stored record, or an empty one if it cannot be read."""

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.debug("No preferences loaded from %s: %s", self.path, exc)
            return PreferenceRecord()

        try:
            record = PreferenceRecord.model_validate_json(raw)
        except ValidationError as exc:
            self._logger.debug("Ignoring malformed preferences in %s: %s", self.path, exc)
            return PreferenceRecord()

        if record.commit_type_index and not is_valid_index(record.commit_type_index):
            self._logger.debug(
                "Discarding out-of-range commit type index %d", record.commit_type_index
            )
            record.commit_type_index = 0

        self._logger.debug("Loaded preferences from %s", self.path)
        return record

    def save(self, record: PreferenceRecord) -> None:
        """Overwrite the stored record. Write failures are ignored."""

        payload = record.model_dump_json(by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            self._logger.debug("Could not save preferences to %s: %s", self.path, exc)
            return

        self._logger.debug("Saved preferences to %s", self.path)
