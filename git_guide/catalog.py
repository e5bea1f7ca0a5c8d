"""The fixed, ordered list of conventional commit types."""

from typing import List, Tuple

from git_guide.errors import InvalidCommitTypeError
from git_guide.schemas import CommitType


_COMMIT_TYPES: Tuple[CommitType, ...] = (
    CommitType(code="feat", description="A new feature"),
    CommitType(code="fix", description="A bug fix"),
    CommitType(code="docs", description="Documentation only changes"),
    CommitType(code="style", description="Changes that do not affect code meaning"),
    CommitType(code="refactor", description="Neither fixes a bug nor adds a feature"),
    CommitType(code="perf", description="A code change that improves performance"),
    CommitType(code="test", description="Adding or correcting tests"),
    CommitType(code="build", description="Affects the build system or dependencies"),
    CommitType(code="ci", description="Changes to CI configuration files"),
    CommitType(code="chore", description="Other changes"),
)


def get_commit_types() -> Tuple[CommitType, ...]:
    return _COMMIT_TYPES


def is_valid_index(index: int) -> bool:
    """Return True when *index* is a 1-based position in the catalog."""

    return 1 <= index <= len(_COMMIT_TYPES)


def resolve_commit_type(index: int) -> CommitType:
    """Return the commit type at the 1-based *index*.

    Raises:
        InvalidCommitTypeError: If *index* is outside the catalog.
    """
    if not is_valid_index(index):
        raise InvalidCommitTypeError(
            f"Commit type index must be between 1 and {len(_COMMIT_TYPES)}, got {index}"
        )
    return _COMMIT_TYPES[index - 1]


def format_commit_type_menu() -> List[str]:
    return [
        f"   {position}. {commit_type.code:<8} {commit_type.description}"
        for position, commit_type in enumerate(_COMMIT_TYPES, start=1)
    ]
