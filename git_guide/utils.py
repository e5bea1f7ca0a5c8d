import re

from git_guide.config import WORK_ITEM_PATTERN


_WORK_ITEM_SEARCH_RE = re.compile(WORK_ITEM_PATTERN)


def work_item_from_branch(branch: str) -> str:
    """Suggest a work item from a branch name.

    Returns the first work item found in the lowercased branch name, or the
    lowercased branch name itself when none is present.
    """

    lowered = branch.lower()
    match = _WORK_ITEM_SEARCH_RE.search(lowered)
    if match:
        return match.group(0)
    return lowered
