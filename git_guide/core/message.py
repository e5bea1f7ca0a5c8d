from typing import List

from git_guide.schemas import CommitDraft


def build_header(draft: CommitDraft) -> str:
    header = draft.commit_type
    if draft.scope:
        header = f"{header}({draft.scope})"
    return f"{header}: {draft.description.strip()}"


def build_footers(draft: CommitDraft) -> List[str]:
    """Return footer lines in their fixed order."""

    footers: List[str] = []
    if draft.breaking_change:
        footers.append(f"BREAKING CHANGE: {draft.breaking_change}")
    if draft.issue_ref:
        footers.append(draft.issue_ref)
    if draft.work_item:
        footers.append(f"Refs {draft.work_item}")
    return footers


def assemble_commit_message(draft: CommitDraft) -> str:
    """Compose the commit message text for *draft*.

    The header is followed by the body and the footer block, each as its own
    paragraph and only when present::

        feat(api): add endpoint

        Optional body.

        BREAKING CHANGE: ...
        Closes #12
        Refs bcds-42
    """

    sections = [build_header(draft)]
    if draft.body:
        sections.append(draft.body)

    footers = build_footers(draft)
    if footers:
        sections.append("\n".join(footers))

    return "\n\n".join(sections)
