from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommitType(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    description: str


class PreferenceRecord(BaseModel):
    """Values remembered from the last session, stored as camelCase JSON."""

    model_config = ConfigDict(populate_by_name=True)

    work_item: str = Field(default="", alias="workItem")
    commit_type_index: int = Field(default=0, alias="commitTypeIndex", strict=True)
    scope: str = ""
    description: str = ""
    issue_ref: str = Field(default="", alias="issueRef")

    @field_validator("work_item", "scope", "description", "issue_ref", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("commit_type_index", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class CommitDraft(BaseModel):
    """Validated answers of one session, ready to be assembled."""

    model_config = ConfigDict(frozen=True)

    work_item: str
    commit_type: str
    commit_type_index: int
    scope: str = ""
    description: str
    body: str = ""
    breaking_change: str = ""
    issue_ref: str = ""

    def to_preferences(self) -> PreferenceRecord:
        return PreferenceRecord(
            work_item=self.work_item,
            commit_type_index=self.commit_type_index,
            scope=self.scope,
            description=self.description,
            issue_ref=self.issue_ref,
        )
