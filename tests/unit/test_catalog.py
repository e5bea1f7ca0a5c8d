import pytest
from pydantic import ValidationError

from git_guide.catalog import (
    format_commit_type_menu,
    get_commit_types,
    is_valid_index,
    resolve_commit_type,
)
from git_guide.errors import InvalidCommitTypeError


def test_catalog_has_ten_types_in_fixed_order():
    codes = [commit_type.code for commit_type in get_commit_types()]

    assert codes == [
        "feat", "fix", "docs", "style", "refactor",
        "perf", "test", "build", "ci", "chore",
    ]
    assert all(commit_type.description for commit_type in get_commit_types())


def test_resolve_commit_type_is_one_based():
    assert resolve_commit_type(1).code == "feat"
    assert resolve_commit_type(10).code == "chore"


@pytest.mark.parametrize("index", [0, 11, -1])
def test_resolve_commit_type_rejects_out_of_range(index):
    assert is_valid_index(index) is False
    with pytest.raises(InvalidCommitTypeError):
        resolve_commit_type(index)


def test_menu_lists_numbered_entries():
    menu = format_commit_type_menu()

    assert len(menu) == 10
    assert menu[0] == "   1. feat     A new feature"
    assert menu[9].startswith("   10. chore")


def test_commit_types_are_immutable():
    with pytest.raises(ValidationError):
        get_commit_types()[0].code = "oops"
