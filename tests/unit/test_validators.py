import pytest

from git_guide.validators import valid_short_description, valid_work_item


@pytest.mark.parametrize(
    "value",
    ["bcds-1", "bcds-42", "bcds-42-login", "bcds-7-a1-b2", "BCDS-1".lower()],
)
def test_valid_work_item_accepts_grammar(value):
    assert valid_work_item(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "bcds-", "bcds-1_2", "bcds-x", "bcds-\u0661\u0662", "bcds-\uff11", "bcds-1-\u0663", "BCDS-1", "feature/bcds-1", "bcds-1-", "bcds-1-Login", "xbcds-1"],
)
def test_valid_work_item_rejects_other_values(value):
    assert valid_work_item(value) is False


def test_valid_short_description_accepts_plain_sentence():
    assert valid_short_description("add login flow") is True


def test_valid_short_description_trims_before_checking():
    assert valid_short_description("  add login flow  ") is True


@pytest.mark.parametrize(
    "value",
    ["", "   ", "Add x", "add x.", "1 add x", "a" * 51],
)
def test_valid_short_description_rejects_invalid(value):
    assert valid_short_description(value) is False


def test_valid_short_description_allows_exactly_fifty_characters():
    assert valid_short_description("a" * 50) is True
