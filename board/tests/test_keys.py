import pytest
from board.keys import next_issue_key


@pytest.mark.parametrize("last_key, expected", [
    ("APP-0001", "APP-0002"),
    ("APP-0007", "APP-0008"),
    ("APP-0099", "APP-0100"),
    ("APP-9999", "APP-10000"),
    ("APP-12345", "APP-12346"),
])
def test_next_key_increments_and_pads(last_key, expected):
    assert next_issue_key(last_key, "APP") == expected


@pytest.mark.parametrize("last_key", ["", None, "OPS-0004", "APP-", "APP-12a", "xAPP-0003", "APP-0003\n"])
def test_next_key_restarts_without_matching_key(last_key):
    assert next_issue_key(last_key, "APP") == "APP-0001"


def test_prefix_is_matched_literally():
    assert next_issue_key("A.B-0002", "A.B") == "A.B-0003"
    assert next_issue_key("AxB-0002", "A.B") == "A.B-0001"
