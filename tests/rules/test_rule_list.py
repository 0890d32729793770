import pytest

from minfileserver.rules.rule_list import parse_rule_list


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ()),
        ("", ()),
        ("   ", ()),
        ("go", ("go",)),
        ("go,md", ("go", "md")),
        (" go , md ", ("go", "md")),
        ("*", ("*",)),
        ("txt,", ("txt", "")),
        (["py", "md"], ("py", "md")),
        ([], ()),
    ],
)
def test_parse_rule_list(value, expected):
    assert parse_rule_list(value) == expected


def test_parse_rule_list_rejects_other_types():
    with pytest.raises(TypeError):
        parse_rule_list(42)


def test_parse_rule_list_rejects_non_string_entries():
    with pytest.raises(TypeError):
        parse_rule_list(["py", 3])
