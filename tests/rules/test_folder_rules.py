import pytest

from minfileserver.rules.folder_rules import AnyNamed, ExactPath, parse_folder_rule, parse_folder_rules


@pytest.mark.parametrize(
    "entry,expected",
    [
        ("*node_modules", AnyNamed("node_modules")),
        ("*/dist", AnyNamed("dist")),
        ("build", ExactPath("build")),
        ("/docs/build/", ExactPath("docs/build")),
        ("src/vendor", ExactPath("src/vendor")),
    ],
)
def test_parse_folder_rule(entry, expected):
    assert parse_folder_rule(entry) == expected


def test_parse_folder_rules_preserves_order():
    assert parse_folder_rules(["b", "*a"]) == (ExactPath("b"), AnyNamed("a"))


def test_rule_variants_are_distinct():
    assert AnyNamed("x") != ExactPath("x")
    assert len({AnyNamed("x"), AnyNamed("x"), ExactPath("x")}) == 2


def test_any_named_ignores_path():
    rule = AnyNamed("target")
    assert rule.matches("target", "deep/nested/target")
    assert not rule.matches("targets", "targets")


def test_exact_path_ignores_name():
    rule = ExactPath("a/target")
    assert rule.matches("target", "a/target")
    assert not rule.matches("target", "b/target")
