"""Tests for the combination expander."""

from silvaengine_cache_invalidator import expander


class TestCartesianProduct:
    def test_fold_order(self):
        combinations = expander.cartesian_product([["a", "b"], ["1", "2"]])
        assert combinations == [("a", "1"), ("a", "2"), ("b", "1"), ("b", "2")]

    def test_empty_value_set_collapses_product(self):
        assert expander.cartesian_product([["a", "b"], []]) == []

    def test_expand_combinations_adds_one_level(self):
        result = expander.expand_combinations([("a",), ("b",)], ["x"])
        assert result == [("a", "x"), ("b", "x")]

    def test_count_combinations(self):
        assert expander.count_combinations([["a", "b"], ["1", "2", "3"]]) == 6
        assert expander.count_combinations([["a"], []]) == 0


class TestExpand:
    def test_no_tokens_returns_template(self):
        assert expander.expand("/static.html", [], []) == ["/static.html"]

    def test_every_occurrence_is_substituted(self):
        result = expander.expand("/%slug%/%slug%.html", ["%slug%"], [["intro"]])
        assert result == ["/intro/intro.html"]

    def test_product_size(self):
        result = expander.expand(
            "/%a%/%b%", ["%a%", "%b%"], [["1", "2"], ["x", "y", "z"]]
        )
        assert len(result) == 6
        assert result[0] == "/1/x"
        assert result[-1] == "/2/z"

    def test_duplicates_removed(self):
        result = expander.expand("/%a%", ["%a%", "%b%"], [["1"], ["x", "y"]])
        assert result == ["/1"]

    def test_empty_value_set_gives_no_uris(self):
        assert expander.expand("/%a%/%b%", ["%a%", "%b%"], [["1"], []]) == []

    def test_values_are_not_substituted_again(self):
        result = expander.expand("/%a%/%b%", ["%a%", "%b%"], [["%b%"], ["x"]])
        assert result == ["/%b%/x"]

    def test_wildcard_is_literal(self):
        assert expander.expand("/%a%.html", ["%a%"], [["*"]]) == ["/*.html"]
