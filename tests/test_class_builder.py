"""Tests for ClassBuilder."""

import pytest

from tessera import ClassBuilder


class TestConstruction:
    def test_empty_builds_empty_string(self) -> None:
        assert ClassBuilder().build() == ""

    def test_initial_value(self) -> None:
        assert ClassBuilder("btn").build() == "btn"

    def test_initial_empty_value_is_ignored(self) -> None:
        assert len(ClassBuilder("")) == 0
        assert len(ClassBuilder(None)) == 0


class TestAdd:
    """Tests for add() and its multi-value form."""

    def test_single_class(self) -> None:
        assert ClassBuilder().add("btn").build() == "btn"

    def test_chained_classes_are_space_separated(self) -> None:
        result = ClassBuilder().add("btn").add("btn-primary").add("active").build()
        assert result == "btn btn-primary active"

    def test_multiple_values_in_one_call(self) -> None:
        assert ClassBuilder().add("a", "b", "c").build() == "a b c"

    def test_empty_and_none_are_ignored(self) -> None:
        result = ClassBuilder().add("btn").add("").add(None).add("active").build()
        assert result == "btn active"

    def test_empty_values_in_multi_add_are_ignored(self) -> None:
        builder = ClassBuilder().add("a", "", None, "b")
        assert builder.build() == "a b"
        assert len(builder) == 2

    def test_add_returns_same_instance(self) -> None:
        builder = ClassBuilder()
        assert builder.add("x") is builder

    def test_str_matches_build(self) -> None:
        builder = ClassBuilder().add("btn", "active")
        assert str(builder) == builder.build()

    def test_build_is_repeatable(self) -> None:
        builder = ClassBuilder().add("btn", "active")
        assert builder.build() == builder.build()


class TestConditional:
    """Tests for add_if() and add_if_else()."""

    def test_add_if_true(self) -> None:
        assert ClassBuilder().add_if(True, "active").build() == "active"

    def test_add_if_false(self) -> None:
        assert ClassBuilder().add_if(False, "active").build() == ""

    def test_add_if_uses_truthiness(self) -> None:
        assert ClassBuilder().add_if(1, "a").add_if([], "b").build() == "a"

    def test_add_if_action_true_invokes_action(self) -> None:
        result = ClassBuilder("card").add_if(True, lambda b: b.add("a").add("b")).build()
        assert result == "card a b"

    def test_add_if_action_false_never_invokes(self) -> None:
        calls = []

        ClassBuilder().add_if(False, lambda b: calls.append(b))

        assert calls == []

    def test_action_receives_builder(self) -> None:
        seen = []
        builder = ClassBuilder()
        builder.add_if(True, seen.append)
        assert seen == [builder]

    def test_nested_actions(self) -> None:
        result = (
            ClassBuilder()
            .add_if(True, lambda b: b.add("outer").add_if(True, lambda inner: inner.add("inner")))
            .build()
        )
        assert result == "outer inner"

    @pytest.mark.parametrize(
        ("condition", "expected"),
        [(True, "yes"), (False, "no")],
    )
    def test_add_if_else_strings(self, condition: bool, expected: str) -> None:
        assert ClassBuilder().add_if_else(condition, "yes", "no").build() == expected

    @pytest.mark.parametrize(
        ("condition", "expected"),
        [(True, "yes"), (False, "no")],
    )
    def test_add_if_else_actions(self, condition: bool, expected: str) -> None:
        result = ClassBuilder().add_if_else(
            condition, lambda b: b.add("yes"), lambda b: b.add("no")
        ).build()
        assert result == expected

    def test_add_if_else_string_and_action(self) -> None:
        assert ClassBuilder().add_if_else(True, "yes", lambda b: b.add("no")).build() == "yes"
        assert ClassBuilder().add_if_else(False, "yes", lambda b: b.add("no")).build() == "no"

    def test_add_if_else_action_and_string(self) -> None:
        assert ClassBuilder().add_if_else(True, lambda b: b.add("yes"), "no").build() == "yes"
        assert ClassBuilder().add_if_else(False, lambda b: b.add("yes"), "no").build() == "no"

    def test_add_if_else_runs_exactly_one_branch(self) -> None:
        calls: list[str] = []

        ClassBuilder().add_if_else(
            True,
            lambda b: calls.append("true"),
            lambda b: calls.append("false"),
        )

        assert calls == ["true"]


class TestLazy:
    """Tests for add_when() and add_lazy()."""

    def test_predicate_true_adds(self) -> None:
        assert ClassBuilder().add_when(lambda: True, "active").build() == "active"

    def test_predicate_false_skips(self) -> None:
        assert ClassBuilder().add_when(lambda: False, "active").build() == ""

    @pytest.mark.parametrize("outcome", [True, False])
    def test_predicate_called_exactly_once(self, outcome: bool) -> None:
        calls = []

        def predicate() -> bool:
            calls.append(1)
            return outcome

        ClassBuilder().add_when(predicate, "active")

        assert len(calls) == 1

    def test_factory_invoked_once_when_true(self) -> None:
        calls = []

        def factory() -> str:
            calls.append(1)
            return "computed"

        result = ClassBuilder().add_lazy(True, factory).build()

        assert result == "computed"
        assert len(calls) == 1

    def test_factory_not_invoked_when_false(self) -> None:
        def factory() -> str:
            raise AssertionError("factory must not be called")

        assert ClassBuilder().add_lazy(False, factory).build() == ""

    def test_factory_result_is_prefixed(self) -> None:
        result = ClassBuilder().set_prefix("sf").add_lazy(True, lambda: "btn").build()
        assert result == "sf-btn"

    def test_factory_returning_empty_is_dropped(self) -> None:
        assert ClassBuilder().add_lazy(True, lambda: "").build() == ""


class TestPrefix:
    """Tests for set_prefix() and clear_prefix()."""

    def test_prefix_applies_to_subsequent_classes(self) -> None:
        assert ClassBuilder().set_prefix("sf").add("btn").build() == "sf-btn"

    def test_custom_separator(self) -> None:
        assert ClassBuilder().set_prefix("card", "__").add("title").build() == "card__title"

    def test_empty_separator(self) -> None:
        assert ClassBuilder().set_prefix("is", "").add("Active").build() == "isActive"

    @pytest.mark.parametrize("prefix", [None, ""])
    def test_empty_prefix_clears(self, prefix: str | None) -> None:
        builder = ClassBuilder().set_prefix("sf").add("a").set_prefix(prefix).add("b")
        assert builder.build() == "sf-a b"
        assert builder.prefix is None

    def test_clear_prefix(self) -> None:
        result = ClassBuilder().set_prefix("sf").add("btn").clear_prefix().add("x").build()
        assert result == "sf-btn x"

    def test_prefix_not_retroactive(self) -> None:
        assert ClassBuilder().add("a").set_prefix("sf").add("b").build() == "a sf-b"

    def test_prefix_changes_between_adds(self) -> None:
        result = ClassBuilder().set_prefix("x").add("a").set_prefix("y").add("b").build()
        assert result == "x-a y-b"

    def test_multi_add_prefixes_each_token(self) -> None:
        assert ClassBuilder().set_prefix("sf").add("a", "b").build() == "sf-a sf-b"

    def test_prefix_applies_inside_actions(self) -> None:
        result = ClassBuilder().set_prefix("sf").add_if(True, lambda b: b.add("x")).build()
        assert result == "sf-x"

    def test_empty_value_not_prefixed(self) -> None:
        assert ClassBuilder().set_prefix("sf").add("").build() == ""

    def test_properties(self) -> None:
        builder = ClassBuilder().set_prefix("sf", "_")
        assert builder.prefix == "sf"
        assert builder.separator == "_"


class TestMergeAttributes:
    """Tests for merge_attributes()."""

    def test_none_attributes_is_noop(self) -> None:
        assert ClassBuilder("btn").merge_attributes(None).build() == "btn"

    def test_missing_key_is_noop(self) -> None:
        assert ClassBuilder("btn").merge_attributes({"id": "x"}).build() == "btn"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_or_none_value_is_noop(self, value: object) -> None:
        assert ClassBuilder("btn").merge_attributes({"class": value}).build() == "btn"

    def test_adds_tokens(self) -> None:
        result = ClassBuilder("btn").merge_attributes({"class": "active large"}).build()
        assert result == "btn active large"

    def test_normalizes_whitespace(self) -> None:
        result = ClassBuilder().merge_attributes({"class": "  a \t b\n\r c  "}).build()
        assert result == "a b c"

    def test_deduplicates_preserving_first_occurrence(self) -> None:
        result = ClassBuilder().merge_attributes({"class": "btn btn active btn"}).build()
        assert result == "btn active"

    def test_dedup_is_case_sensitive(self) -> None:
        assert ClassBuilder().merge_attributes({"class": "Btn btn"}).build() == "Btn btn"

    def test_non_string_value_is_stringified(self) -> None:
        assert ClassBuilder().merge_attributes({"class": 123}).build() == "123"

    def test_custom_key(self) -> None:
        attrs = {"class": "ignored", "wrapper-class": "outer"}
        assert ClassBuilder().merge_attributes(attrs, "wrapper-class").build() == "outer"

    def test_merge_bypasses_prefix(self) -> None:
        result = (
            ClassBuilder()
            .set_prefix("sf")
            .add("btn")
            .merge_attributes({"class": "active"})
            .add("x")
            .build()
        )
        assert result == "sf-btn active sf-x"

    def test_prefix_restored_after_merge(self) -> None:
        builder = ClassBuilder().set_prefix("sf", "_").merge_attributes({"class": "a"})
        assert builder.prefix == "sf"
        assert builder.separator == "_"

    def test_prefix_restored_when_value_str_fails(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("boom")

        builder = ClassBuilder().set_prefix("sf")
        with pytest.raises(RuntimeError):
            builder.merge_attributes({"class": Broken()})
        assert builder.add("x").build() == "sf-x"

    def test_attributes_not_mutated(self) -> None:
        attrs = {"class": "a a b"}
        ClassBuilder().merge_attributes(attrs)
        assert attrs == {"class": "a a b"}


class TestNullableAndClear:
    def test_build_or_none_empty(self) -> None:
        assert ClassBuilder().build_or_none() is None

    def test_build_or_none_after_false_conditions(self) -> None:
        assert ClassBuilder().add_if(False, "a").add("").build_or_none() is None

    def test_build_or_none_with_content(self) -> None:
        assert ClassBuilder("btn").build_or_none() == "btn"

    def test_clear_removes_classes(self) -> None:
        builder = ClassBuilder().add("a", "b")
        builder.clear()
        assert builder.build() == ""
        assert not builder

    def test_clear_keeps_prefix(self) -> None:
        builder = ClassBuilder().set_prefix("sf").add("a").clear().add("b")
        assert builder.build() == "sf-b"

    def test_builder_is_reusable_after_clear(self) -> None:
        builder = ClassBuilder("a")
        first = builder.build()
        builder.clear().add("b")
        assert first == "a"
        assert builder.build() == "b"


def test_fluent_chaining() -> None:
    is_active = True
    is_disabled = False

    result = (
        ClassBuilder("btn")
        .add_if(is_active, "active")
        .add_if(is_disabled, "disabled")
        .add_if_else(is_active, "on", "off")
        .add_when(lambda: True, "lazy")
        .build()
    )

    assert result == "btn active on lazy"
