"""Tests for merge(), merge_deep() and merge_with()."""

import recordutils


def _add(target_value: int, source_value: int) -> int:
    return target_value + source_value


class TestMerge:
    """Shallow merge tests."""

    def test_disjoint_keys(self) -> None:
        """Keys from both sides end up in the result."""
        assert recordutils.merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_source_overwrites(self) -> None:
        """Source wins on shared keys."""
        result = recordutils.merge({"a": 1, "b": 2}, {"b": 3, "c": 4})

        assert result == {"a": 1, "b": 3, "c": 4}

    def test_empty_target(self) -> None:
        """Merging into an empty record copies source."""
        assert recordutils.merge({}, {"a": 1}) == {"a": 1}

    def test_values_are_shared_by_reference(self) -> None:
        """Shallow merge keeps the original value objects."""
        target = {"t": {"x": 1}, "shared": [1]}
        source = {"shared": [2], "s": {"y": 2}}

        result = recordutils.merge(target, source)

        assert result["t"] is target["t"]
        assert result["shared"] is source["shared"]
        assert result["s"] is source["s"]

    def test_nested_records_replaced_wholesale(self) -> None:
        """Nested records are not merged."""
        result = recordutils.merge({"a": {"b": 1}}, {"a": {"c": 2}})

        assert result == {"a": {"c": 2}}

    def test_does_not_mutate(self) -> None:
        """Arguments are untouched."""
        target = {"a": 1}
        source = {"b": 2}

        recordutils.merge(target, source)

        assert target == {"a": 1}
        assert source == {"b": 2}


class TestMergeDeep:
    """Deep merge tests."""

    def test_nested_merge(self) -> None:
        """Nested records are merged, not replaced."""
        result = recordutils.merge_deep({"a": {"b": 1}}, {"a": {"c": 2}, "d": 3})

        assert result == {"a": {"b": 1, "c": 2}, "d": 3}

    def test_lists_replace(self) -> None:
        """Lists are replaced wholesale, never merged element-wise."""
        target = {"a": {"b": 1, "c": [1, 2]}}
        source = {"a": {"c": [3, 4], "d": 5}, "e": 6}

        result = recordutils.merge_deep(target, source)

        assert result == {"a": {"b": 1, "c": [3, 4], "d": 5}, "e": 6}

    def test_type_mismatch_source_wins(self) -> None:
        """A scalar replaces a record and vice versa."""
        assert recordutils.merge_deep({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
        assert recordutils.merge_deep({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_deeply_nested(self) -> None:
        """Merging recurses through several levels."""
        target = {"x": {"y": {"z": 1, "keep": True}}}
        source = {"x": {"y": {"z": 2}}}

        result = recordutils.merge_deep(target, source)

        assert result == {"x": {"y": {"z": 2, "keep": True}}}

    def test_empty_source(self) -> None:
        """Empty source leaves target content."""
        assert recordutils.merge_deep({"a": {"b": 1}}, {}) == {"a": {"b": 1}}

    def test_does_not_mutate(self) -> None:
        """Neither side is modified, even the nested records."""
        target = {"a": {"b": 1}}
        source = {"a": {"c": 2}, "d": 3}

        recordutils.merge_deep(target, source)

        assert target == {"a": {"b": 1}}
        assert source == {"a": {"c": 2}, "d": 3}

    def test_merged_branches_are_records(self) -> None:
        """Merged nested levels are new Records."""
        target = {"a": {"b": 1}}

        result = recordutils.merge_deep(target, {"a": {"c": 2}})

        assert isinstance(result["a"], recordutils.Record)
        assert result["a"] is not target["a"]

    def test_untouched_branches_shared(self) -> None:
        """Target-only keys are carried through unchanged."""
        untouched = {"q": 1}

        result = recordutils.merge_deep({"keep": untouched}, {"other": 1})

        assert result["keep"] is untouched


class TestMergeWith:
    """Tests for merge_with() with a custom combine function."""

    def test_combines_shared_keys(self) -> None:
        """Shared keys go through combine, new keys are copied."""
        result = recordutils.merge_with({"a": 1, "b": 2}, {"b": 3, "c": 4}, _add)

        assert result == {"a": 1, "b": 5, "c": 4}

    def test_combine_can_change_type(self) -> None:
        """combine may return any value."""
        result = recordutils.merge_with(
            {"a": 1, "b": 2},
            {"b": 3, "c": 4},
            lambda t, s: f"{t}-{s}",
        )

        assert result == {"a": 1, "b": "2-3", "c": 4}

    def test_combine_not_called_for_new_keys(self) -> None:
        """New keys bypass combine entirely."""
        calls: list[tuple[int, int]] = []

        def record_call(t: int, s: int) -> int:
            calls.append((t, s))
            return t + s

        recordutils.merge_with({"a": 1}, {"b": 2, "c": 3}, record_call)

        assert calls == []

    def test_target_only_keys_kept(self) -> None:
        """Keys only in target survive."""
        assert recordutils.merge_with({"a": 1, "b": 2}, {"b": 3}, _add) == {"a": 1, "b": 5}

    def test_empty_source(self) -> None:
        """Empty source leaves target."""
        assert recordutils.merge_with({"a": 1}, {}, _add) == {"a": 1}

    def test_does_not_mutate(self) -> None:
        """Arguments are untouched."""
        target = {"a": 1, "b": 2}
        source = {"b": 3, "c": 4}

        recordutils.merge_with(target, source, _add)

        assert target == {"a": 1, "b": 2}
        assert source == {"b": 3, "c": 4}
