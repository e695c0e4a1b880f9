"""
Tests for the in-place insertion sort.

Covers the end-to-end scenarios, the identity and stability guarantees,
and the sequence of trace steps reported through the step hook.
"""

import random

import pytest

from linklist.sl_sort import (
    TITLE_AT_HEAD,
    TITLE_AT_SPOT,
    TITLE_BEFORE,
    TITLE_UNLINK,
    insertion_sort,
)


def record_steps(model):
    steps = []

    def _hook(title, head, roles, isolated):
        steps.append((title, model.values(), roles, isolated))

    insertion_sort(model, on_step=_hook)
    return steps


class TestScenarios:
    @pytest.mark.parametrize(
        "values, expected",
        [
            ([39, 45, 11, 22], [11, 22, 39, 45]),
            ([1], [1]),
            ([], []),
            ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
            ([1, 2, 3, 4], [1, 2, 3, 4]),
            ([3, -1, 0, -1, 7], [-1, -1, 0, 3, 7]),
        ],
    )
    def test_sorted_output(self, make_model, values, expected):
        model = make_model(values)
        insertion_sort(model)
        assert model.values() == expected

    def test_none_is_noop(self):
        insertion_sort(None)

    def test_already_sorted_keeps_every_link(self, make_model):
        model = make_model([1, 2, 3, 4])
        links = [(node, node.next) for node in model]
        insertion_sort(model)
        assert [(node, node.next) for node in model] == links

    def test_equal_payloads_keep_order(self, make_model):
        model = make_model([2, 1, 2])
        first_two, one, second_two = list(model)
        insertion_sort(model)
        assert list(model) == [one, first_two, second_two]


class TestInvariants:
    @pytest.fixture(params=range(20))
    def values(self, request):
        rng = random.Random(request.param)
        return [rng.randint(-5, 5) for _ in range(rng.randint(0, 12))]

    def test_identity_and_payloads_preserved(self, make_model, values):
        model = make_model(values)
        before = {id(node): node.data for node in model}
        insertion_sort(model)
        after = {id(node): node.data for node in model}
        assert after == before

    def test_non_decreasing(self, make_model, values):
        model = make_model(values)
        insertion_sort(model)
        result = model.values()
        assert all(a <= b for a, b in zip(result, result[1:]))

    def test_stable(self, make_model, values):
        model = make_model(values)
        insertion_sort(model)
        expected = sorted(range(len(values)), key=lambda i: values[i])
        # node ids follow input positions
        assert [node.id for node in model] == expected

    def test_idempotent(self, make_model, values):
        model = make_model(values)
        insertion_sort(model)
        once = list(model)
        insertion_sort(model)
        assert list(model) == once


class TestStepHook:
    def test_no_steps_for_short_lists(self, make_model):
        assert record_steps(make_model([])) == []
        assert record_steps(make_model([1])) == []

    def test_already_sorted_only_before_frames(self, make_model):
        steps = record_steps(make_model([1, 2, 3, 4]))
        assert [title for title, *_ in steps] == [TITLE_BEFORE] * 3

    def test_all_equal_never_moves(self, make_model):
        steps = record_steps(make_model([7, 7, 7]))
        assert [title for title, *_ in steps] == [TITLE_BEFORE] * 2

    def test_reverse_sorted_always_inserts_at_head(self, make_model):
        steps = record_steps(make_model([5, 4, 3, 2, 1]))
        titles = [title for title, *_ in steps]
        assert titles == [TITLE_BEFORE, TITLE_UNLINK, TITLE_AT_HEAD] * 4

    def test_sample_sequence(self, make_model):
        model = make_model([39, 45, 11, 22])
        n39, n45, n11, n22 = list(model)
        steps = record_steps(model)

        assert [title for title, *_ in steps] == [
            TITLE_BEFORE,
            TITLE_BEFORE, TITLE_UNLINK, TITLE_AT_HEAD,
            TITLE_BEFORE, TITLE_UNLINK, TITLE_AT_SPOT,
        ]

        title, values, roles, isolated = steps[0]
        assert values == [39, 45, 11, 22]
        assert roles.head is n39 and roles.prev is n39
        assert roles.curr is n45 and roles.next is n11
        assert roles.spot is None
        assert isolated is None

        _, _, roles, _ = steps[1]
        assert roles.spot is None
        assert roles.prev is n45 and roles.curr is n11

        _, values, roles, isolated = steps[2]
        assert values == [39, 45, 22]
        assert isolated is n11
        assert roles.spot is None

        _, values, roles, _ = steps[3]
        assert values == [11, 39, 45, 22]
        assert roles.head is n11

        _, values, roles, _ = steps[6]
        assert values == [11, 22, 39, 45]
        assert roles.spot is n11
        assert roles.prev is n45
        assert roles.next is None

    def test_prev_not_advanced_on_move(self, make_model):
        model = make_model([39, 45, 11, 22])
        n45 = model.node_at(1)
        steps = record_steps(model)
        assert all(roles.prev is n45 for _, _, roles, _ in steps[1:])
