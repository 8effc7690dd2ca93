"""
Unit tests for the Recyclable state machine.
"""

import itertools

import pytest
from kungfu import Some, Nothing

from remotedata import response as R
from remotedata import recyclable as RC
from remotedata import Transport, Custom


ERR = Transport("timeout")
CERR = Custom("denied")

NEVER = RC.NeverAsked()
LOADING = RC.Loading()
FAILURE = RC.Failure(ERR)
READY = RC.Ready("A")
RECYCLING_LOADING = RC.Recycling("A", RC.LoadingStage())
RECYCLING_FAILURE = RC.Recycling("A", RC.FailureStage(ERR))

STATES = [NEVER, LOADING, FAILURE, READY, RECYCLING_LOADING, RECYCLING_FAILURE]
RESPONSES = [R.Success("B"), R.Failure(ERR), R.Failure(CERR)]


class TestToLoading:
    @pytest.mark.parametrize(
        "state, expected",
        [
            (NEVER, LOADING),
            (LOADING, LOADING),
            (FAILURE, LOADING),
            (READY, RECYCLING_LOADING),
            (RECYCLING_LOADING, RECYCLING_LOADING),
            (RECYCLING_FAILURE, RECYCLING_LOADING),
        ],
    )
    def test_table(self, state, expected):
        assert RC.to_loading(state) == expected

    @pytest.mark.parametrize("state", STATES)
    def test_idempotent(self, state):
        once = RC.to_loading(state)
        assert RC.to_loading(once) == once

    def test_keeps_same_value_object(self):
        value = ["payload"]
        state = RC.to_loading(RC.Ready(value))
        assert state.value is value


class TestMergeResponse:
    @pytest.mark.parametrize("state", STATES)
    def test_success_always_ready(self, state):
        assert RC.merge_response(R.Success("B"), state) == RC.Ready("B")

    @pytest.mark.parametrize("state", [NEVER, LOADING, FAILURE])
    def test_failure_without_retained_value(self, state):
        assert RC.merge_response(R.Failure(CERR), state) == RC.Failure(CERR)

    @pytest.mark.parametrize("state", [READY, RECYCLING_LOADING, RECYCLING_FAILURE])
    def test_failure_keeps_retained_value(self, state):
        assert RC.merge_response(R.Failure(CERR), state) == RC.Recycling(
            "A", RC.FailureStage(CERR)
        )

    @pytest.mark.parametrize(
        "state, response", list(itertools.product(STATES, RESPONSES))
    )
    def test_total(self, state, response):
        result = RC.merge_response(response, state)
        assert isinstance(
            result, (RC.NeverAsked, RC.Loading, RC.Failure, RC.Ready, RC.Recycling)
        )
        assert not isinstance(result, (RC.NeverAsked, RC.Loading))


class TestConstructors:
    def test_from_response_success(self):
        assert RC.from_response(R.Success("B")) == RC.Ready("B")

    def test_from_response_failure_never_recycles(self):
        assert RC.from_response(R.Failure(ERR)) == FAILURE

    def test_first_loading(self):
        assert RC.first_loading() == LOADING


class TestTransforms:
    def test_map_touches_payload_only(self):
        assert RC.map(str.lower, READY) == RC.Ready("a")
        assert RC.map(str.lower, RECYCLING_FAILURE) == RC.Recycling(
            "a", RC.FailureStage(ERR)
        )
        for state in (NEVER, LOADING, FAILURE):
            assert RC.map(str.lower, state) == state

    def test_map_errors_reaches_both_failure_shapes(self):
        assert RC.map_errors(str.upper, FAILURE) == RC.Failure(Transport("TIMEOUT"))
        assert RC.map_errors(str.upper, RECYCLING_FAILURE) == RC.Recycling(
            "A", RC.FailureStage(Transport("TIMEOUT"))
        )

    @pytest.mark.parametrize("state", [NEVER, LOADING, READY, RECYCLING_LOADING])
    def test_error_maps_pass_non_failures(self, state):
        assert RC.map_errors(str.upper, state) == state
        assert RC.map_custom_error(str.upper, state) == state
        assert RC.map_transport_error(str.upper, state) == state

    def test_map_custom_error_skips_transport(self):
        assert RC.map_custom_error(str.upper, RECYCLING_FAILURE) == RECYCLING_FAILURE
        recycling_custom = RC.Recycling("A", RC.FailureStage(CERR))
        assert RC.map_custom_error(str.upper, recycling_custom) == RC.Recycling(
            "A", RC.FailureStage(Custom("DENIED"))
        )

    def test_map_transport_error(self):
        assert RC.map_transport_error(len, FAILURE) == RC.Failure(Transport(7))
        assert RC.map_transport_error(len, RC.Failure(CERR)) == RC.Failure(CERR)


class TestProjections:
    @pytest.mark.parametrize(
        "state, expected",
        [
            (NEVER, "Z"),
            (LOADING, "Z"),
            (FAILURE, "Z"),
            (READY, "A"),
            (RECYCLING_LOADING, "Z"),
            (RECYCLING_FAILURE, "Z"),
        ],
    )
    def test_with_default_only_bare_ready(self, state, expected):
        assert RC.with_default("Z", state) == expected

    @pytest.mark.parametrize(
        "state, expected",
        [
            (NEVER, "Z"),
            (LOADING, "Z"),
            (FAILURE, "timeout"),
            (READY, "A"),
            (RECYCLING_LOADING, "Z"),
            (RECYCLING_FAILURE, "timeout"),
        ],
    )
    def test_merge(self, state, expected):
        assert RC.merge("Z", state) == expected

    @pytest.mark.parametrize(
        "state, expected",
        [
            (NEVER, Nothing()),
            (LOADING, Nothing()),
            (FAILURE, Some(ERR)),
            (READY, Nothing()),
            (RECYCLING_LOADING, Nothing()),
            (RECYCLING_FAILURE, Some(ERR)),
        ],
    )
    def test_to_error(self, state, expected):
        assert RC.to_error(state) == expected

    def test_retained_value(self):
        assert RC.retained_value(READY) == Some("A")
        assert RC.retained_value(RECYCLING_LOADING) == Some("A")
        assert RC.retained_value(RECYCLING_FAILURE) == Some("A")
        assert RC.retained_value(FAILURE) == Nothing()
        assert RC.retained_value(NEVER) == Nothing()


class TestPredicates:
    @pytest.mark.parametrize(
        "state, flags",
        [
            (NEVER, "never"),
            (LOADING, "loading"),
            (FAILURE, "error transport"),
            (RC.Failure(CERR), "error custom"),
            (READY, "ready"),
            (RECYCLING_LOADING, "recycling loading"),
            (RECYCLING_FAILURE, "recycling error transport"),
            (RC.Recycling("A", RC.FailureStage(CERR)), "recycling error custom"),
        ],
    )
    def test_predicates(self, state, flags):
        expected = set(flags.split())
        assert RC.is_never_asked(state) is ("never" in expected)
        assert RC.is_ready(state) is ("ready" in expected)
        assert RC.is_recycling(state) is ("recycling" in expected)
        assert RC.is_loading(state) is ("loading" in expected)
        assert RC.is_error(state) is ("error" in expected)
        assert RC.is_transport_error(state) is ("transport" in expected)
        assert RC.is_custom_error(state) is ("custom" in expected)
