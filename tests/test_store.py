"""
Unit tests for the keyed-store adapter.
"""

import logging

from remotedata import response as R
from remotedata import recyclable as RC
from remotedata import store as S
from remotedata import Transport


def forget(_):
    return RC.NeverAsked()


class TestGet:
    def test_absent_key_is_never_asked(self):
        assert S.get("k", {}) == RC.NeverAsked()

    def test_present_key(self):
        assert S.get("k", {"k": RC.Ready(1)}) == RC.Ready(1)


class TestUpdate:
    def test_writes_result(self):
        assert S.update("k", RC.to_loading, {}) == {"k": RC.Loading()}

    def test_never_asked_result_removes_key(self):
        store = {"k": RC.Ready(1), "other": RC.Loading()}
        result = S.update("k", forget, store)
        assert "k" not in result
        assert result == {"other": RC.Loading()}

    def test_never_asked_on_absent_key_stores_nothing(self):
        assert S.update("k", lambda s: s, {}) == {}

    def test_input_not_mutated(self):
        store = {"k": RC.Ready(1)}
        S.update("k", forget, store)
        S.update("j", RC.to_loading, store)
        assert store == {"k": RC.Ready(1)}

    def test_logs_removal(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="remotedata.store._ops"):
            S.update("k", forget, {"k": RC.Ready(1)})
        assert "reverted to NeverAsked" in caplog.text


class TestTransitions:
    def test_to_loading_retains_value(self):
        store = S.to_loading("k", {"k": RC.Ready(1)})
        assert store == {"k": RC.Recycling(1, RC.LoadingStage())}

    def test_merge_response_on_absent_key(self):
        store = S.merge_response("k", R.Success(1), {})
        assert store == {"k": RC.Ready(1)}

    def test_merge_response_failure_on_absent_key(self):
        store = S.merge_response("k", R.Failure(Transport("t")), {})
        assert store == {"k": RC.Failure(Transport("t"))}

    def test_merge_response_keeps_retained_value(self):
        store = S.merge_response(
            "k", R.Failure(Transport("t")), {"k": RC.Recycling(1, RC.LoadingStage())}
        )
        assert store == {"k": RC.Recycling(1, RC.FailureStage(Transport("t")))}

    def test_merge_response_leaves_other_keys(self):
        store = S.merge_response("k", R.Success(2), {"j": RC.Loading()})
        assert store == {"j": RC.Loading(), "k": RC.Ready(2)}


class TestCompact:
    def test_drops_never_asked(self):
        store = {"a": RC.NeverAsked(), "b": RC.Ready(1)}
        assert S.compact(store) == {"b": RC.Ready(1)}
