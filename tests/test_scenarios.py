"""
End-to-end lifecycles: nested result → Response → Recyclable.
"""

from kungfu import Ok, Error, Some

from remotedata import response as R
from remotedata import recyclable as RC
from remotedata import Transport


class TestRecyclableLifecycle:
    def test_first_successful_cycle(self):
        state = RC.NeverAsked()
        state = RC.to_loading(state)
        assert state == RC.Loading()
        state = RC.merge_response(R.from_nested_result(Ok(Ok("A"))), state)
        assert state == RC.Ready("A")

    def test_reload_then_fail(self):
        state = RC.to_loading(RC.Ready("A"))
        assert state == RC.Recycling("A", RC.LoadingStage())

        state = RC.merge_response(R.from_nested_result(Error("timeout")), state)
        assert state == RC.Recycling("A", RC.FailureStage(Transport("timeout")))
        assert RC.to_error(state) == Some(Transport("timeout"))
        assert RC.with_default("Z", state) == "Z"
        assert not RC.is_ready(state)

    def test_reload_then_succeed(self):
        state = RC.Recycling("A", RC.FailureStage(Transport("timeout")))
        state = RC.to_loading(state)
        assert state == RC.Recycling("A", RC.LoadingStage())
        state = RC.merge_response(R.Success("B"), state)
        assert state == RC.Ready("B")

    def test_retained_value_is_same_object(self):
        value = {"id": 1}
        state = RC.to_loading(RC.Ready(value))
        state = RC.merge_response(R.Failure(Transport("timeout")), state)
        match state:
            case RC.Recycling(kept, RC.FailureStage()):
                assert kept is value
            case _:
                raise AssertionError(f"unexpected state {state!r}")
