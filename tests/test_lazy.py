import pytest

from closure_playground.errors import PreconditionViolation
from closure_playground.friends import FriendList
from closure_playground.lazy import Deferred, defer, eval_explicit, eval_lazy, require


def test_defer_does_not_run():
    friends = FriendList()
    expr = defer(friends.remove_first)
    assert isinstance(expr, Deferred)
    assert len(friends) == 6


def test_eval_lazy_removes_once_inside_callee():
    friends = FriendList()
    assert eval_lazy(defer(friends.remove_first)) == "muzi"
    assert friends == ["ryon", "apeach", "neo", "tube", "con"]
    assert eval_lazy(defer(friends.remove_last)) == "con"
    assert friends == ["ryon", "apeach", "neo", "tube"]


def test_eval_explicit_removes_once_inside_callee():
    friends = FriendList()
    assert eval_explicit(lambda: friends.remove_first()) == "muzi"
    assert friends == ["ryon", "apeach", "neo", "tube", "con"]
    assert eval_explicit(lambda: friends.remove_last()) == "con"
    assert friends == ["ryon", "apeach", "neo", "tube"]


def test_deferred_sees_state_at_invocation_time():
    friends = FriendList()
    expr = defer(friends.remove_first)
    friends.remove_first()
    assert eval_lazy(expr) == "ryon"


def test_deferred_runs_on_every_call():
    friends = FriendList()
    expr = defer(friends.remove_first)
    assert expr() == "muzi"
    assert expr() == "ryon"


def test_deferred_forwards_arguments():
    expr = defer("-".join, ["a", "b"])
    assert eval_lazy(expr) == "a-b"


def test_eval_lazy_rejects_eager_value():
    friends = FriendList()
    with pytest.raises(TypeError, match="defer"):
        eval_lazy("muzi")
    assert len(friends) == 6


def test_eval_lazy_accepts_plain_lambda():
    friends = FriendList()
    calls = []

    def remove_first():
        calls.append(1)
        return friends.remove_first()

    assert eval_lazy(lambda: remove_first()) == "muzi"
    assert calls == [1]
    assert friends == ["ryon", "apeach", "neo", "tube", "con"]


def test_eval_explicit_rejects_non_callable():
    with pytest.raises(TypeError):
        eval_explicit("muzi")


def test_defer_rejects_non_callable():
    with pytest.raises(TypeError):
        defer(42)


def test_require_skips_message_when_condition_holds():
    friends = FriendList()
    require(True, defer(friends.remove_first))
    assert len(friends) == 6


def test_require_evaluates_message_on_failure():
    friends = FriendList()
    with pytest.raises(PreconditionViolation, match="muzi"):
        require(False, defer(friends.remove_first))
    assert len(friends) == 5


def test_underflow_propagates_from_deferred():
    friends = FriendList([])
    with pytest.raises(PreconditionViolation):
        eval_lazy(defer(friends.remove_first))
    with pytest.raises(PreconditionViolation):
        eval_explicit(lambda: friends.remove_last())


if __name__ == "__main__":
    test_defer_does_not_run()
    test_eval_lazy_removes_once_inside_callee()
    test_eval_explicit_removes_once_inside_callee()
    test_deferred_sees_state_at_invocation_time()
    test_deferred_runs_on_every_call()
    test_deferred_forwards_arguments()
    test_eval_lazy_rejects_eager_value()
    test_eval_lazy_accepts_plain_lambda()
    test_eval_explicit_rejects_non_callable()
    test_defer_rejects_non_callable()
    test_require_skips_message_when_condition_holds()
    test_require_evaluates_message_on_failure()
    test_underflow_propagates_from_deferred()
    print("Lazy Evaluation Test Passed!")
