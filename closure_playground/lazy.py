# lazy.py
"""
Lazy-argument evaluation
========================

Python has no autoclosure: an argument expression is always evaluated at the
call site. The deferred wrapper therefore has to be built explicitly.

    eval_lazy(defer(friends.remove_first))        # nothing runs until eval_lazy calls it
    eval_explicit(lambda: friends.remove_first())  # same, with a hand-written lambda

Passing `friends.remove_first()` instead would remove the element before the
callee is even entered; eval_lazy rejects such a non-callable value with
TypeError. A hand-written zero-argument lambda is accepted too.
"""

from typing import Any, Callable

from closure_playground.errors import PreconditionViolation


class Deferred:
    """
    関数と引数を記録しておき、呼び出されたときに初めて実行する。
    呼ぶたびに評価し直す（結果はキャッシュしない）。
    """
    __slots__ = ("func", "args", "kwargs")

    def __init__(self, func: Callable[..., Any], *args, **kwargs):
        if not callable(func):
            raise TypeError(f"Cannot defer non-callable {type(func).__name__}")
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def __call__(self):
        return self.func(*self.args, **self.kwargs)

    def __repr__(self):
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"Deferred({name})"


def defer(func: Callable[..., Any], *args, **kwargs) -> Deferred:
    return Deferred(func, *args, **kwargs)


def eval_lazy(expr: Callable[[], str]) -> str:
    """
    遅延された式を本体の中で評価する。defer() で包んだ Deferred を想定しているが、
    引数なしの callable なら何でも受け付ける。
    """
    if not callable(expr):
        raise TypeError(
            f"eval_lazy() expects a zero-argument callable, got {type(expr).__name__}; "
            "the argument was evaluated at the call site. Wrap it with defer()."
        )
    return expr()


def eval_explicit(closure: Callable[[], str]) -> str:
    if not callable(closure):
        raise TypeError(f"eval_explicit() expects a zero-argument callable, got {type(closure).__name__}")
    return closure()


def require(condition: bool, message: Callable[[], str]) -> None:
    # condition が真なら message は一度も呼ばれない
    if condition:
        return
    raise PreconditionViolation(str(message()))
