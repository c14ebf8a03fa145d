# registry.py
"""
Deferred-invocation registry
============================

登録された引数なしの callable を、登録順に保持し続けるだけのレジストリ。
登録した関数の実行が終わった後もハンドラ（とそれが捕捉した値）は生き続ける。
つまりここに渡されるクロージャは「エスケープ」する。

ハンドラを呼び出す・取り消す操作はまだ無い。
"""

from typing import Callable, Iterator, List, Tuple

from closure_playground import diag

CompletionHandler = Callable[[], None]


class HandlerRegistry:
    def __init__(self, name: str = "completion_handlers"):
        self.name = name
        self._handlers: List[CompletionHandler] = []

    def register(self, handler: CompletionHandler) -> CompletionHandler:
        """ハンドラを末尾に追加する。呼び出しはしない。デコレータとしても使える。"""
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)
        diag.info(f"{self.name}: registered {getattr(handler, '__qualname__', repr(handler))} ({len(self._handlers)} total)")
        return handler

    def handlers(self) -> Tuple[CompletionHandler, ...]:
        return tuple(self._handlers)

    def __len__(self):
        return len(self._handlers)

    def __iter__(self) -> Iterator[CompletionHandler]:
        return iter(self.handlers())

    def __repr__(self):
        return f"HandlerRegistry({self.name!r}, {len(self._handlers)} handlers)"


# プロセス全体で共有されるレジストリ（破棄はしない）
completion_handlers = HandlerRegistry()


def register(handler: CompletionHandler) -> CompletionHandler:
    return completion_handlers.register(handler)


def some_function_with_escaping_closure(completion_handler: CompletionHandler) -> None:
    register(completion_handler)
