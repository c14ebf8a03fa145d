# demo.py
"""
Fixed top-to-bottom demonstration.

SECTIONS is ordered; run() always follows that order, whatever subset is asked for.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from closure_playground import diag
from closure_playground.capture import outer_function, outer_function_with_closure, outer_function_with_value
from closure_playground.friends import KAKAO_FRIENDS, FriendList
from closure_playground.lazy import defer, eval_explicit, eval_lazy
from closure_playground.registry import HandlerRegistry
from closure_playground.sorting import sort_using_closure, sort_using_closure_short, sort_using_nested_function

CAPTURE_INPUTS = ((5, 10), (3, 5))
SORT_INPUTS = ([3, 1, 2], [8, 6, 9], [10, 5, 6])


def show_nested() -> None:
    outer_function()


def show_capture() -> None:
    value, another_value = CAPTURE_INPUTS[0]
    result_function = outer_function_with_value(value)
    print(result_function(another_value))

    value, another_value = CAPTURE_INPUTS[1]
    result_closure = outer_function_with_closure(value)
    print(result_closure(another_value))


def show_escaping() -> None:
    handlers = HandlerRegistry("demo_completion_handlers")
    message = "network request finished"

    # 登録した関数が返った後も message はハンドラの中で生き続ける
    handlers.register(lambda: print(message))
    print(f"registered completion handlers: {len(handlers)}")


def show_autoclosure() -> None:
    friends = FriendList(KAKAO_FRIENDS)
    print(eval_lazy(defer(friends.remove_first)))
    print(eval_lazy(defer(friends.remove_last)))
    print(friends.as_list())

    friends = FriendList(KAKAO_FRIENDS)
    print(eval_explicit(lambda: friends.remove_first()))


def show_sorting() -> None:
    print(sort_using_nested_function(SORT_INPUTS[0]))
    print(sort_using_closure(SORT_INPUTS[1]))
    print(sort_using_closure_short(SORT_INPUTS[2]))


SECTIONS: List[Tuple[str, Callable[[], None]]] = [
    ("nested", show_nested),
    ("capture", show_capture),
    ("escaping", show_escaping),
    ("autoclosure", show_autoclosure),
    ("sorting", show_sorting),
]


def section_names() -> List[str]:
    return [name for name, _ in SECTIONS]


def run(only: Optional[Iterable[str]] = None) -> List[str]:
    """指定されたセクション（省略時は全部）を定義順に実行し、実行した名前を返す。"""
    wanted = set(section_names() if only is None else only)
    unknown = wanted.difference(section_names())
    if unknown:
        raise ValueError(f"Unknown section(s): {', '.join(sorted(unknown))}")

    executed = []
    for name, show in SECTIONS:
        if name not in wanted:
            continue
        diag.info(f"section: {name}")
        show()
        executed.append(name)
    return executed
