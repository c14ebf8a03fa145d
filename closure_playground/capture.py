# capture.py

from typing import Callable


def outer_function() -> None:
    print("This is the outer function.")

    def inner_function() -> None:
        print("This is the inner function.")

    # 内部で定義した関数をそのまま呼び出す
    inner_function()


def outer_function_with_value(value: int) -> Callable[[int], int]:
    """
    ネストした名前付き関数を返す。
    返された inner_function は value を捕捉し、外側の呼び出しが終わった後も使い続ける。
    """
    def inner_function(another_value: int) -> int:
        return value + another_value

    return inner_function


def outer_function_with_closure(value: int) -> Callable[[int], int]:
    """outer_function_with_value と同じ結果を、無名の lambda で返す版。"""
    closure: Callable[[int], int] = lambda another_value: value + another_value
    return closure
