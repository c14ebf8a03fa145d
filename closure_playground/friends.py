# friends.py

from typing import Iterable, Iterator, List, Optional

from closure_playground.errors import PreconditionViolation

KAKAO_FRIENDS = ("muzi", "ryon", "apeach", "neo", "tube", "con")


class FriendList:
    """
    名前の可変シーケンス。remove_first / remove_last でその場で要素を取り除く。
    遅延評価される引数は、呼び出された時点の状態を見る（スナップショットではない）。
    """
    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names: List[str] = list(KAKAO_FRIENDS if names is None else names)

    def remove_first(self) -> str:
        if not self._names:
            raise PreconditionViolation("remove_first() called on an empty sequence")
        return self._names.pop(0)

    def remove_last(self) -> str:
        if not self._names:
            raise PreconditionViolation("remove_last() called on an empty sequence")
        return self._names.pop()

    def as_list(self) -> List[str]:
        return list(self._names)

    def __len__(self):
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_list())

    def __eq__(self, other):
        if isinstance(other, FriendList):
            return self._names == other._names
        if isinstance(other, list):
            return self._names == other
        return NotImplemented

    def __repr__(self):
        return f"FriendList({self._names!r})"
