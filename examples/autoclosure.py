# Lazy arguments: the removal runs inside the callee, not at the call site
from closure_playground.friends import FriendList
from closure_playground.lazy import defer, eval_explicit, eval_lazy, require


def main() -> None:
    kakao_friends = FriendList()
    print(eval_lazy(defer(kakao_friends.remove_first)))  # muzi
    eval_lazy(defer(kakao_friends.remove_last))
    print(kakao_friends.as_list())

    print(eval_explicit(lambda: kakao_friends.remove_first()))  # ryon

    # 条件が真なので削除は起きない
    require(len(kakao_friends) > 0, defer(kakao_friends.remove_first))
    print("remaining:", len(kakao_friends))

if __name__ == "__main__":
    main()
