# Sorting with comparator closures
from closure_playground.sorting import sort_using_closure, sort_using_closure_short, sort_using_nested_function


def main() -> None:
    print(sort_using_nested_function([3, 1, 2]))
    print(sort_using_closure([8, 6, 9]))
    print(sort_using_closure_short([10, 5, 6]))

    test_list: list[int] = [64, 34, 25, 12, 22, 11, 90]
    print("元のリスト:", test_list)
    print("ソート後のリスト:", sort_using_closure_short(test_list))

if __name__ == "__main__":
    main()
