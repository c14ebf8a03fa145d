# Nested functions
from closure_playground.capture import outer_function, outer_function_with_value


def main() -> None:
    # 内部関数は外部関数の中でだけ呼ばれる
    outer_function()

    add_five = outer_function_with_value(5)
    result: int = add_five(10)
    print("add_five(10):", result)

if __name__ == "__main__":
    main()
