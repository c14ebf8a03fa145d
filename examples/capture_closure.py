# Nested function vs. closure: both capture `value`
from closure_playground.capture import outer_function_with_closure, outer_function_with_value


def main() -> None:
    for value, another_value in [(5, 10), (3, 5), (-2, 2)]:
        nested: int = outer_function_with_value(value)(another_value)
        closure: int = outer_function_with_closure(value)(another_value)
        assert nested == closure == value + another_value
        print(f"value={value} another_value={another_value}:", nested, closure)

if __name__ == "__main__":
    main()
