# Escaping closures: the handler outlives the call that registered it
from closure_playground.registry import completion_handlers, some_function_with_escaping_closure


def start_request(url: str) -> None:
    status = f"finished {url}"
    some_function_with_escaping_closure(lambda: print(status))


def main() -> None:
    start_request("https://example.com/a")
    start_request("https://example.com/b")
    print("registered:", len(completion_handlers))

    # 呼び出しはレジストリの外側の責務（ここでは確認のためだけに呼ぶ）
    for handler in completion_handlers:
        handler()

if __name__ == "__main__":
    main()
