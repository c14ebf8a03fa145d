# errors.py

PRECONDITION_VIOLATION = "PRECONDITION_VIOLATION"


class PreconditionViolation(IndexError):
    """
    呼び出し側が満たすべき前提条件が崩れたことを示す例外。
    空のシーケンスから要素を取り出そうとした場合などに送出される。
    list.pop() と同じく IndexError として捕捉できる。
    """
    kind = PRECONDITION_VIOLATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.kind}: {self.message}"
