# diag.py

import sys

_verbose = False


def set_verbose(flag: bool) -> None:
    global _verbose
    _verbose = flag


def info(message: str) -> None:
    # stdout はデモ出力専用
    if _verbose:
        print(f"[Playground] {message}", file=sys.stderr)


def warn(message: str) -> None:
    print(f"[WARN] {message}", file=sys.stderr)


def error(message: str) -> None:
    print(f"[ERROR] {message}", file=sys.stderr)
