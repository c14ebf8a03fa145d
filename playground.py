#!/usr/bin/env python3
# playground（クロージャ・デモ実行ファイル）

import argparse
import sys

from closure_playground import diag
from closure_playground.demo import run, section_names
from closure_playground.errors import PreconditionViolation


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Closure playground: nested functions, capture, escaping closures, lazy arguments, comparator sorts")
    parser.add_argument("--section", action="append", choices=section_names(), help="Run only this section (repeatable)")
    parser.add_argument("--list", action="store_true", help="List section names and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr")
    args = parser.parse_args(argv)

    diag.set_verbose(args.verbose)

    if args.list:
        if args.section:
            diag.warn("--section is ignored with --list")
        for name in section_names():
            print(name)
        return 0

    try:
        executed = run(args.section)
    except PreconditionViolation as e:
        diag.error(str(e))
        return 1

    diag.info(f"ran {len(executed)} section(s): {', '.join(executed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
