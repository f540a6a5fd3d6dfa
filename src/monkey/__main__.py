from __future__ import annotations

import argparse
import getpass
import logging
import sys

from monkey import repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("--prompt", default=repl.ReplConfig().prompt)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    print(f"Hello {getpass.getuser()}. Welcome to the Monkey REPL!")
    repl.start(sys.stdin.buffer, sys.stdout, repl.ReplConfig(prompt=args.prompt))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
