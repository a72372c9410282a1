import logging
import sys

from config import LOG_LEVEL, PROMPT
from Engine.jobs import show_jobs
from Engine.shell import dispatch, finalize, initialize


def main_loop():
    """Read lines, split on whitespace and hand each one to dispatch()"""
    logging.basicConfig(level=LOG_LEVEL, format="%(name)s: %(message)s")

    if initialize() != 0:
        print("minishell: initialization failed", file=sys.stderr)
        return 1

    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                print()
                break

            tokens = line.split()
            if not tokens:
                continue

            if tokens == ["exit"]:
                break
            if tokens == ["jobs"]:
                show_jobs()
                continue

            dispatch(len(tokens), tokens)
    finally:
        finalize()
    return 0


def entrypoint():
    raise SystemExit(main_loop())


if __name__ == "__main__":
    entrypoint()
