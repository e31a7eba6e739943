"""Command-line entry point: ``primecheck [-v] [--env-file PATH] <number>``."""

from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter

from primecheck.client import ChatCompleter, OpenAIChatCompleter
from primecheck.config import configure_tracing, load_environment, load_settings, require_api_key
from primecheck.diagnostics import configure_diagnostics, log
from primecheck.errors import PrimeCheckError, UsageError
from primecheck.query import check_prime
from primecheck.validator import parse_number_args

PROG = "primecheck"
USAGE = f"{PROG} [-v] [--env-file PATH] <number>"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description="Ask a language model whether an integer is prime and print yes or no.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--env-file", default=".env", help="Key/value file loaded into the environment (default: .env)")
    # Collected raw so the validator decides on count and syntax.
    parser.add_argument("numbers", nargs="*", metavar="number", help="Integer to check")
    return parser


def main(argv: list[str] | None = None, completer: ChatCompleter | None = None) -> int:
    started = perf_counter()
    try:
        args = build_parser().parse_args(argv)
    except UsageError as exc:
        configure_diagnostics(False)
        log(logging.ERROR, "Invalid arguments: %s", exc)
        print(f"Usage: {USAGE} ({exc})")
        return exc.exit_code
    except SystemExit as exc:
        # --help prints and asks argparse to exit; report its status instead.
        return exc.code if isinstance(exc.code, int) else 0

    configure_diagnostics(args.verbose)
    log(logging.INFO, "Starting %s", PROG)

    try:
        load_environment(args.env_file)
        settings = load_settings()
        api_key = require_api_key(settings)
        number = parse_number_args(args.numbers)
        configure_tracing(settings)

        if completer is None:
            completer = OpenAIChatCompleter(model=settings.llm_model, base_url=settings.openai_base_url)
        answer = check_prime(
            number,
            api_key=api_key,
            timeout=settings.max_timeout_seconds,
            completer=completer,
        )
    except UsageError as exc:
        log(logging.ERROR, "Invalid input: %s", exc)
        print(f"Usage: {USAGE} ({exc})")
        return exc.exit_code
    except PrimeCheckError as exc:
        log(logging.ERROR, "Prime check failed: %s: %s", type(exc).__name__, exc)
        print(f"Error: {exc}")
        return exc.exit_code

    log(logging.INFO, "Prime check result: %s", answer)
    print(answer)
    log(logging.INFO, "Total execution time: %.3fs", perf_counter() - started)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
