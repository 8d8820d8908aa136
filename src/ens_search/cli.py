"""Command-line interface for ens-name-search.

    ens-name-search single <name>
    ens-name-search batch <path|->  [--on-error abort|skip] [--progress]

Results go to stdout, diagnostics to stderr. Exit codes: 0 success,
1 lookup or input failure, 2 usage or configuration error, 130 interrupted.
"""

import argparse
import asyncio
import os
import sys

from src.config.logger_config import logger
from src.config.settings import load_settings
from src.ens_search.application.contracts import OracleFailurePolicy
from src.ens_search.application.ports import AvailabilityOraclePort
from src.ens_search.domain.errors import ConfigError, EnsSearchError
from src.ens_search.infrastructure.oracle.controller_oracle import create_oracle
from src.ens_search.search import run_batch, run_single

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ens-name-search", description="ENS name availability searcher")
    sub = p.add_subparsers(dest="command", required=True, metavar="{single,batch}")

    single = sub.add_parser("single", help="Check the availability of one name")
    single.add_argument("name")

    batch = sub.add_parser("batch", help="Check the availability of many names, one per line")
    batch.add_argument("path", help="Input file path or '-' for stdin")
    batch.add_argument(
        "--on-error",
        choices=[policy.value for policy in OracleFailurePolicy],
        default=OracleFailurePolicy.ABORT.value,
        help="What to do when a lookup fails: stop the run (default) or log it and continue",
    )
    batch.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    return p


async def _dispatch(args: argparse.Namespace, oracle: AvailabilityOraclePort) -> int:
    if args.command == "single":
        await run_single(args.name, oracle)
        return EXIT_OK

    summary = await run_batch(
        args.path,
        oracle,
        on_error=OracleFailurePolicy(args.on_error),
        show_progress=args.progress,
    )
    if summary.failed_count:
        sys.stderr.write(f"error: {summary.failed_count} lookup(s) failed in {summary.source_label}\n")
        return EXIT_FAILURE
    return EXIT_OK


async def _run_with_node(args: argparse.Namespace) -> int:
    settings = load_settings()
    async with create_oracle(settings) as oracle:
        return await _dispatch(args, oracle)


def _silence_stdout() -> None:
    # The reader is gone but stdout is still flushed at exit.
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: list[str] | None = None, oracle: AvailabilityOraclePort | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if oracle is not None:
            return asyncio.run(_dispatch(args, oracle))
        return asyncio.run(_run_with_node(args))
    except ConfigError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return EXIT_USAGE
    except EnsSearchError as ex:
        logger.debug("Command failed: command={}, error_type={}", args.command, type(ex).__name__)
        sys.stderr.write(f"error: {ex}\n")
        return EXIT_FAILURE
    except BrokenPipeError:
        logger.debug("Output pipe closed by reader: command={}", args.command)
        _silence_stdout()
        return EXIT_FAILURE
    except KeyboardInterrupt:
        sys.stderr.write("interrupted\n")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
