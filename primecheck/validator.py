import logging
import re

from primecheck.errors import UsageError

# Base-10, optional sign, ASCII digits only, no surrounding whitespace.
INTEGER_REGEX = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

logger = logging.getLogger(__name__)


def parse_number_args(args: list[str]) -> int:
    """Return the single integer in *args* or raise UsageError.

    Runs before any network activity; nothing is partially accepted.
    """
    logger.info("Command-line arguments: %s", args)
    if len(args) != 1:
        raise UsageError(f"expected exactly 1 number, got {len(args)} arguments")

    token = args[0]
    logger.info("Parsing number: %s", token)
    if not INTEGER_REGEX.fullmatch(token):
        raise UsageError(f"invalid number {token!r}")

    number = int(token)
    if not INT64_MIN <= number <= INT64_MAX:
        raise UsageError(f"number {token!r} is out of the signed 64-bit range")

    logger.info("Successfully parsed number: %d", number)
    return number
