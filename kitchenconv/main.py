# kitchenconv CLI Entry Point
import logging
import sys
from typing import List, Optional

from .errors import ConversionSyntaxError, KitchenConvError, LookupFailedError, UsageError
from .parsing.arguments import tokenize_args
from .services.unit_conversion import convert
from .settings import settings

logger = logging.getLogger("kitchenconv")

USAGE_EXAMPLES = [
    "kitchenconv 10 kg to lb",
    "kitchenconv 400 F in C",
    "kitchenconv 1 tbs butter to g",
    "kitchenconv 3 ts of sugar to g",
    "kitchenconv 3/4 cup to ml",
]


def print_usage() -> None:
    print("usage examples:", file=sys.stderr)
    for example in USAGE_EXAMPLES:
        print(f"  {example}", file=sys.stderr)


def report_error(e: KitchenConvError) -> None:
    prefix = "syntax error" if isinstance(e, ConversionSyntaxError) else "error"
    print(f"{prefix}: {e}", file=sys.stderr)

    if isinstance(e, LookupFailedError) and e.suggestions:
        shown = e.suggestions[:settings.max_suggestions]
        print(f"did you mean: {', '.join(shown)}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    # Configure logging (stderr keeps stdout for the result line)
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    if argv is None:
        argv = sys.argv[1:]

    try:
        req = tokenize_args(argv)
        result = convert(req)
    except UsageError:
        print_usage()
        return 1
    except KitchenConvError as e:
        logger.debug(f"Conversion failed: {e!r}")
        report_error(e)
        return 1

    print(result.format(settings.result_precision))
    return 0


if __name__ == "__main__":
    sys.exit(main())
