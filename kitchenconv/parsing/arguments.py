from typing import List, Optional

from ..errors import ConversionSyntaxError, UsageError
from ..schemas import ParsedRequest

SEPARATORS = {"to", "in"}
FILLER = "of"
MIN_TOKENS = 4  # quantity, unit, separator, unit

EXPECTED = "expected '<quantity> <unit> [material] to <unit> [material]'"


def tokenize_args(argv: List[str]) -> ParsedRequest:
    """
    Split command-line tokens into a ParsedRequest.

    Before the separator ("to" or "in"): quantity, unit, optional substance.
    After it: unit, optional substance. A literal "of" in front of a
    substance is skipped. All tokens are lowercased.
    """
    if len(argv) < MIN_TOKENS:
        raise UsageError(f"{EXPECTED}, got {len(argv)} argument(s)")

    quantity: Optional[str] = None
    unit_from: Optional[str] = None
    substance_from: Optional[str] = None
    unit_to: Optional[str] = None
    substance_to: Optional[str] = None
    separator_found = False

    for raw in argv:
        token = raw.lower()

        if token in SEPARATORS:
            if separator_found:
                raise ConversionSyntaxError("multiple 'to' or 'in' not allowed")
            separator_found = True
        elif not separator_found:
            if quantity is None:
                quantity = token
            elif unit_from is None:
                unit_from = token
            elif substance_from is None:
                if token != FILLER:
                    substance_from = token
            else:
                raise ConversionSyntaxError(EXPECTED)
        else:
            if unit_to is None:
                unit_to = token
            elif substance_to is None:
                if token != FILLER:
                    substance_to = token
            else:
                raise ConversionSyntaxError(EXPECTED)

    if quantity is None or unit_from is None or unit_to is None:
        raise ConversionSyntaxError(EXPECTED)

    return ParsedRequest(
        quantity=quantity,
        unit_from=unit_from,
        substance_from=substance_from,
        unit_to=unit_to,
        substance_to=substance_to,
    )
