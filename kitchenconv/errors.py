from typing import List


class KitchenConvError(Exception):
    """Base exception for every conversion failure."""
    pass

class ConversionSyntaxError(KitchenConvError):
    """Malformed token sequence on the command line."""
    pass

class UsageError(ConversionSyntaxError):
    """Too few arguments to describe a conversion."""
    pass

class NumberFormatError(KitchenConvError):
    """Quantity token is not a number or a fraction."""
    pass

class SubstanceMismatchError(KitchenConvError):
    """Source and target name different substances."""
    pass

class MissingSubstanceError(KitchenConvError):
    """Weight/volume conversion without a substance."""
    pass

class KindMismatchError(KitchenConvError):
    """Units of incompatible kinds (e.g. temperature and weight)."""
    pass

class LookupFailedError(KitchenConvError):
    """Name missing from a static table.

    Carries every known name ranked by similarity, most similar first.
    """

    def __init__(self, message: str, name: str, suggestions: List[str]):
        super().__init__(message)
        self.name = name
        self.suggestions = suggestions

class UnknownUnitError(LookupFailedError):
    pass

class UnknownSubstanceError(LookupFailedError):
    pass
