class ScoringError(Exception):
    """Base class for scoring failures surfaced to callers"""


class InvalidInputError(ScoringError):
    """Responses were not supplied as a question id -> value mapping"""


class MetadataUnavailableError(ScoringError):
    """Question/category metadata could not be read or is empty"""


class StoreUnavailableError(Exception):
    """A storage read failed; raised by the stores, handled by the engine"""
