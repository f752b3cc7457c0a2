"""Custom exception hierarchy for the board generator."""


class BoardSetupError(Exception):
    """Base exception for all board setup errors."""


class InvalidParamsError(BoardSetupError):
    """Bad caller input; the request is rejected as a whole."""


class InvalidPlayerCountError(InvalidParamsError):
    """Anything other than exactly four distinct players."""


class SupplyExhaustedError(BoardSetupError):
    """A draw pool is too small for the slots it has to fill."""


class ValidationError(BoardSetupError):
    """Post-generation validation check failure."""
