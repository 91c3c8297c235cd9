"""Exception hierarchy for Faultline."""


class FaultlineError(Exception):
    """Base exception for Faultline errors."""
    pass


class FatalRequestError(FaultlineError):
    """Unrecoverable fault raised while processing a single request.

    This is the equivalent of an unchecked unwrap: it is never returned as a
    value and always unwinds out of the processing call that raised it.
    """
    pass


class SequenceParseError(FaultlineError):
    """Request sequence file could not be parsed."""
    pass
