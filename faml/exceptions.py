import logging


# Library logger - no configuration, user controls output
logger = logging.getLogger(__name__)


class FAMLBaseError(Exception):
    """
    Base class for all FAML-specific errors.

    The numeric operations themselves never raise: they are total functions
    over their declared fixed-width types. These exceptions belong to the
    accuracy tooling built on top of them (contract lookup, error profiling,
    plotting), so users can catch any FAML error with a single except clause.

    Args:
        message: The error message describing what went wrong
        context: Optional additional context about where the error occurred
    """

    def __init__(self, message: str, context: str | None = None) -> None:
        self.message = message
        self.context = context

        # Library logs at DEBUG level - user can promote if needed
        logger.debug("FAML exception: %s", self._format_message())
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with optional context."""
        if self.context:
            return f"{self.message} (Context: {self.context})"
        return self.message


class ConfigurationError(FAMLBaseError):
    """
    Raised when the accuracy tooling is given invalid parameters.

    Examples:
        - Unknown approximation contract name
        - Empty, reversed or non-finite sampling domain
        - Too few sample points for an error profile
        - Approximation or reference that is not callable
    """

    pass


class DataIntegrityError(FAMLBaseError):
    """
    Raised when data produced during profiling is unusable.

    This indicates that a reference implementation returned NaN or infinite
    values inside the domain it was asked to cover, or returned an array of
    the wrong shape. Approximations are allowed to misbehave (that is what a
    profile measures); references are not.
    """

    pass
