from __future__ import annotations


class FlowsmithError(Exception):
    """Base exception class for all flowsmith-specific errors.

    This is the root of the flowsmith exception hierarchy. Catching it at the
    CLI boundary handles every engine failure while letting system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            generator.generate(migration_model)
        except FlowsmithError as e:
            logger.error("generation_failed", error=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the FlowsmithError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
