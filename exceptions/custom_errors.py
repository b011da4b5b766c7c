class GraphConstructionError(Exception):
    """Raised when a conflict graph is built from malformed input, e.g. an edge to an unknown vertex or a self-loop."""

    pass


class GraphTypeMismatchError(Exception):
    """Raised when two conflict graphs of different types are combined."""

    pass


class SearchBudgetExceeded(Exception):
    """Raised when the odd cycle search runs out of its node expansion budget."""

    def __init__(self, message: str, partial=None, expansions: int = 0):
        super().__init__(message)
        self.partial = list(partial or [])
        self.expansions = expansions


class UnknownAlgorithmError(Exception):
    """Raised when a covering request names an algorithm that does not exist."""

    pass


class FileReadingError(Exception):
    """Raised when there is an error reading a file."""

    pass


class FileContentError(Exception):
    """Raised when the content of a file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    GraphConstructionError: 400,
    GraphTypeMismatchError: 400,
    SearchBudgetExceeded: 422,
    UnknownAlgorithmError: 400,
    FileReadingError: 500,
    FileContentError: 400,
}
