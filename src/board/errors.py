"""Board error types and user-facing messages."""

LOAD_ERROR_MESSAGE = "There was a problem loading fetching data from the database."
GENERIC_ERROR_MESSAGE = "Something went wrong."


class ServiceError(Exception):
    """Data service call failed or the service was unreachable."""


class CategoryNotFoundError(LookupError):
    """Fact references a category missing from the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown category: {name!r}")
        self.name = name
