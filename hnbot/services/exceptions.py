"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class SearchError(ServiceError):
    """Base class for failures of a Hacker News search."""


class RequestBuildError(SearchError):
    pass


class TransportError(SearchError):
    """DNS, connection, timeout or other network-level failure."""


class ResponseStatusError(SearchError):
    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SearchError):
    pass


class EmptyResponseError(SearchError):
    pass
