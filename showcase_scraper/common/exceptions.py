from typing import Any


class ShowcaseException(Exception):
    pass


class ConfigurationError(ShowcaseException):
    pass


class TransportError(ShowcaseException):
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class PersistenceError(ShowcaseException):
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")
