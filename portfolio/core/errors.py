from __future__ import annotations


class PortfolioError(Exception):
    """Base error. `status_code` is the HTTP status the API answers with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LoadError(PortfolioError):
    """Catalog fetch or parse failed. The cause is chained via `raise ... from`."""


class NotFoundError(PortfolioError):
    status_code = 404


class ValidationError(PortfolioError):
    status_code = 400


class InternalError(PortfolioError):
    status_code = 500
