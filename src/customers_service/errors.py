"""Exceptions raised by the customers service."""


class CustomersServiceError(Exception):
    """Base exception for customers service errors."""
    pass


class MissingDatabaseSecretError(CustomersServiceError):
    """Raised when the FaunaDB secret is not configured."""

    def __init__(self, variable_name: str = 'FAUNADB_SECRET_KEY') -> None:
        super().__init__(f'{variable_name} is not set')
        self.variable_name = variable_name
