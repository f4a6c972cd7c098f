"""Errors from calls to third-party services."""


class AdapterError(Exception):
    """Base error for outbound integrations."""

    pass


class ProviderError(AdapterError):
    """A third-party provider failed or rejected a request.

    status_code is the provider's HTTP status when one was received.
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")
