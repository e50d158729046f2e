"""Custom exceptions for the RPC Optimizer."""


class UnknownNetworkError(ValueError):
    """Raised when a network identifier is not one of the supported networks."""

    def __init__(self, network: str):
        super().__init__(f"Unsupported network: {network}")
        self.network = network


class EndpointSourceError(Exception):
    """Raised when a dynamic endpoint list cannot be fetched and no cached copy exists."""
    pass
