"""Errors raised at the hosted backend boundary."""


class GatewayError(RuntimeError):
    """Raised when the hosted backend rejects or drops a request."""
