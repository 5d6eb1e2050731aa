"""Domain-specific exceptions — framework-independent."""


class ChatProviderError(Exception):
    """Raised when a chat provider returns an error.

    Provider-agnostic: any adapter may raise it.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class UnsupportedModelError(ValueError):
    """Raised when a provider has no mapping for the requested model."""

    def __init__(self, provider: str, model: str):
        self.provider = provider
        self.model = model
        super().__init__(f"Model '{model}' is not supported by {provider}")


class EventStreamClosedError(RuntimeError):
    """Raised when writing to an event stream that was closed or terminated."""
