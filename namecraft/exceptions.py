"""Exception types raised by the naming engine."""


class NamecraftError(Exception):
    pass


class InvalidRequestError(NamecraftError):
    """Generation parameters failed validation."""
    pass


class ProviderError(NamecraftError):
    """The completion provider could not produce a response."""
    pass


class CompletionTimeoutError(ProviderError):
    pass


class DomainProviderError(NamecraftError):
    """A single domain availability backend failed."""
    pass


class ProviderNotConfiguredError(DomainProviderError):
    pass
