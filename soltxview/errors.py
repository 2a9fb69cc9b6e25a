class SoltxviewError(Exception):
    """Base class for errors raised while reading transaction input."""


class InvalidAddressError(SoltxviewError, ValueError):
    """An address string or byte string is not a 32-byte public key."""


class NormalizeError(SoltxviewError, ValueError):
    """A transaction payload does not have the expected RPC or Geyser shape."""


class TokenRegistryError(SoltxviewError, ValueError):
    """A token list document could not be loaded."""
