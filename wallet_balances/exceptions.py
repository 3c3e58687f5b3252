"""Errors raised by wallet-balances.

Every error is fatal for the run: ``main`` catches ``WalletBalanceError``,
logs it and exits non-zero.
"""


class WalletBalanceError(Exception):
    """Base class for all wallet-balances errors."""
    pass


class ConfigFileAccessError(WalletBalanceError):
    """Config file is missing or cannot be read."""

    def __init__(self, path, reason=None):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read config file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigParseError(WalletBalanceError):
    """Config file content does not match the expected structure."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid config file {self.path}: {reason}")


class InvalidAddressError(WalletBalanceError):
    """A wallet string is not a valid public key."""

    def __init__(self, value, reason=None):
        self.value = value
        self.reason = reason
        message = f"Invalid wallet address: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RpcRequestError(WalletBalanceError):
    """An RPC call to the node failed."""

    def __init__(self, method, reason):
        self.method = method
        self.reason = reason
        super().__init__(f"RPC request {method} failed: {reason}")
