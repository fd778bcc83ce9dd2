"""Exceptions raised by key resolution and token handling."""


class AuthError(Exception):
    """Base class for every auth core failure."""


class StartupError(AuthError):
    """Key material could not be prepared; the service must not start."""


class ConfigInvalidError(StartupError):
    """Configured key material is malformed, mismatched, or incomplete."""


class KeyGenFailedError(StartupError):
    """RSA keypair generation failed."""


class SnapshotWriteFailedError(StartupError):
    """The JWKS snapshot file could not be written."""


class TokenError(AuthError):
    """A presented token was rejected."""


class InvalidTokenError(TokenError):
    """Token is not acceptable: wrong type tag, bad subject, or bad signature."""


class InvalidSignatureError(InvalidTokenError):
    """Signature does not verify against the public key."""


class MalformedTokenError(InvalidTokenError):
    """Token cannot be decoded or lacks required claims."""


class UnsupportedAlgorithmError(InvalidTokenError):
    """Token header names an algorithm other than RS256."""


class TokenExpiredError(TokenError):
    """Token exp claim is in the past."""
