class DomainException(Exception):
    """Base exception for every error raised by pgtypes."""

    pass
