"""Custom exceptions for Mail Searcher."""


class MailSearcherError(Exception):
    """Base exception for all Mail Searcher errors."""


class UnreadableSourceError(MailSearcherError):
    """Exception raised when the record source file cannot be opened."""


class ConfigurationError(MailSearcherError):
    """Exception raised for configuration related errors."""
