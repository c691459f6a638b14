"""Exceptions raised by the analytics core."""


class AnalyticsError(Exception):
    """Base class for analytics errors."""


class InvalidParameterError(AnalyticsError, ValueError):
    """A computation was called with arguments outside its contract."""


class DomainConfigError(AnalyticsError):
    """The static mark/line/suit tables are inconsistent."""
