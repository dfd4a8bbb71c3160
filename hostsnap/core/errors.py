"""Failure type raised by metric collectors."""


class MetricError(Exception):
    """A metric could not be collected; the message is the reason shown to the user."""
