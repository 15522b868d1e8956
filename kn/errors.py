"""Error types raised by kn commands.

All errors derive from ``click.ClickException`` so that click prints
``Error: <message>`` on stderr and exits with a non-zero status.
Argument-count problems use ``click.UsageError`` directly.
"""

import click


class KnError(click.ClickException):
    """Base class for kn command failures."""

    exit_code = 1


class ClientConstructionError(KnError):
    """The client factory could not build a serving client."""


class BackendError(KnError):
    """The serving API rejected the request or could not be reached."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class SerializationError(KnError):
    """A resource could not be rendered to, or parsed from, text."""


class OutputError(KnError):
    """Writing the rendered resource to the output sink failed."""
