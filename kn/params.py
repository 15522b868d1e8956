"""Dependencies injected into the command tree."""

import functools
from dataclasses import dataclass
from typing import IO, Optional, Union

import click

from .client import ServingFactory, new_serving_client
from .config import get_server, get_timeout, get_token


@dataclass
class KnParams:
    """Output sink and client factory shared by all commands.

    Tests pass their own instance as the click context object; the
    ``kn`` entry point starts from an empty one and fills in defaults.
    """

    output: Optional[Union[IO[str], IO[bytes]]] = None
    serving_factory: Optional[ServingFactory] = None

    def initialize(
        self, server: Optional[str] = None, token: Optional[str] = None
    ) -> None:
        """Fill in production defaults for anything not injected."""
        if self.output is None:
            self.output = click.get_text_stream("stdout")
        if self.serving_factory is None:
            self.serving_factory = functools.partial(
                new_serving_client,
                server or get_server(),
                token=token or get_token(),
                timeout=get_timeout(),
            )
