"""Service commands."""

import io
import logging
from typing import Optional

import click

from ..config import get_namespace
from ..errors import OutputError
from ..output import OUTPUT_FORMATS, render_service
from ..params import KnParams

logger = logging.getLogger(__name__)


@click.group("service")
def service_cmd():
    """Manage Knative services."""


@service_cmd.command("describe")
@click.argument("name", required=False)
@click.option("-n", "--namespace", default=None, help="Namespace")
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="yaml",
    show_default=True,
    help="Output format",
)
@click.pass_obj
def describe_cmd(
    params: KnParams,
    name: Optional[str],
    namespace: Optional[str],
    output_format: str,
):
    """Show the current state of a service.

    \b
    Examples:
      kn service describe my-service
      kn service describe my-service -n production
      kn service describe my-service -o json
    """
    if not name:
        raise click.UsageError("requires the service name.")

    ns = namespace or get_namespace()
    client = params.serving_factory()
    service = client.get_service(ns, name)
    logger.debug(f"Fetched service {ns}/{name}")

    text = render_service(service, output_format)
    try:
        write_output(params.output, text)
    except (OSError, ValueError, TypeError) as e:
        raise OutputError(f"Failed to write output: {e}")


def write_output(sink, text: str) -> None:
    """Write to a text stream, or UTF-8 encoded to any other sink."""
    if isinstance(sink, io.TextIOBase):
        sink.write(text)
    else:
        sink.write(text.encode("utf-8"))
    sink.flush()
