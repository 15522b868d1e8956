"""Call-recording serving backend for tests.

``FakeServing`` stands in for ``ServingClient`` behind the client
factory. It records every call as an ``Action`` and answers all of them
with the same canned service (or error), whatever name was asked for.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .client import SERVICES_RESOURCE, ServingFactory
from .models import Service


@dataclass(frozen=True)
class Action:
    """A call issued against the fake backend."""

    verb: str
    resource: str
    namespace: str = ""
    name: str = ""

    def matches(self, verb: str, resource: str) -> bool:
        """Compare verb and resource, ``"*"`` matching anything."""
        return (verb == "*" or verb == self.verb) and (
            resource == "*" or resource == self.resource
        )


@dataclass
class FakeServing:
    response: Optional[Service] = None
    error: Optional[Exception] = None
    actions: List[Action] = field(default_factory=list)

    def get_service(self, namespace: str, name: str) -> Service:
        self.actions.append(Action("get", SERVICES_RESOURCE, namespace, name))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_action(self) -> Optional[Action]:
        return self.actions[-1] if self.actions else None

    def serving_factory(self) -> ServingFactory:
        """Factory that hands out this fake."""
        return lambda: self
