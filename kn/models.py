"""
Knative serving resource schemas (serving.knative.dev/v1alpha1)
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

SERVING_API_VERSION = "serving.knative.dev/v1alpha1"


class ObjectMeta(BaseModel):
    """Standard Kubernetes object metadata. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    name: str
    namespace: str = "default"
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    generation: Optional[int] = None
    resourceVersion: Optional[str] = None
    uid: Optional[str] = None
    creationTimestamp: Optional[str] = None


class ReleaseType(BaseModel):
    """Rollout between a current and a candidate revision"""

    revisions: List[str] = Field(default_factory=list)
    rolloutPercent: int = Field(0, ge=0, le=100)


class RunLatestType(BaseModel):
    configuration: Optional[Dict[str, Any]] = None


class PinnedType(BaseModel):
    revisionName: Optional[str] = None
    configuration: Optional[Dict[str, Any]] = None


class ServiceSpec(BaseModel):
    """Desired state of a Service. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    release: Optional[ReleaseType] = None
    runLatest: Optional[RunLatestType] = None
    pinned: Optional[PinnedType] = None


class Addressable(BaseModel):
    hostname: Optional[str] = None


class Condition(BaseModel):
    type: str
    status: str
    reason: Optional[str] = None
    message: Optional[str] = None
    lastTransitionTime: Optional[str] = None


class ServiceStatus(BaseModel):
    """Observed state of a Service. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    domain: Optional[str] = None
    domainInternal: Optional[str] = None
    address: Optional[Addressable] = None
    latestReadyRevisionName: Optional[str] = None
    latestCreatedRevisionName: Optional[str] = None
    observedGeneration: Optional[int] = None
    conditions: Optional[List[Condition]] = None


class Service(BaseModel):
    """Service resource"""

    apiVersion: str = SERVING_API_VERSION
    kind: str = "Service"
    metadata: ObjectMeta
    spec: ServiceSpec = Field(default_factory=ServiceSpec)
    status: ServiceStatus = Field(default_factory=ServiceStatus)
