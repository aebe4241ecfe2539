"""Service module - lifecycle control and signal delivery through the native service manager."""

from .._output_schemas.service import (
    ServiceReloadOutput,
    ServiceRestartOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
)
from .ServiceConfig import ServiceConfig

__all__ = [
    "ServiceConfig",
    "ServiceReloadOutput",
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
]
