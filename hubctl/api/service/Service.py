"""Service public API - controls the agent through the native service manager."""

import signal

from ..ControlError import UnsupportedPlatformError
from ._AbstractImpl import _AbstractImpl
from .ServiceDescriptor import ServiceDescriptor
from .ServiceStatusReport import ServiceStatusReport
from .SignalDelivery import SignalDelivery

# Platform variant -> backend package under hubctl.api.service
_BACKEND_REGISTRY = {
    "linux": "_linux",
    "darwin": "_darwin",
}


class Service:
    """Public API for service operations.

    Use as a context manager; entering it selects the backend and raises
    UnsupportedPlatformError on anything other than Linux or macOS.
    """

    def __init__(self, descriptor: ServiceDescriptor):
        self.descriptor = descriptor
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend = _BACKEND_REGISTRY.get(self.descriptor.platform)
        if backend is None:
            raise UnsupportedPlatformError(self.descriptor.system)

        module = __import__(f"hubctl.api.service.{backend}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.descriptor)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    @property
    def impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    @property
    def active_word(self) -> str:
        return self.impl.active_word

    def is_active(self) -> bool:
        return self.impl.is_active()

    def start(self) -> None:
        self.impl.start()

    def stop(self) -> None:
        self.impl.stop()

    def restart(self) -> None:
        self.impl.restart()

    def status(self) -> ServiceStatusReport:
        return self.impl.status()

    def send_signal(self, signum: int = signal.SIGHUP) -> SignalDelivery:
        return self.impl.send_signal(signum)

    def refresh_registration(self) -> list[str]:
        return self.impl.refresh_registration()
