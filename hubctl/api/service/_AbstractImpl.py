"""Abstract base class for native service manager backends."""

import signal
from abc import ABC, abstractmethod

from .ServiceDescriptor import ServiceDescriptor
from .ServiceStatusReport import ServiceStatusReport
from .SignalDelivery import SignalDelivery


class _AbstractImpl(ABC):
    """Platform-specific access to the native service manager.

    Backends never decide idempotency: commands ask ``is_active`` first and only
    then call ``start``/``stop``. Native failures surface as NativeManagerError.
    """

    # Word used in "Service is already <word>" messages
    active_word = "running"

    def __init__(self, descriptor: ServiceDescriptor):
        self.descriptor = descriptor

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the native manager reports the service as active."""
        pass

    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def restart(self) -> None:
        """Restart unconditionally, starting the service if it was stopped."""
        pass

    @abstractmethod
    def status(self) -> ServiceStatusReport:
        pass

    @abstractmethod
    def send_signal(self, signum: int = signal.SIGHUP) -> SignalDelivery:
        """Deliver ``signum`` to the agent's main process."""
        pass

    def refresh_registration(self) -> list[str]:
        """Re-register the service with the native manager after a reset.

        Returns:
            Native commands that were run, empty when the platform needs none
        """
        return []
