"""Generic listener registry.

This module provides a reusable ObserverManager class that handles thread-safe
registration, unregistration, and notification of listener callbacks.
Registration returns a handle, and removal is by handle identity, so two
structurally identical callbacks (e.g. two equal lambdas or bound methods of
equal objects) never shadow each other.
"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)


class ListenerHandle[T: Callable[..., Any]]:
    """
    Opaque token returned by ObserverManager.register.

    Compared by identity only. Keep it to unregister the callback later.
    """

    __slots__ = ("callback",)

    def __init__(self, callback: T):
        self.callback = callback

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"<ListenerHandle {name} at {id(self):#x}>"


class ObserverManager[T: Callable[..., Any]]:
    """
    Ordered listener registry with thread-safe registration and notification.

    Type Parameters:
        T: The listener callable type (e.g., Callable[[HSV], None])

    Thread Safety:
        All operations are thread-safe. The lock is released before calling
        listeners to prevent potential deadlocks.

    Example:
        ```python
        class MyService:
            def __init__(self):
                self._listeners = ObserverManager[Callable[[int], None]]()

            def add_listener(self, fn) -> ListenerHandle:
                return self._listeners.register(fn)

            def remove_listener(self, handle: ListenerHandle) -> None:
                self._listeners.unregister(handle)

            def _something_happened(self, value: int):
                self._listeners.notify(value)
        ```
    """

    def __init__(self, observer_type_name: str = "listener"):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the listener type for logging (e.g., "update")
        """
        self._handles: list[ListenerHandle[T]] = []
        self._lock = Lock()
        self._observer_type_name = observer_type_name

    def register(self, callback: T) -> ListenerHandle[T]:
        """
        Register a listener callback.

        Registering the same callable twice yields two independent handles
        and the callable is invoked once per handle.

        Args:
            callback: The callable to invoke on notification

        Returns:
            Handle to pass to unregister()
        """
        handle = ListenerHandle(callback)
        with self._lock:
            self._handles.append(handle)
        logger.debug(f"Registered {self._observer_type_name} listener: {handle}")
        return handle

    def unregister(self, handle: ListenerHandle[T]) -> bool:
        """
        Unregister a listener by its handle.

        Args:
            handle: The handle returned by register()

        Returns:
            True if the handle was registered, False otherwise
        """
        with self._lock:
            for index, registered in enumerate(self._handles):
                if registered is handle:
                    del self._handles[index]
                    logger.debug(f"Unregistered {self._observer_type_name} listener: {handle}")
                    return True

        logger.warning(
            f"Attempted to unregister unknown {self._observer_type_name} listener: {handle}"
        )
        return False

    def notify(self, *args: Any, **kwargs: Any) -> None:
        """
        Call every registered listener in registration order.

        The lock is acquired to copy the handle list, then released before
        calling listeners, so listeners may register/unregister during
        notification.

        Error Handling:
            Exceptions in listeners are logged but don't affect other listeners.
        """
        with self._lock:
            handles = list(self._handles)

        for handle in handles:
            try:
                handle.callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} listener {handle}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered listeners."""
        with self._lock:
            count = len(self._handles)
            self._handles.clear()
        if count > 0:
            logger.info(f"Cleared {count} {self._observer_type_name} listener(s)")

    def __contains__(self, handle: object) -> bool:
        with self._lock:
            return any(registered is handle for registered in self._handles)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)
