"""Result callbacks carried by an authorize intent.

The host environment decides what a handle is (a pending message, a
coroutine scheduler, a plain function); this module only needs it to be
callable.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

Handle = Callable[..., Any]


class AuthorizationCallbacks(Protocol):
    """Capabilities the authorization component uses to report a result."""

    def notify_success(self, result: Any = None) -> bool: ...

    def notify_failure(self, error: Any = None) -> bool: ...

    def notify_completion(self, result: Any = None) -> bool: ...

    def notify_cancellation(self) -> bool: ...


def _invoke(name: str, handle: Optional[Handle], *args) -> bool:
    if handle is None:
        return False
    logger.debug("Invoking %s callback", name)
    handle(*args)
    return True


@dataclass(frozen=True)
class CallbackHandles:
    """The four optional handles of an authorize intent.

    The completion handle is the fallback: it fires only when the
    handle specific to the outcome (success, failure or cancellation)
    is absent. A cancellation never fires the failure handle.

    Every notify method returns True if a handle was invoked.
    """

    success: Optional[Handle] = None
    failure: Optional[Handle] = None
    completion: Optional[Handle] = None
    cancellation: Optional[Handle] = None

    def notify_success(self, result: Any = None) -> bool:
        if self.success is not None:
            return _invoke("success", self.success, result)
        return self.notify_completion(result)

    def notify_failure(self, error: Any = None) -> bool:
        if self.failure is not None:
            return _invoke("failure", self.failure, error)
        return self.notify_completion(error)

    def notify_completion(self, result: Any = None) -> bool:
        return _invoke("completion", self.completion, result)

    def notify_cancellation(self) -> bool:
        if self.cancellation is not None:
            return _invoke("cancellation", self.cancellation)
        return _invoke("completion", self.completion)
