from __future__ import annotations


class GestureKitError(RuntimeError):
    """Base class for every error raised by gesturekit."""

    pass


class ElementNotFoundError(GestureKitError):
    """Raised when a selector required by a gesture matches no element."""

    def __init__(self, selector: str):
        super().__init__(f"Element not found: {selector}")
        self.selector = selector


class AssertionEvaluationError(GestureKitError):
    """Raised when a custom assertion predicate fails with an exception.

    The validator catches it and reports the assertion as failed, so it never
    escapes to the runner.
    """

    pass


class HookError(GestureKitError):
    """Raised when a suite hook (before_all, before_each, ...) fails."""

    def __init__(self, hook: str, suite: str, cause: BaseException):
        super().__init__(f"{hook} hook failed in suite {suite!r}: {cause}")
        self.hook = hook
        self.suite = suite
        self.cause = cause


class SpecParseError(GestureKitError):
    """Raised when a test spec document is malformed or misses required fields."""

    pass


class UnresolvedCallbackError(GestureKitError):
    """Raised when a spec references a callback name that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Callback not registered: {name!r}")
        self.name = name


class AutomationAlreadyRunningError(GestureKitError):
    """Raised when an automated run is started while another is in flight."""

    pass


class CompletionTimeoutError(GestureKitError, TimeoutError):
    """Raised when a completion poll gives up before a result is published."""

    pass
