from __future__ import annotations
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable
from zendriver import cdp

from .errors import GestureKitError
from .mouse.config import cfg
from .mouse.geometry import Rect


class CdpEvaluationError(GestureKitError):
    """Raised when a Runtime call returns exception details instead of a value."""

    pass


@runtime_checkable
class Dom(Protocol):
    """Everything the engine needs from a live document.

    Element handles are opaque: whatever `query` returns is handed back to
    `bounding_rect`, `query_within` and `dispatch_mouse_event` unchanged.
    """

    async def query(self, selector: str) -> Optional[Any]: ...

    async def query_within(self, element: Any, selector: str) -> Optional[Any]: ...

    async def count(self, selector: str) -> int: ...

    async def bounding_rect(self, element: Any) -> Rect: ...

    async def element_from_point(self, x: float, y: float) -> Optional[Any]: ...

    async def dispatch_mouse_event(
        self, element: Any, event_type: str, init: Dict[str, Any]
    ) -> None: ...

    async def text_content(self, selector: str) -> Optional[str]: ...

    async def has_class(self, selector: str, class_name: str) -> Optional[bool]: ...

    async def read_global(self, key: str) -> Any: ...

    async def write_global(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True)
class ElementHandle:
    """A CDP remote object reference to a DOM element."""

    object_id: str
    description: str = ""


_BOUNDING_RECT_JS = (
    "function() { const r = this.getBoundingClientRect();"
    " return {left: r.left, top: r.top, width: r.width, height: r.height}; }"
)
_QUERY_WITHIN_JS = "function(selector) { return this.querySelector(selector); }"
_DISPATCH_JS = (
    "function(type, init) {"
    " const event = new MouseEvent(type, Object.assign({view: window}, init));"
    " this.dispatchEvent(event); return true; }"
)


def _js(value: Any) -> str:
    """Encode a Python value as a JavaScript literal."""
    return json.dumps(value)


def _unwrap_remote(response: Any) -> Tuple[Any, Any]:
    """Split a Runtime response into (RemoteObject, ExceptionDetails)."""
    if isinstance(response, tuple):
        remote = response[0] if response else None
        details = response[1] if len(response) > 1 else None
        return remote, details
    return response, None


def _remote_attr(remote: Any, name: str, json_name: str) -> Any:
    if remote is None:
        return None
    if isinstance(remote, dict):
        return remote.get(json_name)
    return getattr(remote, name, None)


class CdpDom:
    """Dom implementation over a zendriver tab, using Runtime calls only."""

    def __init__(
        self,
        page,
        *,
        timeout_seconds: float = cfg.CDP_SEND_TIMEOUT_S,
        object_group: str = cfg.CDP_OBJECT_GROUP,
    ):
        self.page = page
        self.timeout_seconds = timeout_seconds
        self.object_group = object_group

    async def _send(self, command, *, label: str) -> Any:
        try:
            response = await asyncio.wait_for(
                self.page.send(command), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logging.getLogger(__name__).warning(
                "CDP %s did not answer within %.0f ms",
                label,
                self.timeout_seconds * 1000.0,
            )
            raise
        remote, details = _unwrap_remote(response)
        if details is not None:
            text = _remote_attr(details, "text", "text") or "exception"
            exception = _remote_attr(details, "exception", "exception")
            description = _remote_attr(exception, "description", "description")
            raise CdpEvaluationError(f"CDP {label} raised: {description or text}")
        return remote

    async def _evaluate(self, expression: str, *, by_value: bool, label: str) -> Any:
        return await self._send(
            cdp.runtime.evaluate(
                expression=expression,
                return_by_value=by_value,
                await_promise=False,
                object_group=self.object_group,
            ),
            label=label,
        )

    async def _call_on(
        self,
        element: ElementHandle,
        declaration: str,
        *args: Any,
        by_value: bool,
        label: str,
    ) -> Any:
        return await self._send(
            cdp.runtime.call_function_on(
                function_declaration=declaration,
                object_id=cdp.runtime.RemoteObjectId(element.object_id),
                arguments=[cdp.runtime.CallArgument(value=arg) for arg in args],
                return_by_value=by_value,
                await_promise=False,
                object_group=self.object_group,
            ),
            label=label,
        )

    @staticmethod
    def _handle(remote: Any) -> Optional[ElementHandle]:
        object_id = _remote_attr(remote, "object_id", "objectId")
        if not object_id:
            return None
        description = _remote_attr(remote, "description", "description") or ""
        return ElementHandle(str(object_id), description)

    @staticmethod
    def _value(remote: Any) -> Any:
        return _remote_attr(remote, "value", "value")

    async def query(self, selector: str) -> Optional[ElementHandle]:
        remote = await self._evaluate(
            f"document.querySelector({_js(selector)})", by_value=False, label="query"
        )
        return self._handle(remote)

    async def query_within(
        self, element: ElementHandle, selector: str
    ) -> Optional[ElementHandle]:
        remote = await self._call_on(
            element, _QUERY_WITHIN_JS, selector, by_value=False, label="queryWithin"
        )
        return self._handle(remote)

    async def count(self, selector: str) -> int:
        remote = await self._evaluate(
            f"document.querySelectorAll({_js(selector)}).length",
            by_value=True,
            label="count",
        )
        return int(self._value(remote) or 0)

    async def bounding_rect(self, element: ElementHandle) -> Rect:
        remote = await self._call_on(
            element, _BOUNDING_RECT_JS, by_value=True, label="boundingRect"
        )
        box = self._value(remote) or {}
        return Rect(
            left=float(box.get("left", 0.0)),
            top=float(box.get("top", 0.0)),
            width=float(box.get("width", 0.0)),
            height=float(box.get("height", 0.0)),
        )

    async def element_from_point(self, x: float, y: float) -> Optional[ElementHandle]:
        remote = await self._evaluate(
            f"document.elementFromPoint({float(x)}, {float(y)})",
            by_value=False,
            label="elementFromPoint",
        )
        return self._handle(remote)

    async def dispatch_mouse_event(
        self, element: ElementHandle, event_type: str, init: Dict[str, Any]
    ) -> None:
        await self._call_on(
            element,
            _DISPATCH_JS,
            event_type,
            dict(init),
            by_value=True,
            label=event_type,
        )

    async def text_content(self, selector: str) -> Optional[str]:
        remote = await self._evaluate(
            "(() => { const el = document.querySelector(%s);"
            " return el ? el.textContent : null; })()" % _js(selector),
            by_value=True,
            label="textContent",
        )
        return self._value(remote)

    async def has_class(self, selector: str, class_name: str) -> Optional[bool]:
        remote = await self._evaluate(
            "(() => { const el = document.querySelector(%s);"
            " return el ? el.classList.contains(%s) : null; })()"
            % (_js(selector), _js(class_name)),
            by_value=True,
            label="hasClass",
        )
        value = self._value(remote)
        return None if value is None else bool(value)

    async def read_global(self, key: str) -> Any:
        remote = await self._evaluate(
            "(() => { const v = window[%s]; return v === undefined ? null : v; })()"
            % _js(key),
            by_value=True,
            label="readGlobal",
        )
        return self._value(remote)

    async def write_global(self, key: str, value: Any) -> None:
        await self._evaluate(
            f"window[{_js(key)}] = {_js(value)}; true",
            by_value=True,
            label="writeGlobal",
        )

    async def release_handles(self) -> None:
        """Free every remote object created through this Dom so far."""
        try:
            await self._send(
                cdp.runtime.release_object_group(object_group=self.object_group),
                label="releaseObjectGroup",
            )
        except asyncio.TimeoutError:
            # the page is gone or stuck; its handles go with it
            pass
