"""Shared fixtures for gesturekit unit tests: an in-memory Dom."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import pytest

from gesturekit.mouse.geometry import Rect


# ---------------------------------------------------------------------------
# Fake document
# ---------------------------------------------------------------------------

_SIMPLE_SELECTOR = re.compile(
    r"^(?P<tag>[a-zA-Z][a-zA-Z0-9-]*)?"
    r"(?P<rest>(?:#[\w-]+|\.[\w-]+|\[[\w-]+\])*)$"
)
_PART = re.compile(r"#[\w-]+|\.[\w-]+|\[[\w-]+\]")


class FakeElement:
    def __init__(
        self,
        tag: str = "div",
        *,
        id: Optional[str] = None,
        classes=(),
        text: str = "",
        rect: Optional[Rect] = None,
        attrs: Optional[Dict[str, str]] = None,
        children=(),
    ):
        self.tag = tag
        self.id = id
        self.classes = set(classes)
        self.text = text
        self.rect = rect or Rect(0, 0, 0, 0)
        self.attrs = dict(attrs or {})
        self.parent: Optional[FakeElement] = None
        self.children: List[FakeElement] = []
        self.listeners: Dict[str, List[Callable[[FakeElement, dict], None]]] = {}
        for child in children:
            self.append(child)

    def __repr__(self) -> str:
        return f"<{self.tag}#{self.id}>" if self.id else f"<{self.tag}>"

    def append(self, child: "FakeElement") -> "FakeElement":
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "FakeElement") -> None:
        self.children.remove(child)
        child.parent = None

    def descendants(self):
        for child in self.children:
            yield child
            yield from child.descendants()

    def on(self, event_type: str, listener: Callable[["FakeElement", dict], None]):
        self.listeners.setdefault(event_type, []).append(listener)

    def text_content(self) -> str:
        return self.text + "".join(c.text_content() for c in self.children)

    def matches(self, selector: str) -> bool:
        found = _SIMPLE_SELECTOR.match(selector.strip())
        if not found:
            raise ValueError(f"FakeDom cannot parse selector {selector!r}")
        if found.group("tag") and found.group("tag") != self.tag:
            return False
        for part in _PART.findall(found.group("rest")):
            if part[0] == "#" and self.id != part[1:]:
                return False
            if part[0] == "." and part[1:] not in self.classes:
                return False
            if part[0] == "[" and part[1:-1] not in self.attrs:
                return False
        return True


@dataclass
class DispatchedEvent:
    element: FakeElement
    type: str
    init: Dict[str, Any]


class FakeDom:
    """Dom port backed by a FakeElement tree, recording every dispatch."""

    def __init__(self, *elements: FakeElement):
        self.body = FakeElement("body", rect=Rect(0, 0, 1280, 800))
        for element in elements:
            self.body.append(element)
        self.events: List[DispatchedEvent] = []
        self.globals: Dict[str, Any] = {}
        self.released = 0

    def add(self, element: FakeElement) -> FakeElement:
        return self.body.append(element)

    def find(self, selector: str) -> Optional[FakeElement]:
        return next((e for e in self.body.descendants() if e.matches(selector)), None)

    def event_types(self, element: Optional[FakeElement] = None) -> List[str]:
        return [
            e.type for e in self.events if element is None or e.element is element
        ]

    # --- Dom protocol ---

    async def query(self, selector):
        return self.find(selector)

    async def query_within(self, element, selector):
        return next((e for e in element.descendants() if e.matches(selector)), None)

    async def count(self, selector):
        return sum(1 for e in self.body.descendants() if e.matches(selector))

    async def bounding_rect(self, element):
        return element.rect

    async def element_from_point(self, x, y):
        hit = self.body
        for element in self.body.descendants():
            r = element.rect
            if r.left <= x <= r.right and r.top <= y <= r.bottom:
                hit = element
        return hit

    async def dispatch_mouse_event(self, element, event_type, init):
        self.events.append(DispatchedEvent(element, event_type, dict(init)))
        for listener in element.listeners.get(event_type, []):
            listener(element, init)

    async def text_content(self, selector):
        element = self.find(selector)
        return None if element is None else element.text_content()

    async def has_class(self, selector, class_name):
        element = self.find(selector)
        return None if element is None else class_name in element.classes

    async def read_global(self, key):
        return self.globals.get(key)

    async def write_global(self, key, value):
        # values cross the page boundary as JSON
        self.globals[key] = json.loads(json.dumps(value))

    async def release_handles(self):
        self.released += 1


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def board_dom() -> FakeDom:
    """A source card, a drop zone, a button and three list items."""
    dom = FakeDom(
        FakeElement(id="card", classes={"card"}, rect=Rect(100, 100, 50, 50)),
        FakeElement(id="zone", classes={"zone"}, rect=Rect(400, 100, 100, 100)),
        FakeElement("button", id="btn", text=" Go ", rect=Rect(100, 300, 80, 30)),
        FakeElement(
            "ul",
            id="list",
            rect=Rect(600, 300, 200, 90),
            children=[
                FakeElement("li", classes={"item"}, text="one"),
                FakeElement("li", classes={"item"}, text="two"),
                FakeElement("li", classes={"item"}, text="three"),
            ],
        ),
    )
    return dom


@pytest.fixture
def fast() -> Dict[str, Any]:
    """Simulation overrides that keep gestures to a few milliseconds."""
    return {
        "duration": 20,
        "fps": 500,
        "enter_duration": 10,
        "hover_duration": 5,
        "exit_duration": 10,
    }
