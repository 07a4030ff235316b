"""An on-screen window with event hooks and a main loop."""

from __future__ import annotations

import enum
import os
from collections import deque
from collections.abc import Callable
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .image import Image  # noqa: E402


class EventType(enum.IntEnum):
    """Event numbers a hook can be attached to."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    EXPOSE = 12
    DESTROY_NOTIFY = 17


_SPECIAL_KEYSYMS = {
    pygame.K_ESCAPE: 0xFF1B,
    pygame.K_LEFT: 0xFF51,
    pygame.K_UP: 0xFF52,
    pygame.K_RIGHT: 0xFF53,
    pygame.K_DOWN: 0xFF54,
    pygame.K_RETURN: 0xFF0D,
    pygame.K_TAB: 0xFF09,
    pygame.K_BACKSPACE: 0xFF08,
}

Callback = Callable[..., Any]


def _keysym(key: int) -> int:
    if key in _SPECIAL_KEYSYMS:
        return _SPECIAL_KEYSYMS[key]
    return key


def _translate(event: Any) -> tuple[EventType, tuple[Any, ...]] | None:
    if event.type == pygame.QUIT:
        return EventType.DESTROY_NOTIFY, ()
    if event.type == pygame.KEYDOWN:
        return EventType.KEY_PRESS, (_keysym(event.key),)
    if event.type == pygame.KEYUP:
        return EventType.KEY_RELEASE, (_keysym(event.key),)
    if event.type == pygame.MOUSEBUTTONDOWN:
        return EventType.BUTTON_PRESS, (event.button, *event.pos)
    if event.type == pygame.MOUSEBUTTONUP:
        return EventType.BUTTON_RELEASE, (event.button, *event.pos)
    if event.type == pygame.MOUSEMOTION:
        return EventType.MOTION_NOTIFY, tuple(event.pos)
    if event.type == pygame.VIDEOEXPOSE:
        return EventType.EXPOSE, (0,)
    return None


class Window:
    """A fixed-size window that forwards its events to registered hooks.

    With ``headless`` set, drawing goes to an off-screen surface and only
    events passed to :meth:`dispatch` reach the hooks.
    """

    def __init__(self, width: int, height: int, title: str = "", *, headless: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.headless = headless
        self.hooks: dict[EventType, Callback] = {}
        self.destroyed = False
        self._loop_hook: Callback | None = None
        self._end_loop = False
        # The first expose is delivered when the loop starts.
        self._pending: deque[tuple[EventType, tuple[Any, ...]]] = deque(
            [(EventType.EXPOSE, (0,))]
        )
        if headless:
            self.surface = pygame.Surface((width, height))
        else:
            pygame.display.init()
            self.surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        self.surface.fill((0, 0, 0))

    def hook(self, event: int, callback: Callback | None) -> None:
        """Attach ``callback`` to an event; None removes the hook."""
        event = EventType(event)
        if callback is None:
            self.hooks.pop(event, None)
        else:
            self.hooks[event] = callback

    def key_hook(self, callback: Callback | None) -> None:
        """Call ``callback(keysym)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, callback)

    def mouse_hook(self, callback: Callback | None) -> None:
        """Call ``callback(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, callback)

    def expose_hook(self, callback: Callback | None) -> None:
        """Call ``callback()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, callback)

    def loop_hook(self, callback: Callback | None) -> None:
        """Call ``callback()`` on every turn of the main loop."""
        self._loop_hook = callback

    def dispatch(self, event: int, *args: Any) -> Any:
        """Deliver one event to its hook and return what the hook returned.

        An expose event whose first argument (the remaining count) is not 0
        is dropped, and the expose hook is called without arguments.
        """
        event = EventType(event)
        callback = self.hooks.get(event)
        if callback is None or self.destroyed:
            return None
        if event is EventType.EXPOSE:
            if args and args[0]:
                return None
            return callback()
        return callback(*args)

    def put_image(self, image: Image, x: int = 0, y: int = 0) -> None:
        """Copy an image into the window with its top left corner at (x, y)."""
        if self.destroyed:
            raise RuntimeError("window has been destroyed")
        frame = pygame.image.frombuffer(
            image.to_rgb_bytes(), (image.width, image.height), "RGB"
        )
        self.surface.blit(frame, (x, y))
        if not self.headless:
            pygame.display.flip()

    def _collect(self, block: bool) -> None:
        if self.headless:
            return
        events = []
        if block and not self._pending:
            events.append(pygame.event.wait())
        events.extend(pygame.event.get())
        for event in events:
            translated = _translate(event)
            if translated is not None:
                self._pending.append(translated)

    def loop(self) -> None:
        """Deliver events and call the loop hook until stopped or destroyed."""
        while not self.destroyed and not self._end_loop:
            self._collect(block=self._loop_hook is None)
            if self._loop_hook is None and not self._pending:
                return
            while self._pending and not self._end_loop and not self.destroyed:
                event, args = self._pending.popleft()
                self.dispatch(event, *args)
            if self._loop_hook is not None:
                self._loop_hook()

    def loop_end(self) -> None:
        """Make the main loop return after its current turn."""
        self._end_loop = True

    def destroy(self) -> None:
        """Close the window and drop its hooks."""
        if self.destroyed:
            return
        self.destroyed = True
        self.hooks.clear()
        self._loop_hook = None
        self._pending.clear()
        if not self.headless:
            pygame.display.quit()