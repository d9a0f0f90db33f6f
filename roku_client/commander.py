"""Chainable scripting of remote actions.

A ``Commander`` collects actions against a client and runs them in order when
``send()`` is awaited::

    await (
        client.command()
        .volume_up(10)
        .up(2)
        .select()
        .text("Breaking Bad")
        .enter()
        .send()
    )

Every :class:`~roku_client.keys.Key` member is available as a method named
after it in lowercase (``volume_up``, ``input_hdmi1``, ``a``, ``num_0``), taking
an optional repeat count. A commander should not be reused after ``send()``
has started.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

from .api.constants import DEFAULT_WAIT
from .exceptions import RokuValidationError
from .keys import Key

if TYPE_CHECKING:
    from .client import RokuClient

_LOGGER = logging.getLogger(__name__)

Action = Callable[[], Awaitable[None]]

__all__ = ["Commander"]


def _validate_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise RokuValidationError(f"Repeat count must be a positive integer, got {count!r}")
    return count


class KeyMethod(Protocol):
    """Signature of the per-key methods (``commander.up(3)``)."""

    def __call__(self, count: int = 1) -> Commander: ...


class Commander:
    """Builder of an ordered script of remote actions."""

    def __init__(self, client: RokuClient) -> None:
        self.client = client
        self._actions: list[Action] = []

    def __len__(self) -> int:
        return len(self._actions)

    def key(self, key: str, count: int = 1) -> Commander:
        """Queue ``count`` presses of ``key``.

        Raises:
            RokuValidationError: If ``count`` is not a positive integer.
        """
        _validate_count(count)
        for _ in range(count):
            self._actions.append(lambda: self.client.keypress(key))
        return self

    def text(self, text: str) -> Commander:
        """Queue typing ``text`` as a single action."""
        self._actions.append(lambda: self.client.text(text))
        return self

    def wait(self, seconds: float = DEFAULT_WAIT) -> Commander:
        """Queue a pause of ``seconds``.

        Raises:
            RokuValidationError: If ``seconds`` is negative.
        """
        if isinstance(seconds, bool) or not isinstance(seconds, int | float) or seconds < 0:
            raise RokuValidationError(f"Wait time must be a non-negative number, got {seconds!r}")
        self._actions.append(lambda: asyncio.sleep(seconds))
        return self

    async def send(self) -> None:
        """Run queued actions in order, each finishing before the next starts.

        The queue is drained; the first failing action aborts the remaining
        ones and its exception propagates.
        """
        actions, self._actions = self._actions, []
        _LOGGER.debug("Sending %d queued action(s) to %s", len(actions), self.client.address)
        for action in actions:
            await action()

    # One method per Key member, attached below the class.
    home: KeyMethod
    back: KeyMethod
    select: KeyMethod
    left: KeyMethod
    right: KeyMethod
    up: KeyMethod
    down: KeyMethod
    info: KeyMethod
    backspace: KeyMethod
    search: KeyMethod
    enter: KeyMethod
    find_remote: KeyMethod
    play: KeyMethod
    reverse: KeyMethod
    forward: KeyMethod
    instant_replay: KeyMethod
    volume_up: KeyMethod
    volume_down: KeyMethod
    volume_mute: KeyMethod
    power: KeyMethod
    power_off: KeyMethod
    power_on: KeyMethod
    channel_up: KeyMethod
    channel_down: KeyMethod
    input_tuner: KeyMethod
    input_hdmi1: KeyMethod
    input_hdmi2: KeyMethod
    input_hdmi3: KeyMethod
    input_hdmi4: KeyMethod
    input_av1: KeyMethod
    a: KeyMethod
    b: KeyMethod
    c: KeyMethod
    d: KeyMethod
    e: KeyMethod
    f: KeyMethod
    g: KeyMethod
    h: KeyMethod
    i: KeyMethod
    j: KeyMethod
    k: KeyMethod
    l: KeyMethod  # noqa: E741
    m: KeyMethod
    n: KeyMethod
    o: KeyMethod
    p: KeyMethod
    q: KeyMethod
    r: KeyMethod
    s: KeyMethod
    t: KeyMethod
    u: KeyMethod
    v: KeyMethod
    w: KeyMethod
    x: KeyMethod
    y: KeyMethod
    z: KeyMethod
    num_0: KeyMethod
    num_1: KeyMethod
    num_2: KeyMethod
    num_3: KeyMethod
    num_4: KeyMethod
    num_5: KeyMethod
    num_6: KeyMethod
    num_7: KeyMethod
    num_8: KeyMethod
    num_9: KeyMethod


def _key_method(key: Key) -> Callable[[Commander, int], Commander]:
    def method(self: Commander, count: int = 1) -> Commander:
        return self.key(key, count)

    method.__name__ = key.name.lower()
    method.__qualname__ = f"Commander.{method.__name__}"
    method.__doc__ = f"Queue ``count`` presses of the {key.value} key."
    return method


for _key in Key:
    setattr(Commander, _key.name.lower(), _key_method(_key))
