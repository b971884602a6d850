# -*- coding: utf-8 -*-
"""Synchronous change notification for the stores."""

from __future__ import annotations

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Observer = Callable[[Any], None]


class Observable:
    """Observer list. Callbacks run inline, in subscription order, after each mutation."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        # Copy so an observer can unsubscribe itself mid-dispatch.
        for observer in list(self._observers):
            observer(self)
