# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Thread-safe cache of parsed message templates."""

from __future__ import annotations

import threading

from stencil.templates.parser import MessageTemplateParser
from stencil.templates.template import MessageTemplate

MAX_CACHE_ITEMS = 1000
MAX_CACHED_TEMPLATE_LENGTH = 1024


class MessageTemplateCache:
    """
    Caches parse results keyed by template text.

    Log call sites reuse a small number of literal templates, so the cache is
    simply cleared when it fills up. Very long templates are parsed every
    time rather than cached.
    """

    def __init__(
        self,
        parser: MessageTemplateParser | None = None,
        max_items: int = MAX_CACHE_ITEMS,
        max_template_length: int = MAX_CACHED_TEMPLATE_LENGTH,
    ) -> None:
        self._parser = parser or MessageTemplateParser()
        self._max_items = max_items
        self._max_template_length = max_template_length
        self._templates: dict[str, MessageTemplate] = {}
        self._lock = threading.RLock()

    def parse(self, template: str) -> MessageTemplate:
        """Return the parsed form of ``template``, parsing it at most once while cached."""
        if len(template) > self._max_template_length:
            return self._parser.parse(template)

        with self._lock:
            cached = self._templates.get(template)
        if cached is not None:
            return cached

        parsed = self._parser.parse(template)

        with self._lock:
            if len(self._templates) >= self._max_items:
                self._templates.clear()
            self._templates[template] = parsed
        return parsed

    def clear(self) -> None:
        with self._lock:
            self._templates.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)
