# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Message template parser.

Splits a template such as ``"Processed {@Order} in {Elapsed:.1f} ms"`` into
text and property tokens. The parser never raises: anything that does not
form a valid placeholder (an unterminated brace, an empty or invalid name, a
bad alignment) is kept as literal text. ``{{`` and ``}}`` escape braces.
"""

from __future__ import annotations

import unicodedata

from stencil.events.property import CaptureMode
from stencil.templates.template import EMPTY_TEMPLATE, MessageTemplate
from stencil.templates.tokens import PropertyToken, TextToken, Token

_CAPTURE_HINTS = {"@": CaptureMode.DESTRUCTURE, "$": CaptureMode.STRINGIFY}

# Python format-spec fill/align/sign characters that are not punctuation.
_FORMAT_SYMBOLS = frozenset("+<>=^ ")


def _is_valid_in_name(c: str) -> bool:
    return c.isalnum() or c == "_"


def _is_valid_in_format(c: str) -> bool:
    if c == "}":
        return False
    return (
        c.isalnum()
        or c in _FORMAT_SYMBOLS
        or unicodedata.category(c).startswith("P")
    )


def _is_valid_in_tag(c: str) -> bool:
    return c in _CAPTURE_HINTS or _is_valid_in_name(c) or _is_valid_in_format(c)


def _is_valid_in_alignment(c: str) -> bool:
    return c in "0123456789-"


class MessageTemplateParser:
    """Stateless parser turning template text into a ``MessageTemplate``."""

    def parse(self, template: str) -> MessageTemplate:
        """Parse ``template`` into tokens.

        Args:
            template: The message template text

        Returns:
            The parsed template
        """
        if not template:
            return EMPTY_TEMPLATE
        return MessageTemplate(template, tuple(self._tokenize(template)))

    def _tokenize(self, template: str) -> list[Token]:
        tokens: list[Token] = []
        pos = 0
        length = len(template)
        while True:
            start = pos
            text, pos = self._parse_text(template, pos)
            if text:
                tokens.append(TextToken(text, start))
            if pos >= length:
                break
            token, pos = self._parse_property(template, pos)
            tokens.append(token)
            if pos >= length:
                break
        return tokens

    @staticmethod
    def _parse_text(template: str, pos: int) -> tuple[str, int]:
        chars: list[str] = []
        length = len(template)
        while pos < length:
            c = template[pos]
            if c == "{":
                if pos + 1 < length and template[pos + 1] == "{":
                    chars.append("{")
                    pos += 2
                    continue
                break
            if c == "}" and pos + 1 < length and template[pos + 1] == "}":
                chars.append("}")
                pos += 2
                continue
            chars.append(c)
            pos += 1
        return "".join(chars), pos

    def _parse_property(self, template: str, first: int) -> tuple[Token, int]:
        pos = first + 1
        length = len(template)
        while pos < length and _is_valid_in_tag(template[pos]):
            pos += 1

        if pos == length or template[pos] != "}":
            return TextToken(template[first:pos], first), pos

        end = pos + 1
        raw_text = template[first:end]
        token = self._build_property_token(raw_text, first)
        return token, end

    @staticmethod
    def _split_tag(content: str) -> tuple[str, str | None, str | None] | None:
        format_delim = content.find(":")
        align_delim = content.find(",")

        if format_delim == -1 and align_delim == -1:
            return content, None, None

        if align_delim == -1 or (format_delim != -1 and align_delim > format_delim):
            return content[:format_delim], content[format_delim + 1 :], None

        if format_delim == -1:
            return content[:align_delim], None, content[align_delim + 1 :]

        if align_delim == format_delim - 1:
            return None

        return (
            content[:align_delim],
            content[format_delim + 1 :],
            content[align_delim + 1 : format_delim],
        )

    def _build_property_token(self, raw_text: str, first: int) -> Token:
        invalid = TextToken(raw_text, first)
        content = raw_text[1:-1]
        if not content:
            return invalid

        parts = self._split_tag(content)
        if parts is None:
            return invalid
        name, fmt, alignment_text = parts

        capture = CaptureMode.DEFAULT
        if name and name[0] in _CAPTURE_HINTS:
            capture = _CAPTURE_HINTS[name[0]]
            name = name[1:]

        if not name or not all(_is_valid_in_name(c) for c in name):
            return invalid

        if fmt is not None and not all(_is_valid_in_format(c) for c in fmt):
            return invalid

        alignment: int | None = None
        if alignment_text is not None:
            if not alignment_text or not all(
                _is_valid_in_alignment(c) for c in alignment_text
            ):
                return invalid
            if alignment_text.rfind("-") > 0 or alignment_text == "-":
                return invalid
            alignment = int(alignment_text)
            if alignment == 0:
                return invalid

        return PropertyToken(
            property_name=name,
            raw_text=raw_text,
            format=fmt or None,
            alignment=alignment,
            capture=capture,
            start_index=first,
        )
