"""Shortcode expansion.

A shortcode is an inline token such as ``[metaslider id=14]`` that a
registered handler replaces with markup at render time. Tokens with no
registered handler are left untouched, and a doubled bracket
(``[[metaslider id=14]]``) escapes a token so it renders literally.
"""

import re
from typing import Callable, Dict

ShortcodeHandler = Callable[[Dict[str, str]], str]

_SHORTCODE_RE = re.compile(r"\[(\[?)([A-Za-z0-9_-]+)((?:\s[^\[\]]*)?)\](\]?)")
_ATTR_RE = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"    # key="value"
      |([\w-]+)\s*=\s*'([^']*)'     # key='value'
      |([\w-]+)\s*=\s*([^\s'"]+)    # key=value
      |"([^"]*)"                    # "positional"
      |(\S+)                        # positional
    """,
    re.VERBOSE,
)


def parse_attributes(text: str) -> Dict[str, str]:
    """Parse shortcode attributes.

    Named attributes are keyed by lowercased name, positional ones by their
    index as a string.
    """
    attrs: Dict[str, str] = {}
    position = 0
    for match in _ATTR_RE.finditer(text or ""):
        if match.group(1):
            attrs[match.group(1).lower()] = match.group(2)
        elif match.group(3):
            attrs[match.group(3).lower()] = match.group(4)
        elif match.group(5):
            attrs[match.group(5).lower()] = match.group(6)
        else:
            attrs[str(position)] = match.group(7) if match.group(7) is not None else match.group(8)
            position += 1
    return attrs


class ShortcodeRegistry:
    """Shortcode handlers keyed by tag name."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ShortcodeHandler] = {}

    def add(self, tag: str, handler: ShortcodeHandler) -> None:
        self._handlers[tag] = handler

    def remove(self, tag: str) -> None:
        self._handlers.pop(tag, None)

    def __contains__(self, tag: object) -> bool:
        return tag in self._handlers

    def expand(self, text: str) -> str:
        """Replace every registered shortcode in ``text`` with its output."""

        def replace(match: "re.Match[str]") -> str:
            opening, tag, raw_attrs, closing = match.groups()
            if opening and closing:
                return match.group(0)[1:-1]
            handler = self._handlers.get(tag)
            if handler is None:
                return match.group(0)
            return opening + handler(parse_attributes(raw_attrs)) + closing

        return _SHORTCODE_RE.sub(replace, text or "")
