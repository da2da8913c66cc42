"""Template extension points.

Templates fire named actions at fixed points of the render sequence.
Callbacks return markup that is inserted at that point, so other code can
add to a page without touching the templates.
"""

from typing import Any, Callable, Dict, List, Tuple

ActionCallback = Callable[..., str]

# Action names fired by the templates, in render order
AFTER_BODY = "after_body"
LAYOUT_START = "layout_start"
AFTER_HEADER = "after_header"
BEFORE_CONTENT = "before_content"
PAGE_BEFORE_ENTRY_CONTENT = "page_before_entry_content"
PAGE_BEFORE_COMMENTS = "page_before_comments"
PAGE_AFTER_COMMENTS = "page_after_comments"
AFTER_CONTENT = "after_content"
LAYOUT_END = "layout_end"
BEFORE_CLOSING_BODY = "before_closing_body"
HEAD = "head"
FOOTER_SCRIPTS = "footer_scripts"


class HookRegistry:
    """Registry of action callbacks keyed by action name."""

    def __init__(self) -> None:
        self._actions: Dict[str, List[Tuple[int, int, ActionCallback]]] = {}
        self._counter = 0

    def add_action(self, name: str, callback: ActionCallback, priority: int = 10) -> None:
        """Attach a callback to an action.

        Lower priorities run first; equal priorities run in registration order.
        """
        self._counter += 1
        self._actions.setdefault(name, []).append((priority, self._counter, callback))

    def remove_action(self, name: str, callback: ActionCallback) -> bool:
        entries = self._actions.get(name, [])
        remaining = [entry for entry in entries if entry[2] is not callback]
        self._actions[name] = remaining
        return len(remaining) != len(entries)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def do_action(self, name: str, **context: Any) -> str:
        """Run every callback of an action and join their markup.

        Callbacks returning ``None`` contribute nothing.
        """
        output = []
        for _, _, callback in sorted(self._actions.get(name, []), key=lambda e: (e[0], e[1])):
            markup = callback(**context)
            if markup:
                output.append(markup)
        return "".join(output)
