"""Rendering of mustache templates and loading of template files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from hivecmap.web.mustache_parse import ActionType, ParsedTemplate, parse_template

DEFAULT_TEMPLATE_BASE = "templates"

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
}


class _Kind(Enum):
    NULL = "null"
    FALSE = "false"
    TRUE = "true"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    OBJECT = "object"


def _kind(value: Any) -> _Kind:
    if value is None:
        return _Kind.NULL
    if value is True:
        return _Kind.TRUE
    if value is False:
        return _Kind.FALSE
    if isinstance(value, (int, float)):
        return _Kind.NUMBER
    if isinstance(value, str):
        return _Kind.STRING
    if isinstance(value, Mapping):
        return _Kind.OBJECT
    if isinstance(value, (list, tuple)):
        return _Kind.LIST
    raise TypeError(f"unsupported context value: {value!r}")


def _dump_number(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def escape_html(text: str) -> str:
    """Escape the characters that are special in HTML."""
    return "".join(_ESCAPES.get(char, char) for char in text)


class Template:
    """A parsed mustache template ready to be rendered against a context."""

    def __init__(self, body: str) -> None:
        self._parsed: ParsedTemplate = parse_template(body)

    @property
    def body(self) -> str:
        return self._parsed.body

    def render(self, context: Any = None) -> str:
        """Render with the given context (dicts, lists, strings, numbers, bools, None)."""
        out: list[str] = []
        stack: list[Any] = [context]
        self._render_range(0, len(self._parsed.fragments) - 1, stack, out, 0)
        return "".join(out)

    def _tag_name(self, index: int) -> str:
        action = self._parsed.actions[index]
        return self._parsed.body[action.start : action.end]

    @staticmethod
    def _find_context(name: str, stack: list[Any]) -> tuple[bool, Any]:
        if name == ".":
            return True, stack[-1]
        names = name.split(".")
        for view in reversed(stack):
            found = True
            for part in names:
                if isinstance(view, Mapping) and part in view:
                    view = view[part]
                else:
                    found = False
                    break
            if found:
                return True, view
        return False, ""

    def _render_fragment(self, index: int, indent: int, out: list[str]) -> None:
        body = self._parsed.body
        start, end = self._parsed.fragments[index]
        if not indent:
            out.append(body[start:end])
            return
        pad = " " * indent
        for i in range(start, end):
            out.append(body[i])
            if body[i] == "\n" and i + 1 != len(body):
                out.append(pad)

    def _render_range(
        self, begin: int, end: int, stack: list[Any], out: list[str], indent: int
    ) -> None:
        actions = self._parsed.actions
        if indent:
            out.append(" " * indent)
        current = begin
        while current < end:
            action = actions[current]
            self._render_fragment(current, indent, out)
            kind = action.type
            if kind is ActionType.IGNORE:
                pass
            elif kind is ActionType.PARTIAL:
                partial = load(self._tag_name(current))
                partial_indent = indent + action.pos if action.pos else 0
                partial._render_range(
                    0, len(partial._parsed.fragments) - 1, stack, out, partial_indent
                )
            elif kind in (ActionType.TAG, ActionType.UNESCAPE_TAG):
                _, value = self._find_context(self._tag_name(current), stack)
                value_kind = _kind(value)
                if value_kind is _Kind.NUMBER:
                    out.append(_dump_number(value))
                elif value_kind is _Kind.STRING:
                    out.append(escape_html(value) if kind is ActionType.TAG else value)
                else:
                    raise TypeError(f"cannot render a {value_kind.value} value in a tag")
            elif kind is ActionType.ELSE_BLOCK:
                found, value = self._find_context(self._tag_name(current), stack)
                if not found:
                    stack.append(None)
                else:
                    value_kind = _kind(value)
                    if value_kind is _Kind.LIST:
                        if value:
                            current = action.pos
                        else:
                            stack.append(None)
                    elif value_kind in (_Kind.FALSE, _Kind.NULL):
                        stack.append(None)
                    else:
                        current = action.pos
            elif kind is ActionType.OPEN_BLOCK:
                found, value = self._find_context(self._tag_name(current), stack)
                if not found:
                    current = action.pos
                else:
                    value_kind = _kind(value)
                    if value_kind is _Kind.LIST:
                        for item in value:
                            stack.append(item)
                            self._render_range(current + 1, action.pos, stack, out, indent)
                            stack.pop()
                        current = action.pos
                    elif value_kind in (_Kind.FALSE, _Kind.NULL):
                        current = action.pos
                    else:
                        stack.append(value)
            elif kind is ActionType.CLOSE_BLOCK:
                stack.pop()
            current += 1
        self._render_fragment(end, indent, out)


def compile_template(body: str) -> Template:
    """Parse a template body; raise TemplateError if it is malformed."""
    return Template(body)


@dataclass
class _LoaderSettings:
    base: str = DEFAULT_TEMPLATE_BASE
    loader: Optional[Callable[[str], str]] = field(default=None)


_settings = _LoaderSettings()


def default_loader(filename: str) -> str:
    """Read a template from the base directory, or return "" if it cannot be read."""
    path = _settings.base
    if not path.endswith(("/", "\\")):
        path += "/"
    try:
        return Path(path + filename).read_text()
    except OSError:
        return ""


def set_base(path: str) -> None:
    """Set the directory the default loader reads templates from."""
    if not path.endswith(("/", "\\")):
        path += "/"
    _settings.base = path


def set_loader(loader: Callable[[str], str]) -> None:
    """Replace the function that turns a template name into its text."""
    _settings.loader = loader


def load_text(filename: str) -> str:
    """Return the text of a named template through the current loader."""
    loader = _settings.loader or default_loader
    return loader(filename)


def load(filename: str) -> Template:
    """Load and compile a named template through the current loader."""
    return compile_template(load_text(filename))