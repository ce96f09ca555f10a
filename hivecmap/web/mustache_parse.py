"""Parsing of mustache templates into text fragments and tag actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TemplateError(ValueError):
    """A template cannot be parsed."""


class ActionType(Enum):
    """What a tag in a template does."""

    IGNORE = "ignore"
    TAG = "tag"
    UNESCAPE_TAG = "unescape_tag"
    OPEN_BLOCK = "open_block"
    CLOSE_BLOCK = "close_block"
    ELSE_BLOCK = "else_block"
    PARTIAL = "partial"


@dataclass
class Action:
    """One tag: its kind, the span of its name in the body and a position.

    For an opening block the position is the index of its closing action; for a
    closing block, the index of its opening action; for a partial, its indentation.
    """

    type: ActionType
    start: int
    end: int
    pos: int = 0


@dataclass
class ParsedTemplate:
    """A template body split into text fragments, each followed by one action.

    There is one fragment per action; the last action is an IGNORE sentinel.
    """

    body: str
    fragments: list[tuple[int, int]]
    actions: list[Action]


def _char(body: str, index: int) -> str:
    return body[index] if 0 <= index < len(body) else "\0"


def _trim(body: str, start: int, end: int) -> tuple[int, int]:
    while _char(body, start) == " ":
        start += 1
    while _char(body, end - 1) == " ":
        end -= 1
    return start, end


def _scan(body: str) -> tuple[list[list[int]], list[Action]]:
    tag_open, tag_close = "{{", "}}"
    fragments: list[list[int]] = []
    actions: list[Action] = []
    open_blocks: list[int] = []
    current = 0
    while True:
        idx = body.find(tag_open, current)
        if idx == -1:
            fragments.append([current, len(body)])
            actions.append(Action(ActionType.IGNORE, 0, 0))
            break
        fragments.append([current, idx])

        idx += len(tag_open)
        end = body.find(tag_close, idx)
        if end == idx:
            raise TemplateError("empty tag is not allowed")
        if end == -1:
            raise TemplateError("not matched opening tag")
        current = end + len(tag_close)

        marker = body[idx]
        if marker in "#^":
            start, stop = _trim(body, idx + 1, end)
            open_blocks.append(len(actions))
            kind = ActionType.OPEN_BLOCK if marker == "#" else ActionType.ELSE_BLOCK
            actions.append(Action(kind, start, stop))
        elif marker == "/":
            start, stop = _trim(body, idx + 1, end)
            if not open_blocks:
                raise TemplateError("{{/ without matching {{#: " + body[start:stop])
            matched = actions[open_blocks[-1]]
            opened = body[matched.start : matched.end]
            if body[start:stop] != opened:
                raise TemplateError(
                    "not matched {{# {{/ pair: " + opened + ", " + body[start:stop]
                )
            matched.pos = len(actions)
            actions.append(Action(ActionType.CLOSE_BLOCK, start, stop, open_blocks.pop()))
        elif marker == "!":
            actions.append(Action(ActionType.IGNORE, idx + 1, end))
        elif marker == ">":
            start, stop = _trim(body, idx + 1, end)
            actions.append(Action(ActionType.PARTIAL, start, stop))
        elif marker == "{":
            if tag_open != "{{" or tag_close != "}}":
                raise TemplateError("cannot use triple mustache when delimiter changed")
            if _char(body, end + 2) != "}":
                raise TemplateError("{{{: }}} not matched")
            start, stop = _trim(body, idx + 1, end)
            actions.append(Action(ActionType.UNESCAPE_TAG, start, stop))
            current += 1
        elif marker == "&":
            start, stop = _trim(body, idx + 1, end)
            actions.append(Action(ActionType.UNESCAPE_TAG, start, stop))
        elif marker == "=":
            tag_open, tag_close = _change_delimiters(body, idx + 1, end, actions)
        else:
            start, stop = _trim(body, idx, end)
            actions.append(Action(ActionType.TAG, start, stop))
    return fragments, actions


def _change_delimiters(
    body: str, idx: int, end: int, actions: list[Action]
) -> tuple[str, str]:
    actions.append(Action(ActionType.IGNORE, idx, end))
    end -= 1
    if _char(body, end) != "=":
        raise TemplateError("{{=: not matching = tag: " + body[idx:end])
    end -= 1
    while _char(body, idx) == " ":
        idx += 1
    while _char(body, end) == " ":
        end -= 1
    end += 1
    space = body.find(" ", idx, end) if idx < end else -1
    if space == -1:
        raise TemplateError("{{=: cannot find space between new open/close tags")
    tag_open = body[idx:space]
    close_start = space
    while _char(body, close_start) == " ":
        close_start += 1
    tag_close = body[close_start:end]
    if not tag_open:
        raise TemplateError("{{=: empty open tag")
    if not tag_close:
        raise TemplateError("{{=: empty close tag")
    if " " in tag_close:
        raise TemplateError("{{=: invalid open/close tag: " + tag_open + " " + tag_close)
    return tag_open, tag_close


def _remove_standalones(body: str, fragments: list[list[int]], actions: list[Action]) -> None:
    """Drop the surrounding whitespace and newline of tags that sit alone on a line."""
    size = len(body)
    last = len(actions) - 2
    for i in range(last, -1, -1):
        action = actions[i]
        if action.type in (ActionType.TAG, ActionType.UNESCAPE_TAG):
            continue
        before = fragments[i]
        after = fragments[i + 1]

        j = before[1] - 1
        while j >= before[0] and body[j] == " ":
            j -= 1
        all_space_before = j < before[0]
        if all_space_before and i > 0:
            continue
        if not all_space_before and body[j] != "\n":
            continue

        k = after[0]
        while k < size and k < after[1] and body[k] == " ":
            k += 1
        all_space_after = not (k < size and k < after[1])
        if all_space_after and i != last:
            continue
        if not all_space_after and not (
            body[k] == "\n" or (body[k] == "\r" and k + 1 < size and body[k + 1] == "\n")
        ):
            continue

        if action.type is ActionType.PARTIAL:
            action.pos = before[1] - j - 1
        before[1] = j + 1
        if not all_space_after:
            after[0] = k + 1 if body[k] == "\n" else k + 2


def parse_template(body: str) -> ParsedTemplate:
    """Split a template body into fragments and actions; raise TemplateError if malformed."""
    fragments, actions = _scan(body)
    _remove_standalones(body, fragments, actions)
    return ParsedTemplate(
        body=body,
        fragments=[(start, end) for start, end in fragments],
        actions=actions,
    )