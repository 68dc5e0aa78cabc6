"""Search box lifecycle as pure state transitions.

A tag is created when the pending text is committed (Enter/Tab, or the box
losing focus with text in it) and destroyed by explicit removal or by
Backspace on an empty box.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..people.model import Person
from .model import SearchTag
from .parser import QueryTagParser

COMMIT_KEYS = frozenset({"Enter", "Tab"})
BACKSPACE = "Backspace"


@dataclass(frozen=True)
class TagInputState:
    text: str = ""
    tags: tuple[SearchTag, ...] = ()

    @property
    def valid_tags(self) -> tuple[SearchTag, ...]:
        return tuple(t for t in self.tags if t.is_valid)


def type_text(state: TagInputState, text: str) -> TagInputState:
    return replace(state, text=text)


def commit(state: TagInputState, records: Sequence[Person], parser: Optional[QueryTagParser] = None) -> TagInputState:
    """Parse the pending text into a tag; the box is cleared even if it was rejected."""
    parser = parser or QueryTagParser()
    tag = parser.parse(state.text, state.tags, records)
    tags = state.tags + (tag,) if tag else state.tags
    return TagInputState(text="", tags=tags)


def handle_key(
    state: TagInputState,
    key: str,
    records: Sequence[Person],
    parser: Optional[QueryTagParser] = None,
) -> TagInputState:
    if key in COMMIT_KEYS and state.text.strip():
        return commit(state, records, parser)
    if key == BACKSPACE and not state.text and state.tags:
        return remove_tag(state, state.tags[-1].value)
    return state


def blur(state: TagInputState, records: Sequence[Person], parser: Optional[QueryTagParser] = None) -> TagInputState:
    if state.text.strip():
        return commit(state, records, parser)
    return state


def remove_tag(state: TagInputState, value: str) -> TagInputState:
    return replace(state, tags=tuple(t for t in state.tags if t.value != value))


def clear(state: TagInputState) -> TagInputState:
    return TagInputState()
