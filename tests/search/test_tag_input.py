from __future__ import annotations

from school_dashboard.search.input import TagInputState, blur, clear, handle_key, remove_tag, type_text


def test_enter_commits_text_and_clears_box(students):
    state = type_text(TagInputState(), "Quispe")

    state = handle_key(state, "Enter", students)

    assert state.text == ""
    assert [t.value for t in state.tags] == ["Quispe"]


def test_tab_commits_like_enter(students):
    state = handle_key(type_text(TagInputState(), "Pendiente"), "Tab", students)

    assert [t.display_value for t in state.tags] == ["Estado: Pendiente"]


def test_blank_text_is_not_committed(students):
    state = handle_key(type_text(TagInputState(), "   "), "Enter", students)

    assert state.tags == ()
    assert state.text == "   "


def test_rejected_duplicate_still_clears_box(students):
    state = handle_key(type_text(TagInputState(), "quispe"), "Enter", students)
    state = handle_key(type_text(state, "QUISPE"), "Enter", students)

    assert len(state.tags) == 1
    assert state.text == ""


def test_blur_commits_pending_text(students):
    state = blur(type_text(TagInputState(), "garcia"), students)

    assert [t.value for t in state.tags] == ["garcia"]
    assert blur(state, students) == state


def test_backspace_on_empty_box_removes_last_tag(students):
    state = TagInputState()
    for text in ("Matriculado", "garcia"):
        state = handle_key(type_text(state, text), "Enter", students)

    state = handle_key(state, "Backspace", students)

    assert [t.value for t in state.tags] == ["Matriculado"]


def test_backspace_with_text_keeps_tags(students):
    state = handle_key(type_text(TagInputState(), "garcia"), "Enter", students)
    state = type_text(state, "x")

    assert handle_key(state, "Backspace", students).tags == state.tags


def test_invalid_tags_stay_until_removed_explicitly(students):
    state = handle_key(type_text(TagInputState(), "xyz-not-a-name"), "Enter", students)
    state = handle_key(type_text(state, "garcia"), "Enter", students)

    assert [t.is_valid for t in state.tags] == [False, True]
    assert [t.value for t in state.valid_tags] == ["garcia"]

    state = remove_tag(state, "xyz-not-a-name")
    assert [t.value for t in state.tags] == ["garcia"]
    assert clear(state) == TagInputState()
