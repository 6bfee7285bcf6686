import pytest

from mentionmarkup import InvalidTemplateError, MarkupEditor, Mention
from mentionmarkup.editor import DEFAULT_MARKUP


def test_markup_from_argument_environment_and_default(monkeypatch):
    monkeypatch.setenv("MENTIONS_MARKUP", "#[__display__]")

    assert MarkupEditor(markup="<__id__>").markup == "<__id__>"
    assert MarkupEditor().markup == "#[__display__]"

    monkeypatch.delenv("MENTIONS_MARKUP")
    assert MarkupEditor().markup == DEFAULT_MARKUP


def test_invalid_markup_fails_on_construction():
    with pytest.raises(InvalidTemplateError):
        MarkupEditor(markup="no placeholders")


def test_editor_operations():
    """Test the editor applies its bound template and display transform"""
    editor = MarkupEditor(
        markup="@[__display__](__id__)",
        display_transform=lambda id, display, type: f"@{display}",
    )
    value = "Hi @[John](u1)"

    assert editor.plain_text(value) == "Hi @John"
    assert editor.mentions(value) == [
        Mention(id="u1", display="@John", type=None, index=3, plain_text_index=3)
    ]
    assert editor.map_index(value, 5) == 3
    assert editor.map_index(value, 5, "END") == 14
    assert editor.map_index(value, 5, "NULL") is None
    assert editor.find_start_of_mention(value, 5) == 3
    assert editor.is_inside_of_mention(value, 5)
    assert not editor.is_inside_of_mention(value, 3)
    assert editor.apply_change(value, "Hi @John!", 8, 8, 9) == "Hi @[John](u1)!"
    assert editor.apply_change(value, "Hi @Jon", 7, 7, 6) == "Hi "
    assert editor.make_markup("u2", "Jane") == "@[Jane](u2)"
