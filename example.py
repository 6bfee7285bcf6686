from mentionmarkup import MarkupEditor, count_suggestions, get_suggestion


def example_markup_editor():
    """Example of how a text input widget uses the MarkupEditor."""
    # Initialize the editor with your template
    # You can also set MENTIONS_MARKUP environment variable
    editor = MarkupEditor(markup="@[__display__](__id__)")

    value = "Hi @[John](u1), how are you?"

    # Example: Render the plain text shown in the input
    plain_text = editor.plain_text(value)
    print(f"Plain text: {plain_text}")

    # Example: List mentions
    for mention in editor.mentions(value):
        print(f"Mention: {mention}")

    # Example: Type "!" at the end of the text
    value = editor.apply_change(
        value,
        plain_text + "!",
        selection_start_before_change=len(plain_text),
        selection_end_before_change=len(plain_text),
        selection_end_after_change=len(plain_text) + 1,
    )
    print(f"After typing: {value}")

    # Example: Backspace inside "John" removes the whole mention
    plain_text = editor.plain_text(value)
    value = editor.apply_change(
        value,
        plain_text[:6] + plain_text[7:],
        selection_start_before_change=7,
        selection_end_before_change=7,
        selection_end_after_change=6,
    )
    print(f"After backspace: {value}")

    # Example: Commit a chosen suggestion at the caret
    value = value[:3] + editor.make_markup("u2", "Jane") + value[3:]
    print(f"After inserting a mention: {value}")


def example_suggestions():
    """Example of navigating suggestions across mention types."""
    suggestions = {
        "users": {"results": [{"id": "u1", "display": "John"}]},
        "tags": {"results": [{"id": "t1", "display": "python"}]},
    }
    print(f"Suggestion count: {count_suggestions(suggestions)}")
    print(f"Second suggestion: {get_suggestion(suggestions, 1)}")


if __name__ == "__main__":
    example_markup_editor()
    example_suggestions()
