"""Unit tests for the validate-on-commit JSON editor."""

from unittest.mock import Mock

from rulebuilder.core.rules.text_editor import (
    CONTEXT_ERROR_MESSAGE,
    EXPRESSION_ERROR_MESSAGE,
    JsonTextEditor,
    context_editor,
    expression_editor,
    format_json,
)


def test_initial_text_is_formatted():
    editor = JsonTextEditor({"==": [1, 1]})

    assert editor.text == '{\n  "==": [\n    1,\n    1\n  ]\n}'
    assert editor.text == format_json({"==": [1, 1]})
    assert editor.has_error is False


def test_edit_does_not_validate_or_notify():
    on_change = Mock()
    editor = JsonTextEditor({}, on_change)

    editor.edit("{not json")

    assert editor.text == "{not json"
    assert editor.is_local_edit is True
    assert editor.error is None
    on_change.assert_not_called()


def test_commit_valid_json_notifies_once():
    on_change = Mock()
    editor = JsonTextEditor({}, on_change)
    editor.edit('{"var": "a"}')

    assert editor.commit() is True

    on_change.assert_called_once_with({"var": "a"})
    assert editor.error is None
    assert editor.is_local_edit is False


def test_commit_invalid_json_sets_generic_error():
    on_change = Mock()
    editor = expression_editor({}, on_change)
    editor.edit('{"==": [1, }')

    assert editor.commit() is False

    assert editor.error == EXPRESSION_ERROR_MESSAGE
    assert "==" not in editor.error
    on_change.assert_not_called()


def test_editing_clears_previous_error():
    editor = JsonTextEditor({})
    editor.edit("{")
    editor.commit()

    editor.edit("{}")

    assert editor.has_error is False


def test_commit_blank_text_is_a_no_op():
    on_change = Mock()
    editor = JsonTextEditor({"a": 1}, on_change)
    editor.edit("   ")

    assert editor.commit() is True

    assert editor.error is None
    on_change.assert_not_called()


def test_sync_replaces_text_when_not_editing():
    editor = JsonTextEditor({"a": 1})

    assert editor.sync({"b": 2}) is True
    assert editor.text == format_json({"b": 2})


def test_sync_keeps_local_edit():
    editor = JsonTextEditor({"a": 1})
    editor.edit('{"typing": ')

    assert editor.sync({"b": 2}) is False
    assert editor.text == '{"typing": '


def test_sync_resumes_after_commit():
    editor = JsonTextEditor({"a": 1})
    editor.edit('{"a": 2}')
    editor.commit()

    assert editor.sync({"a": 3}) is True


def test_context_editor_defaults():
    editor = context_editor()

    assert editor.text == "{}"
    editor.edit("[")
    editor.commit()
    assert editor.error == CONTEXT_ERROR_MESSAGE


def test_deeply_nested_text_is_a_syntax_error():
    on_change = Mock()
    editor = context_editor({}, on_change)
    editor.edit("[" * 100000 + "]" * 100000)

    assert editor.commit() is False

    assert editor.error == CONTEXT_ERROR_MESSAGE
    on_change.assert_not_called()


def test_non_standard_constants_are_rejected():
    on_change = Mock()
    editor = expression_editor({}, on_change)

    for text in ('{"a": NaN}', "Infinity", '[-Infinity]'):
        editor.edit(text)
        assert editor.commit() is False
        assert editor.error == EXPRESSION_ERROR_MESSAGE

    on_change.assert_not_called()
