import pytest
from petdb.messages import DEFAULT_MESSAGES, Messages, load_messages
from petdb.exceptions import PersistenceError


def test_default_messages():
    messages = Messages()
    assert messages("add_count", count=3) == "3 pets added."
    assert messages("menu_view") == DEFAULT_MESSAGES["menu_view"]


def test_unknown_key():
    with pytest.raises(KeyError):
        Messages()("nope")


def test_load_messages_default():
    assert load_messages().templates == DEFAULT_MESSAGES


def test_load_messages_override(tmp_path):
    path = tmp_path / "messages.json"
    path.write_text('{"add_count": "{count} new pets!"}')
    messages = load_messages(path)
    assert messages("add_count", count=2) == "2 new pets!"
    assert messages("menu_view") == "View all pets"


@pytest.mark.parametrize("content", ["nope", "[1, 2]", '{"add_count": 3}'])
def test_load_messages_bad(tmp_path, content):
    path = tmp_path / "messages.json"
    path.write_text(content)
    with pytest.raises(PersistenceError):
        load_messages(path)


def test_load_messages_missing(tmp_path):
    with pytest.raises(PersistenceError):
        load_messages(tmp_path / "missing.json")
