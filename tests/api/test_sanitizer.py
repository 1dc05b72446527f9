"""Tests for the update payload sanitizer."""

from users_backend.api.services import OperatorKeySanitizer


def test_clean_payload_passes_through() -> None:
    payload = {"username": "alice", "email": "alice@example.com", "age": 30}

    assert OperatorKeySanitizer().transform(payload) == payload


def test_operator_and_dotted_keys_are_dropped() -> None:
    payload = {"$where": "sleep(1000)", "age": {"$gt": 0}, "a.b": 1, "email": "x"}

    assert OperatorKeySanitizer().transform(payload) == {"age": {}, "email": "x"}


def test_nested_lists_are_cleaned() -> None:
    payload = {"tags": [{"$ne": 1, "ok": " yes "}, "  spaced "]}

    sanitizer = OperatorKeySanitizer(strip_strings=True)

    assert sanitizer.transform(payload) == {"tags": [{"ok": "yes"}, "spaced"]}


def test_strings_are_kept_verbatim_by_default() -> None:
    assert OperatorKeySanitizer().transform({"username": " bob "}) == {"username": " bob "}


def test_transform_does_not_mutate_input() -> None:
    payload = {"$set": {"age": 1}, "username": " bob "}

    OperatorKeySanitizer().transform(payload)

    assert payload == {"$set": {"age": 1}, "username": " bob "}
