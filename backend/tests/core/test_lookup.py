"""Lookup result - Found / NotFound behave as a two-case union."""

from todo_api.core.lookup import Found, NotFound


def _describe(result):
    match result:
        case Found(value):
            return f"found {value}"
        case NotFound():
            return "missing"


def test_found_unpacks_in_match():
    assert _describe(Found(3)) == "found 3"


def test_not_found_matches_its_case():
    assert _describe(NotFound()) == "missing"


def test_equality():
    assert Found("a") == Found("a")
    assert Found("a") != Found("b")
    assert NotFound() == NotFound()
    assert Found(None) != NotFound()
