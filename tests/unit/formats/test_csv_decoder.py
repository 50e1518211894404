from __future__ import annotations

import pytest

from transedit.core.exceptions import DecodeError
from transedit.core.formats import CsvDecoder


def _csv(*rows: str) -> str:
    return "\n".join(rows) + "\n"


def test_header_columns_decode_to_one_tree_per_locale() -> None:
    raw = _csv("key,en,de", "a.0.title,First,Erste", "a.1.title,Second,Zweite")

    result = CsvDecoder().decode(raw)

    assert result == {
        "en": {"a": [{"title": "First"}, {"title": "Second"}]},
        "de": {"a": [{"title": "Erste"}, {"title": "Zweite"}]},
    }


def test_index_before_its_predecessor_is_rejected() -> None:
    raw = _csv("key,en,de", "a.1.title,Second,Zweite", "a.0.title,First,Erste")

    with pytest.raises(DecodeError, match="missing indices") as excinfo:
        CsvDecoder().decode(raw)

    assert 'The leaf "a.1.title"' in str(excinfo.value)


def test_skipping_an_index_is_rejected() -> None:
    raw = _csv(
        "onboarding.pages.0.title,First",
        "onboarding.pages.2.title,Third",
    )

    with pytest.raises(DecodeError, match='"onboarding.pages.2.title" cannot be added because there are missing indices'):
        CsvDecoder().decode(raw)


def test_rows_without_header_decode_to_a_single_tree() -> None:
    raw = _csv(
        "login.title,Login",
        "login.button,Sign in",
        "welcome,\"Hello, world\"",
    )

    assert CsvDecoder().decode(raw) == {
        "login": {"title": "Login", "button": "Sign in"},
        "welcome": "Hello, world",
    }


def test_empty_cells_are_skipped_per_locale() -> None:
    raw = _csv("key,en,de", "login.title,Login,", "login.button,Sign in,Einloggen")

    result = CsvDecoder().decode(raw)

    assert result["en"] == {"login": {"title": "Login", "button": "Sign in"}}
    assert result["de"] == {"login": {"button": "Einloggen"}}


def test_blank_lines_are_ignored() -> None:
    raw = "key,en\n\nlogin.title,Login\n\n"
    assert CsvDecoder().decode(raw) == {"en": {"login": {"title": "Login"}}}


def test_empty_input_decodes_to_empty_tree() -> None:
    assert CsvDecoder().decode("") == {}


def test_row_without_value_column_is_rejected() -> None:
    with pytest.raises(DecodeError, match="Line 2"):
        CsvDecoder().decode(_csv("login.title,Login", "login.button"))


def test_invalid_path_names_the_line() -> None:
    with pytest.raises(DecodeError, match="Line 3"):
        CsvDecoder().decode(_csv("key,en", "login.title,Login", "login..button,Sign in"))


def test_header_needs_a_locale_for_every_column() -> None:
    with pytest.raises(DecodeError, match="locale"):
        CsvDecoder().decode(_csv("key,en,", "login.title,Login,Anmelden"))


def test_key_value_header_decodes_to_a_single_tree() -> None:
    raw = _csv("key,value", "login.title,Login", "pages.0.title,First")

    assert CsvDecoder().decode(raw) == {"login": {"title": "Login"}, "pages": [{"title": "First"}]}


def test_crlf_file_with_out_of_order_pages() -> None:
    raw = "\r\n".join(
        [
            "key,en,de",
            "onboarding.pages.1.title,Second Page,Zweite Seite",
            "onboarding.pages.0.title,First Page,Erste Seite",
            "onboarding.pages.0.content,First Page Content,Erster Seiteninhalt",
        ]
    )

    with pytest.raises(DecodeError) as excinfo:
        CsvDecoder().decode(raw)

    assert str(excinfo.value) == (
        'The leaf "onboarding.pages.1.title" cannot be added because there are missing indices.'
    )


def test_crlf_file_in_order() -> None:
    raw = "\r\n".join(
        [
            "key,en",
            "onboarding.pages.0.title,First Page",
            "onboarding.pages.0.content,First Page Content",
            "onboarding.pages.1.title,Second Page",
        ]
    )

    assert CsvDecoder().decode(raw)["en"] == {
        "onboarding": {
            "pages": [
                {"title": "First Page", "content": "First Page Content"},
                {"title": "Second Page"},
            ]
        }
    }
