# -*- coding: utf-8 -*-
"""Unit tests for string and resolution helpers."""

from __future__ import annotations

import pytest

from notice_delivery.utils import first_present, title_case


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("TITLE", "Title"),
        ("hello world", "Hello World"),
        ("don't stop", "Don't Stop"),
        ("error 404: not-found", "Error 404: Not-Found"),
        ("", ""),
    ],
)
def test_title_case(text: str, expected: str) -> None:
    assert title_case(text) == expected


def test_title_case_is_idempotent() -> None:
    once = title_case("oPPs i DID it again!")

    assert title_case(once) == once


def test_first_present_treats_zero_and_empty_as_present() -> None:
    assert first_present(None, 0, 3000) == 0
    assert first_present(None, "", "x") == ""
    assert first_present(None, None) is None
    assert first_present(None, None, 3) == 3
