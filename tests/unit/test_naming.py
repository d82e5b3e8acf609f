"""naming 모듈 테스트."""

from __future__ import annotations

import pytest

from model_generator.naming import (
    array_literal_text,
    boolean_literal_text,
    derive_path_stem,
    to_class_name,
)


@pytest.mark.parametrize(
    ("table_name", "expected"),
    [
        ("user_accounts", "UserAccounts"),
        ("address", "Address"),
        ("order-items", "OrderItems"),
        ("userAccounts", "UserAccounts"),
        ("__audit__log", "AuditLog"),
        ("tb_2024_sales", "Tb2024Sales"),
        ("", ""),
    ],
)
def test_to_class_name(table_name: str, expected: str) -> None:
    assert to_class_name(table_name) == expected


def test_path_stem_keeps_double_s_words() -> None:
    assert derive_path_stem("Models/", "Address") == "Models/Address"


def test_path_stem_keeps_non_plural_words() -> None:
    assert derive_path_stem("Models/", "Person") == "Models/Person"


def test_path_stem_strips_plain_s() -> None:
    assert derive_path_stem("Models/", "Users") == "Models/User"
    assert derive_path_stem("Models/", "UserAccounts") == "Models/UserAccount"


def test_path_stem_trims_suffix_characters_not_literal_suffix() -> None:
    assert derive_path_stem("Models/", "Boxes") == "Models/Box"
    assert derive_path_stem("Models/", "Categories") == "Models/Categor"
    assert derive_path_stem("Models/", "Statuses") == "Models/Statu"
    assert derive_path_stem("Models/", "Series") == "Models/Ser"


def test_path_stem_without_prefix() -> None:
    assert derive_path_stem("", "Orders") == "Order"


def test_array_literal_text() -> None:
    assert array_literal_text(["id", "team_id"]) == "['id', 'team_id']"
    assert array_literal_text(()) == "[]"


def test_boolean_literal_text() -> None:
    assert boolean_literal_text(True) == "true"
    assert boolean_literal_text(False) == "false"


@pytest.mark.parametrize(
    ("table_name", "expected"),
    [
        ("café_items", "CaféItems"),
        ("사용자_목록", "사용자목록"),
        ("straße-2", "Straße2"),
    ],
)
def test_to_class_name_keeps_unicode_letters(table_name: str, expected: str) -> None:
    assert to_class_name(table_name) == expected
