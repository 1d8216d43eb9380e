"""End-to-end form scenarios across the public ``jpnorm`` surface."""
from __future__ import annotations

import jpnorm
from jpnorm import (
    EmailOptions,
    NameOptions,
    PhoneOptions,
    format_credit_card,
    normalize_email,
    normalize_name,
    normalize_number,
    normalize_phone,
    normalize_postal_code,
    normalize_text,
)


class TestContactForm:
    def test_name_phone_email(self) -> None:
        record = {
            "name": normalize_name("　山田　　太郎　"),
            "phone": normalize_phone("０９０−１２３４−５６７８"),
            "email": normalize_email("test＠gamil.com").email,
        }
        assert record == {
            "name": "山田太郎",
            "phone": "090-1234-5678",
            "email": "test@gmail.com",
        }

    def test_registration_form(self) -> None:
        record = {
            "name": normalize_name("ﾔﾏﾀﾞ　ﾀﾛｳ"),
            "email": normalize_email("YAMADA＠YAHOOO.CO.JP", EmailOptions(to_lower_case=True)).email,
            "phone": normalize_phone("０３１２３４５６７８"),
            "postal_code": normalize_postal_code("１２３４５６７"),
        }
        assert record == {
            "name": "ヤマダタロウ",
            "email": "yamada@yahoo.co.jp",
            "phone": "03-1234-5678",
            "postal_code": "123-4567",
        }


class TestCheckout:
    def test_card_and_postal_code(self) -> None:
        assert format_credit_card("１２３４５６７８９０１２３４５６") == "1234 5678 9012 3456"
        assert normalize_postal_code("１０１−００６５") == "101-0065"


class TestImport:
    def test_csv_rows(self) -> None:
        rows = [
            ("　佐藤　一郎　", "０９０−１１１１−２２２２"),
            ("ﾀﾅｶ　ﾀﾛｳ", "０８０−３３３３−４４４４"),
            ("鈴木　花子", "０７０−５５５５−６６６６"),
        ]
        assert [(normalize_name(n), normalize_phone(p)) for n, p in rows] == [
            ("佐藤一郎", "090-1111-2222"),
            ("タナカタロウ", "080-3333-4444"),
            ("鈴木花子", "070-5555-6666"),
        ]

    def test_prices(self) -> None:
        prices = ["１，０００", "￥２，５００", "１２，３４５", "¥10,000"]
        values = [int(normalize_number(p.replace("￥", "").replace("¥", ""))) for p in prices]
        assert values == [1000, 2500, 12345, 10000]


class TestMatching:
    def test_phone_duplicate_check(self) -> None:
        bare = PhoneOptions(remove_hyphens=True)
        stored = ["090-1234-5678", "08012345678", "070-9999-8888"]
        needle = normalize_phone("０９０１２３４５６７８", bare)

        assert needle == "09012345678"
        assert needle in [normalize_phone(p, bare) for p in stored]

    def test_name_fuzzy_match(self) -> None:
        opts = NameOptions(remove_spaces=True)
        assert [normalize_name(n, opts) for n in ["山田　太郎", "ﾔﾏﾀﾞ ﾀﾛｳ", "山田 太郎"]] == [
            "山田太郎",
            "ヤマダタロウ",
            "山田太郎",
        ]


class TestBoundaries:
    def test_empty_and_blank(self) -> None:
        assert normalize_text("") == ""
        assert normalize_phone("") == ""
        assert normalize_name("") == ""
        assert normalize_text("　　　") == ""
        assert normalize_name("   ") == ""

    def test_stray_symbols_in_phone(self) -> None:
        assert normalize_phone("090-!!!-5678") == "0905678"

    def test_short_postal_codes(self) -> None:
        assert normalize_postal_code("12345") == "12345"
        assert normalize_postal_code("123") == "123"


def test_public_surface_exports_resolve() -> None:
    for name in jpnorm.__all__:
        assert callable(getattr(jpnorm, name))
