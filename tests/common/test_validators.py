from datetime import date, datetime

import pytest

from onlychurch.common.datetime_utils import shift_month
from onlychurch.common.validators import mask_phone, optional_datetime, optional_email, parse_flag, require_non_empty
from onlychurch.core.exceptions import ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Ana ", "Nome") == "Ana"
    with pytest.raises(ValidationError, match="Nome é obrigatório"):
        require_non_empty("   ", "Nome")


@pytest.mark.parametrize(
    "raw,expected",
    [("(11) 98765-4321", "11987654321"), ("+55 11 98765-4321", "55119876543"), ("", None), (None, None)],
)
def test_mask_phone(raw, expected):
    assert mask_phone(raw) == expected


def test_optional_email():
    assert optional_email(" ") is None
    assert optional_email("a@b.com") == "a@b.com"
    with pytest.raises(ValidationError):
        optional_email("a@b")


def test_optional_datetime_accepts_utc_suffix():
    assert optional_datetime("2024-03-10T19:00:00Z", "Início") == datetime(2024, 3, 10, 19)
    with pytest.raises(ValidationError):
        optional_datetime("amanhã", "Início")


@pytest.mark.parametrize("value", [True, "sim", "on", "1", "true"])
def test_parse_flag_truthy(value):
    assert parse_flag(value) is True


def test_parse_flag_falsy():
    assert parse_flag(None) is False
    assert parse_flag("não") is False


def test_shift_month_crosses_years():
    assert shift_month(date(2024, 1, 31), -1) == date(2023, 12, 1)
    assert shift_month(date(2024, 12, 5), 1) == date(2025, 1, 1)
