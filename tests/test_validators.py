"""
Unit tests for validators module
"""

import pytest

from app.validators import is_blank, is_valid_age, is_valid_email, is_valid_salary


class TestEmailValidation:
    @pytest.mark.parametrize("email", ["a@b.com", "  first.last@example.co.uk  ", "x@.", "a@b.c"])
    def test_valid_emails(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "a@b",  # no '.' in domain
            "a@@b.com",  # two '@'
            "@b.com",  # empty local part
            "a@",  # empty domain
            "ab.com",  # no '@'
            "a@b@c.com",
            "",
            "   ",
            None,
        ],
    )
    def test_invalid_emails(self, email):
        assert is_valid_email(email) is False

    def test_leading_whitespace_is_trimmed_before_position_check(self):
        assert is_valid_email("  @b.com") is False
        assert is_valid_email("  a@b.com") is True


class TestNumericRules:
    def test_salary(self):
        assert is_valid_salary(0) is True
        assert is_valid_salary(90000) is True
        assert is_valid_salary(-1) is False

    def test_age_bounds_inclusive(self):
        assert is_valid_age(0) is True
        assert is_valid_age(100) is True
        assert is_valid_age(-1) is False
        assert is_valid_age(101) is False


def test_is_blank():
    assert is_blank(None) is True
    assert is_blank("") is True
    assert is_blank(" \t ") is True
    assert is_blank(" x ") is False
