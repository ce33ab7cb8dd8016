import pytest

from signup.registration import validators as v


class TestIdentityValidators:
    """Username, email and password format rules."""

    @pytest.mark.parametrize("username", ["testuser1", "ABCDEFGH", "12345678", "a1B2c3D4e5"])
    def test_username_accepts_alphanumeric_of_eight_or_more(self, username):
        assert v.validate_username(username) is True

    @pytest.mark.parametrize(
        "username",
        ["short1", "has spaces1", "under_score1", "testuser1\n", "", 12345678, None],
    )
    def test_username_rejects(self, username):
        assert v.validate_username(username) is False

    @pytest.mark.parametrize(
        "email", ["test@example.com", "a.b@sub.domain.org", "x@y.z"]
    )
    def test_email_accepts_simple_shape(self, email):
        assert v.validate_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "no-dot@domain", "two@@example.com", "sp ace@example.com", "@example.com", None],
    )
    def test_email_rejects(self, email):
        assert v.validate_email(email) is False

    @pytest.mark.parametrize("password", ["Testpass1@", "Aa1@aaaa", "Zz9&Zz9&Zz9&"])
    def test_password_accepts_all_classes(self, password):
        assert v.validate_password(password) is True

    @pytest.mark.parametrize(
        "password, reason",
        [
            ("alllowercase1@", "no uppercase"),
            ("ALLUPPERCASE1@", "no lowercase"),
            ("NoDigitsHere@", "no digit"),
            ("NoSymbol123", "no symbol"),
            ("Aa1@", "too short"),
            ("Testpass1@#", "character outside the allowed set"),
            ("Testpass1@ ", "whitespace"),
            ("TestpassÙ¡@", "non-ascii digit only"),
        ],
    )
    def test_password_rejects(self, password, reason):
        assert v.validate_password(password) is False, reason

    def test_password_rejects_non_string(self):
        assert v.validate_password(12345678) is False


class TestGenericValidators:
    def test_length_bounds_are_inclusive(self):
        params = {"min": 1, "max": 8}
        assert v.validate_length("a", params)
        assert v.validate_length("abcdefgh", params)
        assert not v.validate_length("", params)
        assert not v.validate_length("abcdefghi", params)
        assert not v.validate_length(123, params)

    @pytest.mark.parametrize("number", ["1234567890", "0000000000"])
    def test_phone_number_accepts_ten_digit_strings(self, number):
        assert v.validate_phone_number(number, {})

    @pytest.mark.parametrize("number", ["123456789", "12345678901", "12345abcde", 1234567890, None])
    def test_phone_number_rejects(self, number):
        assert not v.validate_phone_number(number, {})

    @pytest.mark.parametrize("gender", ["male", "Female", "OTHER"])
    def test_gender_is_case_insensitive(self, gender):
        assert v.validate_gender(gender)

    @pytest.mark.parametrize("gender", ["unknown", "", 1])
    def test_gender_rejects(self, gender):
        assert not v.validate_gender(gender)

    @pytest.mark.parametrize("age", [18, 100, "25", " 40 ", "+25"])
    def test_age_accepts_integers_in_range(self, age):
        assert v.validate_age(age)

    @pytest.mark.parametrize("age", [17, 101, 5, "abc", "25.5", 25.0, True, None])
    def test_age_rejects(self, age):
        assert not v.validate_age(age)

    @pytest.mark.parametrize("age", ["2_5", "٢٥", "２５", "25 years", "--25"])
    def test_age_rejects_non_ascii_digit_strings(self, age):
        assert not v.validate_age(age)

    def test_specific_validators_match_table_rules(self):
        assert v.validate_firstname("Alice")
        assert not v.validate_firstname("toolongname")
        assert v.validate_lastname("Smith")
        assert not v.validate_lastname("")
        assert v.validate_number("0123456789")
        assert not v.validate_number(123456789)

    def test_validators_are_pure(self):
        for value in ["Testpass1@", "bad"]:
            assert v.validate_password(value) == v.validate_password(value)
        assert v.validate_age("30") == v.validate_age("30")
