"""Unit tests for LoginAttemptId, TwoFACode and BearerToken."""

from unittest.mock import patch

import pytest

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Success
from warden.domain.value_objects import BearerToken, LoginAttemptId, TwoFACode


@pytest.mark.unit
class TestLoginAttemptId:
    """Test LoginAttemptId value object."""

    def test_generate_returns_distinct_ids(self):
        ids = {LoginAttemptId.generate() for _ in range(50)}

        assert len(ids) == 50

    def test_value_is_canonical_uuid_text(self):
        """Test uppercase input is stored in canonical lowercase form."""
        raw = "4F2B8C1E-3D5A-4B6C-9E7F-0A1B2C3D4E5F"

        assert LoginAttemptId(raw).value == raw.lower()

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", "g" * 32])
    def test_invalid_id_raises(self, raw):
        with pytest.raises(ValueError, match="Invalid login attempt ID"):
            LoginAttemptId(raw)

    def test_parse_failure(self):
        result = LoginAttemptId.parse("nope")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_LOGIN_ATTEMPT_ID
        assert result.error.field == "loginAttemptId"

    def test_parse_round_trips_generated_id(self):
        attempt_id = LoginAttemptId.generate()

        assert LoginAttemptId.parse(str(attempt_id)) == Success(value=attempt_id)


@pytest.mark.unit
class TestTwoFACode:
    """Test TwoFACode value object."""

    def test_generate_is_six_digits(self):
        for _ in range(100):
            code = TwoFACode.generate()
            assert len(code.value) == 6
            assert code.value.isdigit()

    def test_generate_bounds(self):
        """Test generated codes cover 100000 through 999999."""
        target = "warden.domain.value_objects.two_fa_code.secrets.randbelow"
        with patch(target, return_value=0):
            assert TwoFACode.generate().value == "100000"
        with patch(target, return_value=899_999):
            assert TwoFACode.generate().value == "999999"

    def test_leading_zero_code_is_accepted_on_parse(self):
        """Test parse accepts any six ASCII digits, not only generated range."""
        assert isinstance(TwoFACode.parse("012345"), Success)

    @pytest.mark.parametrize("raw", ["", "12345", "1234567", "12a456", "١٢٣٤٥٦"])
    def test_invalid_code_fails_to_parse(self, raw):
        result = TwoFACode.parse(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_TWO_FA_CODE
        assert result.error.field == "2FACode"

    def test_code_is_masked(self):
        code = TwoFACode("123456")

        assert str(code) == "******"
        assert "123456" not in repr(code)


@pytest.mark.unit
class TestBearerToken:
    """Test BearerToken value object."""

    def test_value_is_kept_verbatim(self):
        assert BearerToken("abc.def.ghi").value == "abc.def.ghi"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_token_fails_to_parse(self, raw):
        result = BearerToken.parse(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_TOKEN_FORMAT
        assert result.error.field == "token"

    def test_repr_is_redacted(self):
        assert "abc" not in repr(BearerToken("abc.def.ghi"))
