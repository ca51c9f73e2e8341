"""Unit tests for EnvError."""

import pickle

import pytest

from typedenv.enums import EnvErrorReason
from typedenv.errors import EnvError, missing_key, not_a_number, not_allowed, not_an_int


class TestEnvError:
    """Tests for the error value and its rendering."""

    def test_message_format(self):
        """EnvError should render as [key]: reason."""
        err = EnvError("DATABASE_URL", "something went wrong")
        assert str(err) == "[DATABASE_URL]: something went wrong"
        assert err.key == "DATABASE_URL"
        assert err.reason == "something went wrong"

    def test_default_kind_is_missing_key(self):
        assert EnvError("K", "r").kind == EnvErrorReason.MISSING_KEY

    def test_is_an_exception(self):
        with pytest.raises(Exception):
            raise EnvError("K", "r")

    def test_repr(self):
        err = EnvError("K", "not an int", EnvErrorReason.NOT_AN_INT)
        assert repr(err) == "EnvError(key='K', reason='not an int', kind='not_an_int')"


class TestErrorFactories:
    """Each failure category has a fixed reason text."""

    @pytest.mark.parametrize(
        "factory, reason, kind",
        [
            (missing_key, "env variable not found", EnvErrorReason.MISSING_KEY),
            (not_an_int, "not an int", EnvErrorReason.NOT_AN_INT),
            (not_a_number, "not a number", EnvErrorReason.NOT_A_NUMBER),
        ],
    )
    def test_reason_texts(self, factory, reason, kind):
        err = factory("K")
        assert err.reason == reason
        assert err.kind == kind
        assert str(err) == f"[K]: {reason}"

    def test_not_allowed_lists_values_in_order(self):
        err = not_allowed("MODE", ["b", "a"])
        assert str(err) == "[MODE]: must be one of [b, a]."
        assert err.kind == EnvErrorReason.NOT_ALLOWED


class TestEnvErrorPickling:
    """EnvError survives a trip across a process boundary."""

    def test_round_trips_through_pickle(self):
        err = EnvError("PORT", "not an int", EnvErrorReason.NOT_AN_INT)
        restored = pickle.loads(pickle.dumps(err))

        assert isinstance(restored, EnvError)
        assert restored.key == "PORT"
        assert restored.reason == "not an int"
        assert restored.kind == EnvErrorReason.NOT_AN_INT
        assert str(restored) == "[PORT]: not an int"

    def test_default_kind_round_trips(self):
        restored = pickle.loads(pickle.dumps(EnvError("K", "r")))
        assert restored.kind == EnvErrorReason.MISSING_KEY
