import logging

import pytest

from errcompose import (
    CompositeError,
    LeafError,
    Settings,
    UnsupportedTypeError,
    compose,
    from_error,
    new,
    with_field,
    with_http_code,
)
from errcompose.config import reset_default_settings, set_default_settings


@pytest.fixture(autouse=True)
def default_settings():
    set_default_settings(Settings())
    yield
    reset_default_settings()


class Opaque:
    pass


def test_none_and_empty_main_yield_none():
    assert new(None) is None
    assert new(None, "extra", with_http_code(500)) is None
    assert new("") is None
    assert new("", ValueError("ignored")) is None


def test_string_main_becomes_leaf_error():
    err = new("boom")
    assert isinstance(err, CompositeError)
    assert isinstance(err.main, LeafError)
    assert str(err) == "boom"
    assert err.wrapped == ()
    assert dict(err.fields) == {}


def test_exception_main_is_used_directly():
    base = ValueError("bad value")
    err = new(base)
    assert err.main is base
    assert str(err) == "bad value"
    assert err.__cause__ is base


def test_extras_are_appended_in_order():
    first = KeyError("first")
    err = new("base", first, "second", None, RuntimeError("third"))
    assert err.wrapped[0] is first
    assert isinstance(err.wrapped[1], LeafError)
    assert str(err.wrapped[1]) == "second"
    assert isinstance(err.wrapped[2], RuntimeError)
    assert len(err.wrapped) == 3


def test_options_are_applied_during_construction():
    err = new("base", with_field("min_amount", 100), with_http_code(403))
    assert err.fields["min_amount"] == 100
    assert err.http_code() == 403
    assert err.applied_options == ("field", "field")


def test_nested_composite_inherits_parts():
    inner_wrapped = KeyError("inner")
    original = new("main", inner_wrapped, with_field("tenant", "acme"))
    outer = new(original, "outer", with_field("attempt", 2))

    assert outer.main is original.main
    assert outer.wrapped[0] is inner_wrapped
    assert str(outer.wrapped[1]) == "outer"
    assert outer.fields == {"tenant": "acme", "attempt": 2}
    assert outer.derived_from is original


def test_nested_composite_does_not_share_state():
    original = new("main", "one", with_field("tenant", "acme"))
    new(original, "two", with_field("tenant", "other"))
    assert len(original.wrapped) == 1
    assert original.fields["tenant"] == "acme"


def test_nested_composite_field_values_are_shallow_copied():
    payload = {"ids": [1]}
    original = new("main", with_field("payload", payload))
    outer = new(original)
    assert outer.fields["payload"] is payload


def test_unsupported_main_type_is_returned_not_raised():
    result = new(42, "ignored")
    assert isinstance(result, UnsupportedTypeError)
    assert isinstance(result, TypeError)
    assert result.rejected_type is int
    assert str(result) == "errcompose: unsupported main error type int"


def test_unsupported_main_names_qualified_type():
    result = new(Opaque())
    assert isinstance(result, UnsupportedTypeError)
    assert "Opaque" in str(result)


def test_exception_class_is_not_an_error_instance():
    result = new(ValueError)
    assert isinstance(result, UnsupportedTypeError)
    assert result.rejected_type is type


def test_unrecognized_extras_are_ignored_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="errcompose.constructor")
    err = new("base", 12, "kept")
    assert isinstance(err, CompositeError)
    assert [str(item) for item in err.wrapped] == ["kept"]
    messages = [record.getMessage() for record in caplog.records if record.name == "errcompose.constructor"]
    assert any("unsupported type int" in message for message in messages)


def test_unrecognized_extras_can_be_silenced(caplog):
    caplog.set_level(logging.WARNING, logger="errcompose.constructor")
    err = compose("base", 12, settings=Settings(log_ignored_extras=False))
    assert isinstance(err, CompositeError)
    assert not [record for record in caplog.records if record.name == "errcompose.constructor"]


def test_strict_settings_reject_unrecognized_extras():
    result = compose("base", object(), settings=Settings(strict_extras=True))
    assert isinstance(result, UnsupportedTypeError)
    assert result.role == "extra"
    assert str(result) == "errcompose: unsupported extra type object"


def test_new_uses_default_settings():
    set_default_settings(Settings(strict_extras=True))
    assert isinstance(new("base", 3.5), UnsupportedTypeError)


def test_raise_new_is_catchable():
    base = ValueError("root cause")
    with pytest.raises(CompositeError) as excinfo:
        raise new(base, "while saving")
    assert excinfo.value.main is base


def test_from_error():
    assert from_error(None) is None
    composite = new("already")
    assert from_error(composite) is composite
    plain = OSError("disk")
    converted = from_error(plain)
    assert isinstance(converted, CompositeError)
    assert converted.main is plain
    assert converted.wrapped == ()
    assert dict(converted.fields) == {}


def test_malformed_environment_does_not_break_new(monkeypatch, caplog):
    reset_default_settings()
    monkeypatch.setenv("ERRCOMPOSE_STRICT_EXTRAS", "maybe")
    caplog.set_level(logging.WARNING, logger="errcompose.config")
    base = ValueError("db down")

    err = new(base, "while saving", 7)

    assert isinstance(err, CompositeError)
    assert err.main is base
    assert [str(item) for item in err.wrapped] == ["while saving"]
    messages = [record.getMessage() for record in caplog.records if record.name == "errcompose.config"]
    assert any("ERRCOMPOSE_STRICT_EXTRAS" in message for message in messages)
