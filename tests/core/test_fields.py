import pytest

from errcompose import HTTP_CODE, FieldKey, get_field, http_code, new, with_field, with_http_code


def test_http_code_defaults_to_zero():
    assert new("base").http_code() == 0


def test_http_code_last_value_wins():
    err = new("base", with_http_code(400), with_field("http_code", 409))
    assert err.http_code() == 409
    err = new("base", with_field("http_code", 409), with_http_code(503))
    assert err.http_code() == 503


@pytest.mark.parametrize("value", ["404", 404.0, True, None])
def test_http_code_ignores_non_integers(value):
    err = new("base", with_field("http_code", value))
    assert err.http_code() == 0
    assert err.get_field("http_code") == (value, True)


def test_get_field():
    err = new("base", with_field("min_amount", 100))
    assert err.get_field("min_amount") == (100, True)
    assert err.get_field("missing") == (None, False)


def test_get_field_tolerates_absent_receiver():
    assert get_field(None, "http_code") == (None, False)
    assert get_field(ValueError("plain"), "http_code") == (None, False)
    assert http_code(None) == 0
    assert http_code(new("base", with_http_code(418))) == 418


def test_fields_view_is_read_only():
    err = new("base", with_field("k", "v"))
    with pytest.raises(TypeError):
        err.fields["k"] = "changed"  # type: ignore[index]
    assert err.fields["k"] == "v"


def test_wrapped_is_a_copy():
    err = new("base", "one")
    assert isinstance(err.wrapped, tuple)
    assert len(err.wrapped) == 1


def test_typed_field_lookup():
    retries = FieldKey("retries", int, -1)
    err = new("base", with_field("retries", 3), with_field("label", "x"))
    assert err.get_typed(retries) == 3
    assert err.get_typed(FieldKey("label", int, 0)) == 0
    assert err.get_typed(FieldKey("missing", str, "none")) == "none"
    assert err.get_typed(HTTP_CODE) == 0


def test_option_constructors_validate_arguments():
    with pytest.raises(TypeError):
        with_http_code("500")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        with_http_code(True)
    with pytest.raises(TypeError):
        with_field(1, "value")  # type: ignore[arg-type]
