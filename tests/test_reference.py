import pytest

from alert.domain.frames import TracedError
from alert.infrastructure.reference import REF_LENGTH, refstr


def test_explicit_ref_wins() -> None:
    assert refstr(TracedError("x", ref="req-42")) == "req-42"


def test_traced_errors_from_same_site_share_ref() -> None:
    refs = {refstr(TracedError("x")) for _ in range(3)}
    assert len(refs) == 1
    (ref,) = refs
    assert len(ref) == REF_LENGTH


def test_traced_errors_from_different_sites_differ() -> None:
    first = TracedError("x")
    second = TracedError("x")
    assert refstr(first) != refstr(second)


def test_raised_error_gets_ref() -> None:
    with pytest.raises(KeyError) as info:
        {}["missing"]
    assert len(refstr(info.value)) == REF_LENGTH


def test_unraised_plain_error_has_no_ref() -> None:
    assert refstr(ValueError("x")) == ""


def test_ref_attribute_that_is_not_callable_is_ignored() -> None:
    err = ValueError("x")
    err.ref = "not a method"  # type: ignore[attr-defined]
    assert refstr(err) == ""
