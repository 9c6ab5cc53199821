from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from parse_sdk.exceptions import INCORRECT_TYPE, ParseError
from parse_sdk.objects import ParseObject, ParseRole, ParseUser
from parse_sdk.values import NULL, ParseFile, ParseGeoPoint, ParseRelation


def test_put_and_get() -> None:
    obj = ParseObject("GameScore")
    assert not obj.is_dirty
    assert not obj.is_data_available()

    obj.put("score", 1337)
    obj.put("cheatMode", False)
    obj.put("opponent", NULL)

    assert obj.get("score") == 1337
    assert obj.get("cheatMode") is False
    assert obj.get("opponent") is NULL
    assert obj.get("missing", "fallback") == "fallback"
    assert obj.keys() == ["score", "cheatMode", "opponent"]
    assert "score" in obj
    assert obj.is_dirty
    assert obj.is_data_available()


def test_put_rejects_unsupported_value() -> None:
    obj = ParseObject("GameScore")
    with pytest.raises(ParseError) as excinfo:
        obj.put("score", float("nan"))
    assert excinfo.value.code == INCORRECT_TYPE
    assert not obj.has("score")
    assert not obj.is_dirty


def test_put_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        ParseObject("GameScore").put("", 1)


def test_add_appends_to_array() -> None:
    obj = ParseObject("Post")
    obj.add("tags", "python")
    obj.add("tags", "parse")
    assert obj.get("tags") == ["python", "parse"]

    with pytest.raises(ParseError):
        obj.add("tags", object())
    assert obj.get("tags") == ["python", "parse"]


def test_add_to_non_array_field_fails() -> None:
    obj = ParseObject("Post")
    obj.put("title", "hello")
    with pytest.raises(ParseError) as excinfo:
        obj.add("title", "world")
    assert excinfo.value.code == INCORRECT_TYPE


def test_remove_marks_dirty() -> None:
    obj = ParseObject("Post")
    obj.put("title", "hello")
    obj.set_dirty(False)
    obj.remove("missing")
    assert not obj.is_dirty
    obj.remove("title")
    assert not obj.has("title")
    assert obj.is_dirty


def test_get_date_accepts_wire_strings() -> None:
    expected = datetime(2015, 7, 14, 15, 55, 52, 133000, tzinfo=timezone.utc)
    obj = ParseObject("Event")
    obj.put("startsAt", "2015-07-14T15:55:52.133Z")
    obj.put("endsAt", expected)
    obj.put("label", "not-a-date")

    assert obj.get_date("startsAt") == expected
    assert obj.get_date("endsAt") is expected
    assert obj.get_date("label") is None
    assert obj.get_date("missing") is None


def test_naive_datetimes_are_stored_as_utc() -> None:
    obj = ParseObject("Event")
    obj.put("startsAt", datetime(2015, 7, 14, 15, 55, 52, 133000))
    obj.put("endsAt", "2015-07-14T16:55:52.133Z")
    obj.add("reminders", datetime(2015, 7, 14, 15, 0))

    starts_at = obj.get_date("startsAt")
    ends_at = obj.get_date("endsAt")
    assert starts_at == datetime(2015, 7, 14, 15, 55, 52, 133000, tzinfo=timezone.utc)
    assert obj.get("startsAt").tzinfo is timezone.utc
    assert obj.get("reminders")[0].tzinfo is timezone.utc
    assert starts_at < ends_at


def test_user_properties() -> None:
    user = ParseUser()
    user.username = "alice"
    user.email = "alice@example.com"
    user.password = "s3cret"

    assert user.class_name == "_User"
    assert user.username == "alice"
    assert user.get("email") == "alice@example.com"
    assert user.password == "s3cret"
    assert user.session_token is None


def test_role_relations() -> None:
    role = ParseRole("moderators")
    assert role.class_name == "_Role"
    assert role.name == "moderators"
    assert role.users == ParseRelation(parent=role, key="users", target_class="_User")
    assert role.roles.target_class == "_Role"
    assert ParseRole().name is None


def test_geo_point_bounds_and_distance() -> None:
    with pytest.raises(ValidationError):
        ParseGeoPoint(latitude=91.0, longitude=0.0)
    with pytest.raises(ValidationError):
        ParseGeoPoint(latitude=0.0, longitude=-181.0)

    origin = ParseGeoPoint(latitude=0.0, longitude=0.0)
    antipode = ParseGeoPoint(latitude=0.0, longitude=180.0)
    assert origin.distance_in_radians_to(origin) == 0.0
    assert origin.distance_in_radians_to(antipode) == pytest.approx(3.141592653589793)
    assert origin.distance_in_kilometers_to(antipode) == pytest.approx(20015.09, rel=1e-4)
    assert origin.distance_in_miles_to(antipode) == pytest.approx(12436.8, rel=1e-4)


def test_file_reference() -> None:
    pending = ParseFile(name="notes.txt", content_type="text/plain", data=b"hello")
    assert not pending.is_uploaded()
    uploaded = ParseFile(name="notes.txt", url="https://files.example.com/notes.txt")
    assert uploaded.is_uploaded()
    with pytest.raises(ValidationError):
        ParseFile(name="")


def test_null_is_a_falsy_singleton() -> None:
    assert not NULL
    assert type(NULL)() is NULL
    assert repr(NULL) == "NULL"
