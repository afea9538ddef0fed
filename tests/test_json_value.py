import pytest

from xrtcsdk.json_value import JsonArray, JsonObject, JsonType, JsonValue


def _sample_object():
    inner = JsonObject({"hwnd": 42})
    return JsonObject(
        {"url": "xrtc://host/push?uid=a", "count": 5, "flag": True, "ratio": 1.5, "inner": inner}
    )


def test_object_round_trip():
    original = JsonValue(_sample_object())
    parsed = JsonValue.from_json(original.to_json())
    assert parsed == original
    assert parsed.to_object()["inner"].to_object()["hwnd"].to_int() == 42


def test_to_json_is_compact_with_newline():
    text = JsonValue(JsonObject({"url": "abc"})).to_json()
    assert text == '{"url":"abc"}\n'


def test_null_and_empty_serialise_to_empty_string():
    assert JsonValue().to_json() == ""
    assert JsonValue(JsonObject()).to_json() == JsonValue().to_json()
    assert JsonValue(JsonArray()).to_json() == JsonValue().to_json()


def test_nested_empty_array_is_dropped_on_round_trip():
    value = JsonValue(JsonObject({"a": JsonArray(), "b": "x"}))
    parsed = JsonValue.from_json(value.to_json()).to_object()
    assert "a" not in parsed
    assert parsed["b"].to_string() == "x"


def test_invalid_json_yields_null():
    assert JsonValue.from_json("{not json").is_null
    assert JsonValue.from_json("").is_null


def test_top_level_scalar_yields_null():
    assert JsonValue.from_json("5").is_null
    assert JsonValue.from_json('"text"').is_null


def test_array_scalar_elements_become_null():
    arr = JsonValue.from_json("[1, 2]").to_array()
    assert len(arr) == 2
    assert all(item.is_null for item in arr)


def test_array_of_objects_round_trip():
    arr = JsonArray([JsonObject({"k": "v"}), JsonObject({"n": 3})])
    original = JsonValue(arr)
    parsed = JsonValue.from_json(original.to_json())
    assert parsed.is_array
    assert parsed == original


def test_null_members_are_skipped():
    obj = JsonValue.from_json('{"a": null, "b": 1}').to_object()
    assert "a" not in obj
    assert obj.keys() == ["b"]


def test_accessor_defaults_on_type_mismatch():
    value = JsonValue("x")
    assert value.to_int(7) == 7
    assert value.to_bool(True) is True
    assert value.to_double(2.5) == 2.5
    assert value.to_string("fallback") == "x"
    assert JsonValue(3).to_string("fallback") == "fallback"
    assert len(value.to_array()) == 0
    assert len(value.to_object()) == 0


def test_bool_is_not_int():
    value = JsonValue(True)
    assert value.type is JsonType.BOOL
    assert value.to_int(3) == 3
    assert value.to_bool() is True


def test_int_is_not_double():
    assert JsonValue(3).to_double(9.0) == 9.0
    assert JsonValue(3.0).to_int(9) == 9


def test_negative_int_wraps_unsigned():
    assert JsonValue(-1).to_int() == 2**64 - 1


def test_uint64_max_parses_as_int_and_beyond_as_double():
    obj = JsonValue.from_json('{"n": 18446744073709551615, "m": 18446744073709551616}').to_object()
    assert obj["n"].is_int
    assert obj["n"].to_int() == 18446744073709551615
    assert obj["m"].is_double


def test_type_only_construction():
    value = JsonValue(JsonType.ARRAY)
    assert value.is_array
    assert len(value.to_array()) == 0


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        JsonValue(object())


def test_object_missing_key_returns_null_without_inserting():
    obj = JsonObject({"a": 1})
    assert obj["missing"].is_null
    assert len(obj) == 1
    assert "missing" not in obj


def test_object_keys_sorted_and_remove():
    obj = JsonObject()
    obj["b"] = 1
    obj["a"] = "x"
    obj["c"] = JsonValue(False)
    assert obj.keys() == ["a", "b", "c"]
    obj.remove("b")
    obj.remove("nope")
    assert obj.keys() == ["a", "c"]
    assert list(obj) == obj.keys()


def test_object_rejects_non_string_key():
    with pytest.raises(TypeError):
        JsonObject()[1] = "x"


def test_to_object_returns_copy():
    value = JsonValue(JsonObject({"a": 1}))
    copy = value.to_object()
    copy["b"] = 2
    assert "b" not in value.to_object()


def test_constructor_copies_container():
    obj = JsonObject({"a": 1})
    value = JsonValue(obj)
    obj["b"] = 2
    assert len(value.to_object()) == 1


def test_array_append_and_index():
    arr = JsonArray()
    arr.append(1)
    arr.append("two")
    assert len(arr) == 2
    assert arr[0].to_int() == 1
    assert arr[1].to_string() == "two"
    assert arr[5].is_null
    assert arr[-1].is_null


def test_array_remove_at_ignores_out_of_range():
    arr = JsonArray(["a", "b", "c"])
    arr.remove_at(10)
    arr.remove_at(-1)
    assert len(arr) == 3
    arr.remove_at(1)
    assert [item.to_string() for item in arr] == ["a", "c"]


def test_plain_containers_are_wrapped():
    value = JsonValue({"list": [JsonObject({"x": "y"})]})
    assert value.is_object
    inner = value.to_object()["list"].to_array()
    assert inner[0].to_object()["x"].to_string() == "y"