import pytest

from json_to_php.utils import sanitize_key, to_camel_case, to_pascal_case


@pytest.mark.parametrize(
    "key, expected",
    [
        ("foo_bar", "foo_bar"),
        ("FooBar", "foobar"),
        ("first name", "first_name"),
        ("user-id", "user_id"),
        ("a.b/c", "a_b_c"),
        ("x1_Y2", "x1_y2"),
        ("", ""),
    ],
)
def test_sanitize_key(key, expected):
    assert sanitize_key(key) == expected


def test_sanitize_key_replaces_non_ascii_letters():
    assert sanitize_key("café") == "caf_"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo_bar", "fooBar"),
        ("foo", "foo"),
        ("user_profile_settings", "userProfileSettings"),
        ("_id", "Id"),
        ("a__b", "aB"),
        ("trailing_", "trailing"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo_bar", "FooBar"),
        ("root", "Root"),
        ("users_profile", "UsersProfile"),
        ("FooBar", "FooBar"),
        ("", ""),
    ],
)
def test_to_pascal_case(text, expected):
    assert to_pascal_case(text) == expected


def test_sanitized_key_casing():
    assert to_camel_case(sanitize_key("foo_bar")) == "fooBar"
    assert to_pascal_case(sanitize_key("foo_bar")) == "FooBar"
    assert to_pascal_case(sanitize_key("Last-Login At")) == "LastLoginAt"
