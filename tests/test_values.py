import logging

from gridfront.values import (
    bool_from_value,
    float_from_value,
    i32_from_value,
    str_from_value,
    u32_from_value,
    u64_from_value,
)

U64_MAX = 2**64 - 1
I64_MAX = 2**63 - 1


def test_from_value_f32():
    v0 = 0.0
    v0 = float_from_value(v0, 1.0)
    assert v0 == 1.0
    v0 = float_from_value(v0, -1)
    assert v0 == -1.0
    v0 = float_from_value(v0, U64_MAX)
    assert v0 == float(U64_MAX)
    v0 = float_from_value(v0, "asd")
    assert v0 == float(U64_MAX)


def test_from_value_u64():
    v0 = u64_from_value(0, U64_MAX)
    assert v0 == U64_MAX
    v0 = u64_from_value(v0, -1)
    assert v0 == U64_MAX


def test_from_value_u32():
    v0 = u32_from_value(0, U64_MAX)
    assert v0 == 0xFFFFFFFF
    v0 = u32_from_value(v0, -1)
    assert v0 == 0xFFFFFFFF


def test_from_value_i32():
    v0 = i32_from_value(0, I64_MAX)
    assert v0 == -1
    v0 = i32_from_value(v0, U64_MAX)
    assert v0 == -1


def test_from_value_string():
    v0 = str_from_value("foo", "bar")
    assert v0 == "bar"
    v0 = str_from_value(v0, -1)
    assert v0 == "bar"


def test_from_value_bool():
    v0 = False
    v0 = bool_from_value(v0, True)
    assert v0 is True
    v0 = bool_from_value(v0, 0)
    assert v0 is False
    v0 = bool_from_value(v0, 1)
    assert v0 is True
    v0 = bool_from_value(v0, -1)
    assert v0 is True


def test_bool_is_not_a_number_for_float():
    assert float_from_value(2.5, True) == 2.5


def test_rejected_value_logs_error(caplog):
    with caplog.at_level(logging.ERROR, logger="gridfront.values"):
        result = u64_from_value(7, "x")
    assert result == 7
    assert "expected a u64" in caplog.text