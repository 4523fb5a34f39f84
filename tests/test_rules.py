import pytest
from rules import RULE_90, WolframRule

def test_from_int_bits():
    for code in (0, 30, 90, 110, 255):
        rule = WolframRule.from_int(code)
        assert int(rule.bits, 2) == code
        assert len(rule.bits) == 8

@pytest.mark.parametrize(
    "code,neighborhood,expected",
    [
        (0, 0, 0),
        (255, 7, 1),
        (90, 1, 1),    # 001
        (90, 2, 0),    # 010
        (90, 4, 1),    # 100
        (90, 5, 0),    # 101
        (30, 1, 1),
        (30, 7, 0),
    ],
)
def test_rule_call(code, neighborhood, expected):
    assert WolframRule(code)(neighborhood) == expected


def test_rule_90_bit_pattern():
    assert RULE_90.bits == "01011010"
    table = RULE_90.table()
    assert list(table) == ["111", "110", "101", "100", "011", "010", "001", "000"]
    assert [table[k] for k in table] == [0, 1, 0, 1, 1, 0, 1, 0]


def test_out_of_range_code_uses_low_byte():
    """Codes above 255 are not rejected; only the low 8 bits matter."""
    big = WolframRule(256 + 90)
    for n in range(8):
        assert big(n) == RULE_90(n)
    assert big.bits == RULE_90.bits


def test_invalid_neighborhood():
    with pytest.raises(ValueError):
        RULE_90(8)
    with pytest.raises(ValueError):
        RULE_90(-1)


def test_non_int_code_rejected():
    with pytest.raises(ValueError):
        WolframRule("90")
    with pytest.raises(ValueError):
        WolframRule(True)


@pytest.mark.parametrize("text", ["90", " 90 ", "090", "0b01011010", "0x5a", "0X5A", 90])
def test_parse_forms(text):
    assert WolframRule.parse(text) == RULE_90


@pytest.mark.parametrize("text", ["", "ninety", "0b2", "9.0", None])
def test_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        WolframRule.parse(text)


def test_int_conversion():
    assert int(WolframRule(110)) == 110
