import pytest

from dxfdraw.formatter import AsciiFormatter
from dxfdraw.insunit import Unit, UnitType, type_from_string, unit_from_string


def test_unit_values_fixed_by_format():
    assert unit_from_string("inches") == 1
    assert unit_from_string("parsecs") == 20
    assert unit_from_string("light years") is Unit.LIGHT_YEARS
    assert unit_from_string("none") is Unit.UNITLESS


@pytest.mark.parametrize("unit", list(Unit))
def test_unit_label_round_trip(unit):
    assert unit_from_string(str(unit)) is unit


def test_unit_lookup_is_lenient():
    assert unit_from_string("  Light-Years ") is Unit.LIGHT_YEARS
    assert unit_from_string("UNITLESS") is Unit.UNITLESS


def test_unknown_unit_name_rejected():
    with pytest.raises(ValueError):
        unit_from_string("furlongs")


def test_unknown_unit_number_is_labelled_unknown():
    assert str(Unit(99)) == "unknown"
    assert int(Unit(99)) == 99


def test_unit_format_writes_code_70():
    f = AsciiFormatter()
    Unit.MILLIMETERS.format(f)
    assert f.output() == f.format_int(70, int(Unit.MILLIMETERS))


def test_unit_type_format_is_shifted():
    f = AsciiFormatter()
    UnitType.ARCHITECTURAL.format(f)
    assert f.output() == "70\n4\n"


def test_decimal_is_zero_value():
    assert UnitType(0) is UnitType.DECIMAL
    assert UnitType.SCIENTIFIC == -1


def test_unit_type_labels():
    assert str(UnitType.ENGINEERING) == "engineering:"
    assert str(UnitType.WINDOWS_DESKTOP) == "windows desktop"
    assert str(UnitType(42)) == "unknown"


def test_type_lookup():
    assert type_from_string("WindowsDesktop") is UnitType.WINDOWS_DESKTOP
    assert type_from_string(" decimal ") is UnitType.DECIMAL


def test_unknown_type_name_rejected():
    with pytest.raises(ValueError):
        type_from_string("bogus")