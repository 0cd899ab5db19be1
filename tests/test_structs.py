import dataclasses

import pytest

from drillrunner.drills.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Package,
    UnitLikeStruct,
    Wrapper,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number) == ("Bob", 2019, 123)
    assert template.made_by_email is True


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="weightless"):
        Package("Spain", "Austria", -2210)


def test_zero_weight_is_refused():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    assert Package("Spain", "Spain", 1500).get_fees(3) == 4500


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"