from katas.basics import (
    ContactInfo,
    Person,
    classify_parity,
    main,
    modify_map,
    print_map,
)


def test_modify_map_upgrades_bmw():
    cars = {"bmw": "M3", "audi": "a6", "benz": "amg"}
    assert modify_map(cars) == {"bmw": "M4", "audi": "a6", "benz": "amg"}


def test_modify_map_leaves_input_untouched():
    cars = {"bmw": "M3", "audi": "a6"}
    modify_map(cars)
    assert cars == {"bmw": "M3", "audi": "a6"}


def test_modify_map_without_bmw_is_equal_copy():
    cars = {"audi": "a6", "benz": "amg"}
    result = modify_map(cars)
    assert result == cars
    assert result is not cars


def test_print_map(capsys):
    print_map({"audi": "a6", "benz": "amg"})
    assert capsys.readouterr().out.splitlines() == ["audi a6", "benz amg"]


def test_classify_parity():
    assert classify_parity([1, 2, 3]) == [(1, "odd"), (2, "even"), (3, "odd")]


def test_classify_parity_keeps_order_and_length():
    numbers = [9, 4, -3, 0]
    result = classify_parity(numbers)
    assert [number for number, _ in result] == numbers
    assert dict(result)[0] == "even"
    assert dict(result)[-3] == "odd"


def test_update_name():
    person = Person("Govind", "L", ContactInfo("Chennai", "33"))
    person.update_name("Govindaraajan")
    assert person.first_name == "Govindaraajan"
    assert person.contact.city == "Chennai"


def test_person_default_contact_is_separate():
    first = Person()
    second = Person()
    first.contact.city = "Chennai"
    assert second.contact.city == ""


def test_main(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert "bmw M4" in lines
    assert "1  is odd" in lines
    assert lines[-1] == "Govind"