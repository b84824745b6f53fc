import pytest

from chemdesc.core.services.class_value_lookup import (
    ClassValueLookup,
    format_class_label,
    generate_class_values,
)
from chemdesc.exceptions import UnknownClassLabelError


def test_generated_table_is_total_and_monotonic():
    lookup = ClassValueLookup()

    assert len(lookup) == 100
    assert lookup.labels[0] == "05_0"
    assert lookup.labels[-1] == "14_9"
    assert lookup["05_0"] == pytest.approx(5.05)
    assert lookup.value_of("10_5") == pytest.approx(10.55)
    for k, label in enumerate(lookup.labels):
        assert lookup[label] == 5.05 + 0.1 * k
    values = [lookup[label] for label in lookup.labels]
    assert values == sorted(values)


def test_generator_is_reproducible():
    first = list(generate_class_values())
    second = list(generate_class_values())
    assert first == second
    assert first[11] == ("06_1", 5.05 + 0.1 * 11)


def test_custom_ranges():
    pairs = list(generate_class_values(bins=[1, 2], subbins=[0, 5], base=0.0, step=1.0))
    assert pairs == [("01_0", 0.0), ("01_5", 1.0), ("02_0", 2.0), ("02_5", 3.0)]


def test_unknown_label():
    lookup = ClassValueLookup()
    with pytest.raises(UnknownClassLabelError):
        lookup.value_of("15_0")
    with pytest.raises(UnknownClassLabelError):
        lookup["5_0"]
    assert "15_0" not in lookup
    assert lookup.get("15_0") is None


def test_table_is_read_only():
    lookup = ClassValueLookup()
    with pytest.raises(TypeError):
        lookup["05_0"] = 1.0


def test_label_format():
    assert format_class_label(5, 3) == "05_3"
    assert format_class_label(14, 9) == "14_9"
