import pytest

from shoggoth.func import func_relu
from shoggoth.layer import Layer, LayerError
from shoggoth.layer_list import LayerList
from shoggoth.shape import Size3


def make_layer(layer_id, count=3):
    return Layer(None, layer_id).set_size(Size3(count, 1, 1))


def make_list(*ids, count=3):
    layers = LayerList(None)
    for layer_id in ids:
        layers.push(make_layer(layer_id, count))
    return layers


def test_push_keeps_order():
    layers = make_list("a", "b", "c")
    assert [layer.id for layer in layers] == ["a", "b", "c"]
    assert len(layers) == 3


def test_index_and_get_by_id():
    layers = make_list("a", "b")
    assert layers.index_by_id("b") == 1
    assert layers.get_by_id("a") is layers[0]


def test_missing_id():
    layers = make_list("a")
    assert layers.index_by_id("zzz") is None
    assert layers.get_by_id("zzz") is None


def test_extend_appends_other_list():
    first = make_list("a")
    second = make_list("b", "c")
    first.extend(second)
    assert [layer.id for layer in first] == ["a", "b", "c"]


def test_remove_returns_layer():
    layers = make_list("a", "b", "c")
    removed = layers.remove(1)
    assert removed.id == "b"
    assert [layer.id for layer in layers] == ["a", "c"]
    assert removed not in layers


def test_remove_out_of_range():
    layers = make_list("a")
    with pytest.raises(IndexError):
        layers.remove(5)


def test_clear_empties_list():
    layers = make_list("a", "b")
    layers.clear()
    assert len(layers) == 0
    assert layers.get_by_id("a") is None


def test_compare_equal_structures():
    assert make_list("a", "b").compare(make_list("b", "a")) is True


def test_compare_different_count():
    assert make_list("a", "b").compare(make_list("a")) is False


def test_compare_missing_id():
    assert make_list("a", "b").compare(make_list("a", "c")) is False


def test_compare_different_function():
    left = make_list("a")
    right = make_list("a")
    right[0].front_func = func_relu
    assert left.compare(right) is False


def test_compare_different_size():
    assert make_list("a", count=2).compare(make_list("a", count=4)) is False


def test_copy_values_from_matching_ids():
    source = make_list("a", "x")
    source.get_by_id("a").set_neuron_value(1, 2.5)
    target = make_list("a", "b")
    target.copy_values_from(source)
    assert target.get_by_id("a").get_neuron_value(1) == 2.5
    assert target.get_by_id("b").calc_sum_value() == 0.0


def test_copy_errors_from_matching_ids():
    source = make_list("a")
    source.get_by_id("a").set_neuron_error(0, -1.5)
    target = make_list("a")
    target.copy_errors_from(source)
    assert target.get_by_id("a").get_neuron_error(0) == -1.5
    assert target.get_by_id("a").calc_sum_error() == source.get_by_id("a").calc_sum_error()


def test_copy_values_size_mismatch_raises():
    source = make_list("a", count=2)
    target = make_list("a", count=3)
    with pytest.raises(LayerError) as info:
        target.copy_values_from(source)
    assert info.value.code == "LayersValuePlanNotEquals"


def test_setitem_replaces_layer():
    layers = make_list("a")
    replacement = make_layer("z")
    layers[0] = replacement
    assert layers.get_by_id("z") is replacement
    assert layers.index_by_id("a") is None