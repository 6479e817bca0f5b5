from barbell_weights.configuration import ConfigurationSpace
from barbell_weights.dedup import deduplicate
from barbell_weights.precision import format_decimal


def _weights(configs):
    return [float(c.weight_value) for c in configs]


def test_dedup_sorts_and_collapses_equal_weights():
    configs = deduplicate(ConfigurationSpace.from_values([1, 1], 45))
    assert _weights(configs) == [45.0, 47.0, 49.0]
    assert [c.plate_count for c in configs] == [0, 1, 2]


def test_dedup_keeps_fewest_plates():
    configs = deduplicate(ConfigurationSpace.from_values([2, 3, 5], 45))
    assert _weights(configs) == [45.0, 49.0, 51.0, 55.0, 59.0, 61.0, 65.0]
    fifty_five = configs[3]
    assert fifty_five.plate_count == 1
    assert [format_decimal(p) for p in fifty_five.sorted_plates()] == ["5"]


def test_dedup_is_exact_for_fractional_plates():
    configs = deduplicate(ConfigurationSpace.from_values([0.1, 0.2, 0.3], 0))
    assert len(configs) == 7
    weights = [c.weight for c in configs]
    assert all(a < b for a, b in zip(weights, weights[1:]))
    point_six = [c for c in configs if format_decimal(c.weight_value) == "0.6"]
    assert len(point_six) == 1
    assert point_six[0].plate_count == 1


def test_dedup_output_is_strictly_increasing():
    configs = deduplicate(ConfigurationSpace.from_values([2.5, 2.5, 5, 10, 10, 25], 45))
    weights = [c.weight for c in configs]
    assert weights == sorted(set(weights))


def test_dedup_of_nothing():
    assert deduplicate([]) == []
