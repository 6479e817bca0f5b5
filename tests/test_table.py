import csv
import os
from decimal import Decimal

import numpy as np
import pytest

from barbell_weights.configuration import ConfigurationSpace
from barbell_weights.dedup import deduplicate
from barbell_weights.table import WeightOption, WeightTable, steps_filename


def _table(plates, min_step=2.0):
    configs = deduplicate(ConfigurationSpace.from_values(plates, 45))
    return WeightTable.from_configurations(configs, bar=Decimal(45), min_step=min_step)


def test_labels_list_sorted_plates():
    table = _table([25, 5, 10])
    assert [option.label() for option in table.options] == [
        "45 ()",
        "55 (5)",
        "65 (10)",
        "75 (5, 10)",
        "95 (25)",
        "105 (5, 25)",
        "115 (10, 25)",
        "125 (5, 10, 25)",
    ]


def test_fractional_labels():
    option = WeightOption(weight=Decimal("52.50"), plate_count=2, plates=(Decimal("1.25"), Decimal("2.5")))
    assert option.label() == "52.5 (1.25, 2.5)"


def test_numpy_views():
    table = _table([5, 10])
    np.testing.assert_allclose(table.weights, [45.0, 55.0, 65.0, 75.0])
    np.testing.assert_array_equal(table.plate_counts, [0, 1, 1, 2])
    assert table.steps() == pytest.approx([10.0, 10.0, 10.0])


def test_to_text_joins_lines():
    table = _table([5])
    assert table.to_text() == os.linesep.join(["45 ()", "55 (5)"])


def test_write_text_ends_with_newline(tmp_path):
    path = tmp_path / "out" / "steps_2.0.txt"
    _table([5]).write_text(path)
    assert path.read_text().splitlines() == ["45 ()", "55 (5)"]
    assert path.read_bytes().endswith(os.linesep.encode())


def test_to_csv(tmp_path):
    path = tmp_path / "steps_2.0.csv"
    _table([2.5, 5]).to_csv(path)
    with path.open(newline="") as csv_file:
        rows = list(csv.reader(csv_file))
    assert rows[0] == ["weight", "plate_count", "plates"]
    assert rows[1] == ["45", "0", ""]
    assert rows[-1] == ["60", "2", "2.5 5"]


def test_steps_filename():
    assert steps_filename(2) == "steps_2.0.txt"
    assert steps_filename(2.5, ".csv") == "steps_2.5.csv"


def test_summary_reports_bar_and_step():
    table = _table([5, 10], min_step=2.5)
    assert table.summary() == "bar 45, min step 2.5: 4 weights"
