from decimal import Decimal

from barbell_weights.calculator import WeightCalculator, WeightCalculatorConfig
from barbell_weights.table import WeightTable
from barbell_weights.visualization import plot_weight_ladder


def test_plot_weight_ladder(tmp_path):
    tables = [
        WeightCalculator(WeightCalculatorConfig(min_step=step)).calculate([2.5, 5, 10])
        for step in (1.0, 10.0)
    ]
    path = tmp_path / "plots" / "ladder.png"
    plot_weight_ladder(tables, path)
    assert path.exists()


def test_plot_handles_empty_table(tmp_path):
    empty = WeightTable(options=[], bar=Decimal(45), min_step=2.0)
    path = tmp_path / "empty.png"
    plot_weight_ladder([empty], path)
    assert path.exists()
