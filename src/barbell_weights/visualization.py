"""Plotting utilities for weight tables."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from .table import WeightTable


def plot_weight_ladder(tables: Sequence[WeightTable], output_path: Path) -> None:
    """Plot the kept weights of each table on its own row, coloured by plate count."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 1.2 + 0.8 * max(len(tables), 1)))
    max_plates = max((int(t.plate_counts.max()) for t in tables if len(t)), default=0)

    scatter = None
    for row, table in enumerate(tables):
        weights = table.weights
        if weights.size == 0:
            continue
        scatter = ax.scatter(
            weights,
            np.full(weights.shape, row),
            c=table.plate_counts,
            cmap="viridis",
            vmin=0,
            vmax=max(max_plates, 1),
            s=40,
        )

    ax.set_yticks(range(len(tables)))
    ax.set_yticklabels([f"step {t.min_step:g}" for t in tables])
    ax.set_title("Achievable barbell weights")
    ax.set_xlabel("Total weight")
    ax.grid(True, axis="x", linestyle="--", alpha=0.4)
    if scatter is not None:
        fig.colorbar(scatter, ax=ax, label="Plates per side")

    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
