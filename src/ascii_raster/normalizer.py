"""Turn summed intensities into per-cell averages."""

import numpy as np


def normalize(sums: np.ndarray, row_counts: np.ndarray) -> np.ndarray:
    """
    sums: HxW summed intensities
    row_counts: H contributions per row
    returns HxW float64 averages; rows nobody contributed to stay 0
    """
    counts = np.asarray(row_counts, dtype=np.float64)
    out = np.array(sums, dtype=np.float64, copy=True)
    filled = counts > 0
    out[filled] /= counts[filled][:, None]
    return out
