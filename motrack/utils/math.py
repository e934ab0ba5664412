"""Distance helpers. Both are public: `euclidean` for one pair, `pairwise_distances` for a whole layout."""
import math
import numpy as np

def euclidean(p, q) -> float:
    """Distance between two (x, y) points."""
    return math.hypot(float(p[0]) - float(q[0]), float(p[1]) - float(q[1]))

def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """Condensed upper-triangle distances, length N*(N-1)/2 (same order as scipy pdist)."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    i, j = np.triu_indices(pts.shape[0], k=1)
    return np.linalg.norm(pts[i] - pts[j], axis=1)
