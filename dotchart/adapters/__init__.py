from .normalize import normalize_points, sample_function

__all__ = ["normalize_points", "sample_function"]
