"""Strip packing of rectangular parts with first-fit decreasing height heuristics."""

__version__ = "0.1.0"
__all__ = ["packing", "storage", "app"]