from backend.engine.solvability.parity import inversion_count, is_solvable, same_class

__all__ = ["inversion_count", "is_solvable", "same_class"]
