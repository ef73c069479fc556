from backend.engine.heuristic.manhattan import goal_positions, manhattan_distance

__all__ = ["goal_positions", "manhattan_distance"]
