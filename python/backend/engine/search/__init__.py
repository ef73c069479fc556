from backend.engine.search.astar import AStarSearch, SearchResult, SearchStatus, solve
from backend.engine.search.frontier import ClosedSet, Frontier
from backend.engine.search.path import reconstruct_path

__all__ = [
    "AStarSearch",
    "ClosedSet",
    "Frontier",
    "SearchResult",
    "SearchStatus",
    "reconstruct_path",
    "solve",
]
