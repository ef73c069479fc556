from backend.models.board import Board, Direction, InvalidBoardError
from backend.models.node import NodeArena, SearchNode

__all__ = ["Board", "Direction", "InvalidBoardError", "NodeArena", "SearchNode"]
