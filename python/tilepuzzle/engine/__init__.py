from tilepuzzle.engine.heuristic import Heuristic, manhattan
from tilepuzzle.engine.moves import direction_between, moves, path_directions, successors
from tilepuzzle.engine.scrambler import Scrambler, is_solvable
from tilepuzzle.engine.search import Found, IDAStar, Pruned, SearchStats, ida_star_search
from tilepuzzle.engine.session import SolveSession

__all__ = [
    "Found",
    "Heuristic",
    "IDAStar",
    "Pruned",
    "Scrambler",
    "SearchStats",
    "SolveSession",
    "direction_between",
    "ida_star_search",
    "is_solvable",
    "manhattan",
    "moves",
    "path_directions",
    "successors",
]
