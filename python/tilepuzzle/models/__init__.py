from tilepuzzle.models.state import Direction, State

__all__ = ["Direction", "State"]
