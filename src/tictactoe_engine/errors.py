"""Error values and exceptions raised by the rules engine."""

OCCUPIED_CELL_MESSAGE = "Error: cell is not empty !"


class InvalidPositionError(ValueError):
    """Raised when a coordinate falls outside the 3x3 board."""
