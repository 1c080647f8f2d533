"""
Engine configuration for TicTacToe.
Board geometry, player marks and the text notation used for boards.
"""


class EngineConfig:
    """
    Configuration class for the game engine.
    These are fixed for the lifetime of the process.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # Value stored in the grid for an empty cell
    EMPTY_CODE = 0

    # ==================== PLAYER SETTINGS ====================
    # Marks used in the text notation and in Player values
    HUMAN_MARK = "x"
    COMPUTER_MARK = "o"

    # Which player starts round 1; rounds alternate after that
    HUMAN_STARTS_FIRST = True

    # ==================== NOTATION SETTINGS ====================
    # A board is written as 9 characters, row by row, e.g. "xo./.x./..o"
    EMPTY_MARK = "."
    # Characters ignored when parsing (row separators and spacing)
    NOTATION_SEPARATORS = "/| \t\n"
