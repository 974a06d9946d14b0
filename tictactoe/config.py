"""
Game configuration for console TicTacToe.
All the symbols, messages and defaults used by the engine and the console loop.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Messages printed to the console live here so the engine and the
    loop agree on the exact wording.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (fixed, never resized)
    BOARD_SIZE = 3

    # ==================== SYMBOLS ====================
    X_SYMBOL = "X"
    O_SYMBOL = "O"
    EMPTY_SYMBOL = "."

    # ==================== TURN SETTINGS ====================
    # Player that moves first ("X" or "O")
    FIRST_PLAYER = "O"

    # ==================== INPUT ====================
    COORDINATE_SEPARATOR = ","
    # Largest coordinate that parses as a number (unsigned 64-bit);
    # anything bigger is "Invalid number" rather than off the board
    MAX_COORDINATE = 2 ** 64 - 1
    PROMPT = (
        'Player {player}. Make your move by entering the "row,col" '
        'of the square you want to play'
    )

    # ==================== ERROR MESSAGES ====================
    OUT_OF_BOUNDS_MESSAGE = "Invalid coordinates"
    CELL_OCCUPIED_MESSAGE = "This square is already filled"
    MALFORMED_INPUT_MESSAGE = "Invalid number of inputs"
    NOT_A_NUMBER_MESSAGE = "Invalid number"

    # ==================== RESULT MESSAGES ====================
    DRAW_MESSAGE = "Game ends in draw"
    WINNER_MESSAGE = "Player {player} wins!"
    INTERRUPTED_MESSAGE = "Game interrupted by user."
    GOODBYE_MESSAGE = "Goodbye!"
