"""Engine exceptions."""


class UnoError(Exception):
    """Base class for engine errors."""


class SetupError(UnoError):
    """Not enough players or cards to start a game."""


class DeckExhaustedError(UnoError):
    """More cards were requested than the draw pile holds."""


class ProtocolViolation(UnoError, ValueError):
    """A player chose a card the engine did not offer."""


class GameOverError(UnoError):
    """A turn was requested after the game was won."""
