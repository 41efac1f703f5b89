class AudioMazeError(Exception):
    """Base exception for the Audio Maze project."""


class InvalidConfiguration(AudioMazeError, ValueError):
    """Raised when a game configuration (maze size, numeric option) is invalid.

    Raised synchronously before a session starts; the engine never recovers
    from it internally, the caller must supply a valid configuration.
    """
