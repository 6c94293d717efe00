class IllegalStateError(RuntimeError):
    """Raised when an object is asked for something its state cannot provide.

    Signals a programming error in the caller rather than a recoverable
    condition, e.g. reading the payload of an envelope that carries none.
    """
