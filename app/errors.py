# app/errors.py


class InvalidState(RuntimeError):
    """A session transition was invoked outside the state it is valid from."""

    def __init__(self, operation: str, state):
        self.operation = operation
        self.state = state
        name = getattr(state, "value", state)
        super().__init__(f"cannot {operation}() while session is {name}")


class CorpusError(Exception):
    """Problem texts could not be loaded."""
