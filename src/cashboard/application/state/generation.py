"""Generation tokens for discarding out-of-order responses."""


class GenerationCounter:
    """Monotonic token source for one family of fetches.

    Take a token before issuing a request and apply the response only if
    ``is_current(token)`` still holds when it arrives.
    """

    def __init__(self) -> None:
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def next(self) -> int:
        self._current += 1
        return self._current

    def invalidate(self) -> None:
        """Supersede every token handed out so far."""
        self._current += 1

    def is_current(self, token: int) -> bool:
        return token == self._current
