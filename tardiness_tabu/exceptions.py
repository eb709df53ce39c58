class TabuSearchError(Exception):
    """Base class for errors raised by the tardiness tabu search package."""

    pass


class ConfigError(TabuSearchError, ValueError):
    """Raised when a run configuration value is missing or invalid."""

    pass


class TabuConfigError(ConfigError):
    """Raised when the tabu list is long enough to forbid every adjacent swap."""

    pass


class SearchError(TabuSearchError):
    """Raised when the search loop cannot continue."""

    pass


class NoAdmissibleMoveError(SearchError):
    """Raised when every adjacent swap is tabu and the no-move policy is FAIL."""

    def __init__(self, iteration: int):
        super().__init__(f"No admissible (non-tabu) move at iteration {iteration}")
        self.iteration = iteration
