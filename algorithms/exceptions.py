# algorithms/exceptions.py

class GraphInvariantError(Exception):
    """Raised when an edge references a vertex the graph no longer has."""
    pass

class UnknownAlgorithmError(ValueError):
    """Raised when a run names an algorithm key that is not registered."""
    pass

class InvalidRunError(ValueError):
    """Raised when a run is requested with an empty graph or a bad source / target."""
    pass
