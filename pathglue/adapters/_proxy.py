class BackendProxy:
    """
    Attribute gateway from a pathglue graph to a converted library graph.

    ``G.nx.shortest_path(1, 5)`` resolves ``shortest_path`` on the networkx
    module and calls it with the converted DiGraph as first argument. Names
    the module does not define (``number_of_edges``, ``successors`` ...) are
    looked up on the DiGraph instead.

    The conversion is taken once, at proxy creation; ask the graph for a new
    proxy after mutating it.
    """

    def __init__(self, graph, library):
        from .manager import ensure_materialized

        self._entry = ensure_materialized(library, graph)

    @property
    def graph(self):
        """The converted graph, e.g. a ``networkx.DiGraph``."""
        return self._entry["graph"]

    def __getattr__(self, name):
        converted = self._entry["graph"]
        func = getattr(self._entry["module"], name, None)
        if not callable(func):
            return getattr(converted, name)

        def call(*args, **kwargs):
            return func(converted, *args, **kwargs)

        call.__name__ = name
        return call
