class _State:
    """Structural version counter, bumped on every mutation."""

    def __init__(self):
        self.version = 0
        self._backend_cache = {}

    def bump(self):
        self.version += 1
        return self.version

    def dirty_since(self, version: int) -> bool:
        return self.version > version
