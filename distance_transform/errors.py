# -----------------------------
# FILE: distance_transform/errors.py
# -----------------------------

class DTError(Exception):
    """Base class for all distance transform errors with a stable error code."""
    code: str = "DT_ERROR"
    hint: str = ""

    def __init__(self, message: str = "", *, hint: str = ""):
        super().__init__(message)
        if hint:
            self.hint = hint

    def __str__(self):
        base = super().__str__()
        if self.hint:
            return f"[{self.code}] {base} | Hint: {self.hint}"
        return f"[{self.code}] {base}"

class ConfigError(DTError):
    code = "CFG_BAD"

class GridIndexError(DTError, IndexError):
    code = "GRID_OOB"

class GridShapeError(DTError, ValueError):
    code = "GRID_SHAPE"

class NoFeatureError(DTError):
    code = "NO_FEATURE"
