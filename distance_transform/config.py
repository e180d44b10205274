# -----------------------------
# FILE: distance_transform/config.py
# -----------------------------

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Literal

from .utils import read_json, require

# Cost of a non-feature cell. f32(1e20), finite so that INF + dx*dx + dy*dy
# never overflows and still orders above every real squared distance.
INF = 100000002004087734272.0

Unreachable = Literal["sentinel", "inf", "raise"]
UNREACHABLE_MODES = ("sentinel", "inf", "raise")

@dataclass
class TransformConfig:
    inf: float = INF
    unreachable: Unreachable = "sentinel"  # how cells with no feature in reach are reported
    resolution: float = 1.0                # grid units -> output units (edt_from_occupancy only)

    def validate(self) -> "TransformConfig":
        is_number = isinstance(self.inf, (int, float)) and not isinstance(self.inf, bool)
        require(is_number and math.isfinite(self.inf) and self.inf > 0,
                f"inf sentinel must be a finite positive number, got {self.inf!r}")
        require(self.unreachable in UNREACHABLE_MODES,
                f"Unknown unreachable mode {self.unreachable!r}",
                hint=f"Use one of {', '.join(UNREACHABLE_MODES)}.")
        require(isinstance(self.resolution, (int, float)) and self.resolution > 0,
                f"resolution must be > 0, got {self.resolution!r}")
        return self

    def check_sentinel(self, width: int, height: int):
        """The sentinel has to dominate the largest squared distance the grid can hold."""
        reach = (max(width, 1) - 1) ** 2 + (max(height, 1) - 1) ** 2
        require(self.inf > reach,
                f"inf sentinel {self.inf!r} is not above the max squared distance {reach} of a {width}x{height} grid",
                hint="Use the default INF or a larger value.")

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "TransformConfig":
        known = {f.name for f in fields(TransformConfig)}
        unknown = sorted(set(raw) - known)
        require(not unknown, f"Unknown config keys: {unknown}")
        cfg = TransformConfig(**raw)
        if isinstance(cfg.inf, int) and not isinstance(cfg.inf, bool):
            cfg.inf = float(cfg.inf)
        return cfg.validate()

    @staticmethod
    def from_json(path: str) -> "TransformConfig":
        raw = read_json(path)
        # optional nesting under "transform"
        if "transform" in raw:
            require(isinstance(raw["transform"], dict), "'transform' in config must be an object")
            raw = raw["transform"]
        return TransformConfig.from_dict(raw)
