from dataclasses import dataclass, fields
from typing import Optional, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class MazeConfig:
    # Defaults mirror the command line.
    width: int = 5
    height: int = 5
    seed: Optional[int] = None
    algorithm: str = "aldous-broder"
    cell_size: int = 10
    wall_size: int = 1
    background_color: RGB = (255, 255, 255)
    wall_color: RGB = (0, 0, 0)

    @classmethod
    def from_args(cls, args) -> "MazeConfig":
        """Build from an argparse namespace; missing attributes keep their defaults."""
        values = {}
        for f in fields(cls):
            v = getattr(args, f.name, None)
            if v is not None:
                values[f.name] = v
        return cls(**values)


DEFAULTS = MazeConfig()
