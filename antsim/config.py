"""Simulation settings and the user configuration file."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from antsim.paths import conf_path

Color = Tuple[int, int, int, int]

ANT_COLOR: Color = (255, 73, 68, 255)
FOOD_COLOR: Color = (66, 153, 66, 255)
TO_FOOD_COLOR: Color = (0, 255, 0, 255)
TO_HOME_COLOR: Color = (255, 0, 0, 255)
COLONY_COLOR: Color = ANT_COLOR
WALL_COLOR: Color = (114, 107, 107, 255)

MAX_COLONIES_COUNT = 4
COLONY_COLORS: Tuple[Color, ...] = (
    (255, 0, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 0, 255),
    (50, 255, 255, 255),
)

_DEFAULT_WIN_HEIGHT = 1080

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    """Leading decimal number of ``text``, or 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _uint32(value: int) -> int:
    return value & 0xFFFFFFFF


@dataclass
class Config:
    """Window, world and population settings."""

    win_width: int = 1920
    win_height: int = 1080
    world_width: int = 1920
    world_height: int = 1080
    ants_count: int = 3000
    colony_size: float = 20.0
    marker_intensity: float = 8000.0
    use_fullscreen: int = 1
    gui_scale: float = 1.0

    def colony_position(self) -> Tuple[float, float]:
        """Default colony position, centred on the default window height."""
        return (500.0, _DEFAULT_WIN_HEIGHT * 0.5)

    def load_user_conf(self, path: Optional[str] = None) -> None:
        """Read settings from ``path``; raises ``OSError`` if it cannot be opened.

        Lines starting with ``#`` are skipped; the remaining lines give, in
        order, window width, window height, fullscreen flag, GUI scale and
        the maximum ants count per colony.
        """
        path = conf_path() if path is None else path
        with open(path, encoding="utf-8", errors="replace") as conf_file:
            text = conf_file.read()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        data_lines = (line for line in lines if not line.startswith("#"))
        for position, line in enumerate(data_lines):
            if position == 0:
                self.win_width = _uint32(_atoi(line))
            elif position == 1:
                self.win_height = _uint32(_atoi(line))
            elif position == 2:
                self.use_fullscreen = _uint32(_atoi(line))
            elif position == 3:
                self.gui_scale = _atof(line)
            elif position == 4:
                self.ants_count = _uint32(_atoi(line))

    def defaults_text(self) -> str:
        """The configuration file contents describing the current settings."""
        return (
            f"# Window width\n{self.win_width}\n"
            f"# Window height\n{self.win_height}\n"
            f"# Window mode 0 -> Windowed, 1 -> Fullscreen\n{self.use_fullscreen}\n"
            f"# GUI scale\n{self.gui_scale:g}\n"
            f"# Maximum ants count per colony\n{self.ants_count}\n"
        )

    def write_defaults(self, path: Optional[str] = None) -> None:
        """Write the current settings to ``path``."""
        path = conf_path() if path is None else path
        with open(path, "w", encoding="utf-8") as out:
            out.write(self.defaults_text())

    def load_or_create(self, path: Optional[str] = None) -> bool:
        """Load the user configuration, or write one with the current settings.

        Returns True when a configuration was read.
        """
        path = conf_path() if path is None else path
        try:
            self.load_user_conf(path)
            return True
        except OSError:
            pass
        print(f"No conf.txt found, writing defaults to: {path}")
        try:
            self.write_defaults(path)
        except OSError:
            print(f"Failed to write conf.txt to: {path}")
            return False
        print(f"Created default configuration file: {path}")
        return False