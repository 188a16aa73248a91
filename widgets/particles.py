# widgets/particles.py — hero background particles
# ----------------------------------------------------------
# Point masses bouncing inside the canvas, linked by faint lines
# when closer than LINK_DISTANCE. Rendered with matplotlib into a
# Streamlit placeholder, one figure per frame.
# ----------------------------------------------------------

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Circle

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]

PARTICLE_COUNT = 100
LINK_DISTANCE = 100.0
LINK_ALPHA = 0.1       # line opacity at distance 0, falls linearly to 0 at LINK_DISTANCE
LINK_WIDTH = 0.5
SIZE_RANGE = (1.0, 4.0)
SPEED_RANGE = (-0.5, 0.5)
ALPHA_RANGE = (0.2, 0.7)
BASE_RGB = (100 / 255, 217 / 255, 232 / 255)


# -----------------------------
# Drawing surface
# -----------------------------
class Surface(Protocol):
    def clear(self) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float, color: RGBA) -> None: ...
    def line(self, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float) -> None: ...


class FigureSurface:
    """Collects primitives for one frame, then builds a matplotlib figure in canvas
    coordinates (origin top-left, y grows downward)."""

    def __init__(self, width: int, height: int, dpi: int = 100):
        self.width = width
        self.height = height
        self.dpi = dpi
        self._circles: List[Tuple[float, float, float, RGBA]] = []
        self._lines: List[Tuple[Tuple[float, float], Tuple[float, float], RGBA, float]] = []

    def clear(self):
        self._circles.clear()
        self._lines.clear()

    def fill_circle(self, x, y, radius, color):
        self._circles.append((x, y, radius, color))

    def line(self, x0, y0, x1, y1, color, width):
        self._lines.append(((x0, y0), (x1, y1), color, width))

    def figure(self):
        fig = plt.figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        fig.patch.set_alpha(0.0); ax.set_facecolor("none")
        ax.set_xlim(0, self.width); ax.set_ylim(self.height, 0)
        ax.set_aspect("equal", adjustable="box"); ax.axis("off")
        if self._lines:
            segs = [(a, b) for a, b, _, _ in self._lines]
            ax.add_collection(LineCollection(
                segs,
                colors=[c for _, _, c, _ in self._lines],
                linewidths=[w for _, _, _, w in self._lines],
            ))
        if self._circles:
            ax.add_collection(PatchCollection(
                [Circle((x, y), r) for x, y, r, _ in self._circles],
                facecolors=[c for _, _, _, c in self._circles],
                edgecolors="none",
            ))
        return fig


# -----------------------------
# Simulation
# -----------------------------
@dataclass
class Particle:
    x: float
    y: float
    speed_x: float
    speed_y: float
    size: float
    color: RGBA

    @classmethod
    def spawn(cls, width: float, height: float, rng: np.random.Generator) -> "Particle":
        return cls(
            x=float(rng.uniform(0, width)),
            y=float(rng.uniform(0, height)),
            speed_x=float(rng.uniform(*SPEED_RANGE)),
            speed_y=float(rng.uniform(*SPEED_RANGE)),
            size=float(rng.uniform(*SIZE_RANGE)),
            color=(*BASE_RGB, float(rng.uniform(*ALPHA_RANGE))),
        )

    def update(self, width: float, height: float):
        # reflect before stepping, so the particle never leaves [0, bound]
        if not 0 <= self.x + self.speed_x <= width:
            self.speed_x = -self.speed_x
        if not 0 <= self.y + self.speed_y <= height:
            self.speed_y = -self.speed_y
        self.x += self.speed_x
        self.y += self.speed_y

    def draw(self, surface: Surface):
        surface.fill_circle(self.x, self.y, self.size, self.color)


class ParticleField:
    def __init__(self, width: float, height: float, count: int = PARTICLE_COUNT,
                 rng: Optional[np.random.Generator] = None):
        self.count = count
        self.rng = rng if rng is not None else np.random.default_rng()
        self.width = width
        self.height = height
        self.particles: List[Particle] = []
        self.seed()

    def seed(self):
        self.particles = [Particle.spawn(self.width, self.height, self.rng) for _ in range(self.count)]

    def resize(self, width: float, height: float):
        self.width, self.height = width, height
        self.seed()

    def step(self):
        for p in self.particles:
            p.update(self.width, self.height)

    def connections(self) -> List[Tuple[int, int, float]]:
        """(a, b, opacity) for every pair a <= b closer than LINK_DISTANCE.
        Self-pairs are included; they draw as zero-length lines."""
        if not self.particles:
            return []
        pos = np.array([[p.x, p.y] for p in self.particles])
        dist = np.linalg.norm(pos[:, None, :] - pos[None, :, :], axis=-1)
        close = np.triu(dist < LINK_DISTANCE)
        a_idx, b_idx = np.nonzero(close)
        return [
            (int(a), int(b), LINK_ALPHA * (1.0 - dist[a, b] / LINK_DISTANCE))
            for a, b in zip(a_idx, b_idx)
        ]

    def draw(self, surface: Surface):
        for p in self.particles:
            p.draw(surface)
        for a, b, opacity in self.connections():
            pa, pb = self.particles[a], self.particles[b]
            surface.line(pa.x, pa.y, pb.x, pb.y, (*BASE_RGB, opacity), LINK_WIDTH)


# -----------------------------
# Viewport + animation lifecycle
# -----------------------------
class Viewport:
    """Canvas size holder that notifies resize listeners."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._listeners: List[Callable[[int, int], None]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, fn: Callable[[int, int], None]):
        self._listeners.append(fn)

    def remove_listener(self, fn: Callable[[int, int], None]):
        if fn in self._listeners:
            self._listeners.remove(fn)

    def resize(self, width: int, height: int):
        if (width, height) == (self.width, self.height):
            return
        self.width, self.height = width, height
        for fn in list(self._listeners):
            fn(width, height)


class ParticleAnimation:
    def __init__(self, viewport: Viewport,
                 surface_factory: Callable[[int, int], Surface] = FigureSurface,
                 count: int = PARTICLE_COUNT,
                 rng: Optional[np.random.Generator] = None):
        self.viewport = viewport
        self.surface_factory = surface_factory
        self.count = count
        self.rng = rng
        self.surface: Optional[Surface] = None
        self.field: Optional[ParticleField] = None
        self.mounted = False

    def mount(self):
        w, h = self.viewport.width, self.viewport.height
        self.surface = self.surface_factory(w, h)
        self.field = ParticleField(w, h, self.count, self.rng)
        self.viewport.add_listener(self.resize)
        self.mounted = True
        logger.debug("particles mounted: %d on %dx%d", self.count, w, h)

    def resize(self, width: int, height: int):
        self.surface = self.surface_factory(width, height)
        self.field.resize(width, height)

    def frame(self) -> Surface:
        if not self.mounted:
            raise RuntimeError("animation is not mounted")
        self.surface.clear()
        self.field.step()
        self.field.draw(self.surface)
        return self.surface

    def unmount(self):
        self.mounted = False
        self.viewport.remove_listener(self.resize)

    def run(self, present: Callable[[Surface], None], wait: Callable[[], None],
            max_frames: Optional[int] = None) -> int:
        """Draw, present, yield; repeat until unmounted. Returns frames drawn."""
        frames = 0
        while self.mounted and (max_frames is None or frames < max_frames):
            present(self.frame())
            frames += 1
            wait()
        return frames


# -----------------------------
# Streamlit driver
# -----------------------------
def play_hero(placeholder, viewport: Viewport, animate: bool = True, fps: int = 12,
              seed: Optional[int] = None):
    """Run the hero animation into an st.empty() placeholder.

    Call this last in the script: the loop only ends when Streamlit interrupts
    the run (rerun / session end), and the finally block tears it down.
    """
    anim = ParticleAnimation(viewport, rng=np.random.default_rng(seed))
    anim.mount()

    def present(surface: FigureSurface):
        fig = surface.figure()
        placeholder.pyplot(fig, use_container_width=True, transparent=True)
        plt.close(fig)

    try:
        if animate:
            anim.run(present, lambda: time.sleep(1.0 / fps))
        else:
            present(anim.frame())
    finally:
        anim.unmount()
