"""Cultural Story Scenes: four illustrated scenes from a single story topic."""

__version__ = "0.1.0"
