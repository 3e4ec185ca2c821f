"""A night-sky screen saver with stars, a moon, a space ship, an astronaut, worms and a clock."""

__version__ = "1.0.0"