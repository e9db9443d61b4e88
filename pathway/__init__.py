"""Learning-path progression and gamification for organization training programmes."""

__version__ = "0.0.1"
