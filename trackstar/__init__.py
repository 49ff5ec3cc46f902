"""TrackStar: personal task and habit tracker API."""

__version__ = "1.0.0"
