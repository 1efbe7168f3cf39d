"""episodeguide - browse TV shows and episodes from the TVMaze catalog."""

__version__ = "0.1.0"
