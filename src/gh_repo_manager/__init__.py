"""List and clone the repositories of a GitHub owner through `gh` and `git`."""

__version__ = "1.0.0"
