"""Read the header of .cub scene files: wall texture paths and floor and ceiling colours."""

__version__ = "0.1.0"