"""Star catalogue processing, sky geometry and camera logic for an interactive star map."""

__version__ = "0.1.0"