"""Grid shortest-path worker and string distance kernels."""

__version__ = "0.1.0"
