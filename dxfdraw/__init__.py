"""Read and write ASCII DXF drawings."""

__version__ = "0.1.0"