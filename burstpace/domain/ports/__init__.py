"""Domain ports - interfaces for infrastructure to implement."""

from .data_source import DataSource
from .output_sink import OutputSink

__all__ = [
    "OutputSink",
    "DataSource",
]
