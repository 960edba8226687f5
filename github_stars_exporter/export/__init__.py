from .exporter import export_current, export_stars
from .serialize import serialize, to_csv, to_json
from .sink import FileSink, StreamSink

__all__ = ["export_current", "export_stars", "serialize", "to_csv", "to_json", "FileSink", "StreamSink"]
