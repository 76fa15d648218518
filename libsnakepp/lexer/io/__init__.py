from .io import open_source_file_line_stream

__all__ = ["open_source_file_line_stream"]
