"""Record sources feeding the grouped list engine."""

from .json_file import RecordPage, RecordSourceError, load_page, page_from_payload

__all__ = ["RecordPage", "RecordSourceError", "load_page", "page_from_payload"]
