"""Helpers shared by the test modules."""

import io
import logging

from fastapi import UploadFile
from starlette.datastructures import Headers


def make_upload(data: bytes, filename: str = "shoe.png", content_type: str = "image/png") -> UploadFile:
    """Build an UploadFile the way FastAPI hands it to an endpoint."""
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class RecordingHandler(logging.Handler):
    """Collects log records emitted on the logger it is attached to."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)
