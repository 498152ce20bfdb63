"""
Shared helpers for endpoint groups: payload conversion and file uploads.
"""

import contextlib
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from pydantic import BaseModel

from dhartisetu.gateway.client import RequestGateway

DEFAULT_LANGUAGE = "en"

# Part name used when an upload is given as raw bytes
DEFAULT_UPLOAD_NAME = "upload"


class EndpointGroup:
    """Base for a namespace of endpoints sharing one gateway."""

    def __init__(self, gateway: RequestGateway):
        self.gateway = gateway


def as_payload(data: Union[Dict[str, Any], BaseModel, None]) -> Any:
    """Convert a pydantic model to a JSON-ready dict; pass anything else through."""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return data


@contextlib.contextmanager
def upload_part(file: Any) -> Iterator[Any]:
    """
    Yield a value usable as a requests `files` entry.

    Accepts a path (opened for the duration of the call), raw bytes, a
    binary file object, or a (filename, content[, content_type]) tuple.
    """
    if isinstance(file, (str, Path)):
        path = Path(file)
        with path.open("rb") as fh:
            yield (path.name, fh)
    elif isinstance(file, (bytes, bytearray)):
        yield (DEFAULT_UPLOAD_NAME, bytes(file))
    else:
        yield file


def upload(
    endpoint, gateway: RequestGateway, file: Any, language: str = DEFAULT_LANGUAGE
) -> Any:
    """Send `file` and `language` as a multipart form to `endpoint`."""
    with upload_part(file) as part:
        return endpoint.call(
            gateway,
            body={"language": language or DEFAULT_LANGUAGE},
            files={"file": part},
        )
