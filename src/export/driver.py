"""
Export driver: turns records into a downloadable CSV artifact.

Host collaborators (download and print) are injected, never looked up
globally, so tests can substitute in-memory recorders.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

from src.observability.logger import get_logger, log_operation

from .columns import FieldColumn, FormattedColumn
from .csv_generator import generate_csv

logger = get_logger(__name__)

DEFAULT_MIME_TYPE = "text/csv;charset=utf-8"


class ArtifactHost(Protocol):
    """
    Host-side artifact registry.

    ``create_artifact`` acquires a transient handle for the content,
    ``trigger_download`` materializes it under a file name (and may raise
    if the host refuses), ``release_artifact`` frees the handle.
    """

    def create_artifact(self, content: bytes, mime_type: str) -> Any: ...

    def trigger_download(self, handle: Any, filename: str) -> None: ...

    def release_artifact(self, handle: Any) -> None: ...


def download_file(
    content: str | bytes,
    filename: str,
    host: ArtifactHost,
    mime_type: str = DEFAULT_MIME_TYPE,
) -> None:
    """
    Hand finished content to the host as a named download.

    The handle is released on every exit path, including when the host's
    download trigger raises.
    """
    payload = content.encode("utf-8") if isinstance(content, str) else content

    handle = host.create_artifact(payload, mime_type)
    try:
        host.trigger_download(handle, filename)
    finally:
        host.release_artifact(handle)


def export_to_csv(
    records: Iterable[Any],
    columns: Sequence[FieldColumn | FormattedColumn],
    filename: str,
    host: ArtifactHost,
    mime_type: str = DEFAULT_MIME_TYPE,
) -> None:
    """
    Generate CSV for ``records`` and download it as ``filename``.

    Generation completes before the host is touched, so a failing formatter
    leaves no artifact behind. The completion log line carries the encoded
    size as ``size_bytes``.
    """
    records = list(records)
    with log_operation(
        "Exporting CSV",
        logger=logger,
        artifact_name=filename,
        row_count=len(records),
        column_count=len(columns),
    ) as operation:
        payload = generate_csv(records, columns).encode("utf-8")
        operation.extra_fields["size_bytes"] = len(payload)
        download_file(payload, filename, host, mime_type)


def trigger_print(printer: Callable[[], None]) -> None:
    """Ask the host to print the current view."""
    printer()
