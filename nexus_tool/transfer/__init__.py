"""Transfer operations: tree and single-file downloads and uploads."""

from .download import MirrorSink, download_single, download_tree
from .mirror import ensure_local_directory, mirror_path
from .reporting import generate_transfer_report
from .upload import iter_local_files, remote_path_for, upload_single, upload_tree

__all__ = [
    "MirrorSink",
    "download_single",
    "download_tree",
    "ensure_local_directory",
    "mirror_path",
    "generate_transfer_report",
    "iter_local_files",
    "remote_path_for",
    "upload_single",
    "upload_tree",
]
