"""Inline local image assets as data URIs so the PDF renderer needs no HTTP fetch."""

import base64
import re
from pathlib import Path

from ..config.constants import ASSET_MIME_TYPES, DEFAULT_ASSET_MIME_TYPE
from ..utils.logger import get_logger
from ..utils.exceptions import AssetResolutionError

logger = get_logger(__name__)

_REMOTE_RE = re.compile(r"^https?:", re.IGNORECASE)


def is_inlinable(reference: str) -> bool:
    """Local paths are inlinable; remote URLs and data URIs are not."""
    return not (_REMOTE_RE.match(reference) or reference.startswith("data:"))


def resolve_local_path(reference: str, root: Path) -> Path:
    """
    Map a reference to a file on disk.

    ``/logo.png`` is looked up under ``<root>/public``; anything else is
    relative to ``root``.
    """
    if reference.startswith("/"):
        return root / "public" / reference.lstrip("/")
    return root / reference


def mime_type_for(path: Path) -> str:
    return ASSET_MIME_TYPES.get(path.suffix.lstrip(".").lower(), DEFAULT_ASSET_MIME_TYPE)


def encode_data_uri(path: Path) -> str:
    """
    Read a file and encode it as a base64 data URI.

    Raises:
        AssetResolutionError: If the file is missing or unreadable
    """
    try:
        payload = base64.b64encode(path.read_bytes()).decode("ascii")
    except (OSError, ValueError) as e:
        raise AssetResolutionError(f"Failed to read asset {path}: {e}") from e
    return f"data:{mime_type_for(path)};base64,{payload}"


def inline_local_asset(reference: str | None, default: str, root: Path | None = None) -> str:
    """
    Best-effort conversion of a local image reference into a data URI.

    Args:
        reference: URL, local path, or data URI (falls back to default when empty)
        default: Reference used when none is given
        root: Directory local paths resolve against (defaults to cwd)

    Returns:
        Data URI when the local file could be read, otherwise the unmodified reference
    """
    effective = reference or default
    if not effective or not is_inlinable(effective):
        return effective

    path = resolve_local_path(effective, root or Path.cwd())
    try:
        return encode_data_uri(path)
    except AssetResolutionError as e:
        logger.debug(f"Keeping asset reference as-is: {e}")
        return effective
