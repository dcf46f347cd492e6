"""
Identity pool loading
Reads the line-delimited list of caller identities, fresh on every request
"""
import logging
from pathlib import Path
from typing import List

from errors import EmptyPool, ResourceUnavailable

logger = logging.getLogger(__name__)


def parse_identities(text: str) -> List[str]:
    """Split text into trimmed, non-empty identities (order preserved)"""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_identity_pool(path: str) -> List[str]:
    """
    Load the identity pool from a text file.

    Args:
        path: File path, relative paths resolve against the working directory

    Returns:
        Ordered list of identities

    Raises:
        ResourceUnavailable: file missing or unreadable
        EmptyPool: no usable identities after filtering
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"[IDENTITY_POOL] Cannot read {file_path}: {e}")
        raise ResourceUnavailable(f"Could not read {file_path.name}: {e}") from e

    identities = parse_identities(text)
    if not identities:
        logger.error(f"[IDENTITY_POOL] No identities in {file_path}")
        raise EmptyPool(f"No user IDs found in {file_path.name}")

    logger.info(f"[IDENTITY_POOL] Loaded {len(identities)} identities from {file_path.name}")
    return identities
