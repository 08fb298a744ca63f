"""
Sentiment Engine - Model Snapshot Persistence.

A snapshot file is a JSON envelope around the classifier's own
snapshot dictionary:

    {
        "schema_version": 1,
        "saved_at": "...",
        "checksum": "<sha256 of the canonical model JSON>",
        "metadata": {...},
        "model": {...}
    }

Loading verifies the schema version and the checksum before the
classifier is rebuilt.
"""

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from .classifier import SNAPSHOT_SCHEMA_VERSION, NaiveBayesClassifier
from .exceptions import SnapshotError


logger = logging.getLogger(__name__)


PathLike = Union[str, Path]


def compute_checksum(model: dict[str, Any]) -> str:
    canonical = json.dumps(model, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def save_snapshot(
    classifier: NaiveBayesClassifier,
    path: PathLike,
    metadata: Optional[dict[str, Any]] = None,
) -> Path:
    """Write a trained classifier to `path`. Parent directories are created."""
    model = classifier.to_snapshot()
    envelope = {
        "schema_version": SNAPSHOT_SCHEMA_VERSION,
        "saved_at": datetime.utcnow().isoformat(),
        "checksum": compute_checksum(model),
        "metadata": dict(metadata or {}),
        "model": model,
    }

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(envelope, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise SnapshotError(f"Failed to write snapshot: {e}", path=str(target)) from e

    logger.info(
        f"Model snapshot saved to {target} "
        f"(vocabulary={len(model['vocabulary'])}, documents={model['total_documents']})"
    )
    return target


def load_snapshot(path: PathLike, max_workers: int = 4) -> NaiveBayesClassifier:
    """
    Rebuild a classifier from a snapshot file.

    Raises:
        SnapshotError: unreadable file, unsupported schema, checksum
            mismatch or malformed model data
    """
    source = Path(path)
    try:
        with open(source, "r", encoding="utf-8") as f:
            envelope = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Failed to read snapshot: {e}", path=str(source)) from e

    if not isinstance(envelope, dict) or not isinstance(envelope.get("model"), dict):
        raise SnapshotError("Snapshot file has no model section", path=str(source))

    version = envelope.get("schema_version")
    if version != SNAPSHOT_SCHEMA_VERSION:
        raise SnapshotError(
            f"Unsupported snapshot schema version: {version!r}",
            path=str(source),
            schema_version=version,
        )

    model = envelope["model"]
    if envelope.get("checksum") != compute_checksum(model):
        raise SnapshotError("Snapshot checksum mismatch", path=str(source), schema_version=version)

    classifier = NaiveBayesClassifier.from_snapshot(model, max_workers=max_workers)
    logger.info(
        f"Model snapshot loaded from {source} "
        f"(saved_at={envelope.get('saved_at')}, vocabulary={classifier.vocabulary_size})"
    )
    return classifier
