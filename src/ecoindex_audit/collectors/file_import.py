# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""JSON artifact import.

Reads an artifact export saved by the auditing host and produces the
:class:`Artifacts` model consumed by the EcoIndex audit. The export is
expected to look like::

    {
      "devtoolsLogs": {"defaultPass": [{"url": "...", "transferSize": 1234}]},
      "DOMStats": {"totalBodyElements": 512}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ecoindex_audit.audit.models import Artifacts

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json",)


def load_artifacts(path: str | Path) -> Artifacts:
    """Load and validate an artifact export from a JSON file."""
    artifact_path = Path(path).expanduser()
    if not artifact_path.exists():
        raise FileNotFoundError(f"Artifact file not found: {artifact_path}")
    if artifact_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file type: {artifact_path.suffix}")

    with open(artifact_path) as f:
        raw = json.load(f)

    artifacts = Artifacts.model_validate(raw)
    logger.debug(
        "Loaded %s: passes=%s, DOMStats=%s",
        artifact_path,
        sorted(artifacts.devtools_logs),
        artifacts.dom_stats is not None,
    )
    return artifacts


class ArtifactFileCollector:
    """Collect artifacts from a single exported JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def collect(self) -> Artifacts:
        """Read the export and return validated artifacts."""
        return load_artifacts(self.path)

    def discover(self) -> list[str]:
        """Describe the configured file and its status."""
        if self.path.exists():
            size = self.path.stat().st_size
            return [f"{self.path} ({size:,} bytes)"]
        return [f"{self.path} (not found)"]

    def test_connection(self) -> bool:
        """Check that the export file exists."""
        return self.path.exists()
