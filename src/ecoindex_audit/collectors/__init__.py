# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Artifact collectors for running the audit outside the host."""

from ecoindex_audit.collectors.file_import import ArtifactFileCollector, load_artifacts

__all__ = ["ArtifactFileCollector", "load_artifacts"]
