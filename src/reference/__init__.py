"""
Reference-vector generation.

Turns the scenario list in `scenarios.yaml` into the published document of
generator sequences and fixed-point tables, and renders it as JSON.
"""

from .document import build_reference_document, diff_documents
from .encoding import canonical_json_bytes, encode_reference_json, reference_digest
from .scenarios import ScenarioError, ScenarioSet, load_scenarios

__all__ = [
    "build_reference_document",
    "diff_documents",
    "canonical_json_bytes",
    "encode_reference_json",
    "reference_digest",
    "ScenarioError",
    "ScenarioSet",
    "load_scenarios",
]
