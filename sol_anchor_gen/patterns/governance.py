"""DAO proposals and token-weighted voting."""

from __future__ import annotations

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator


class GovernanceGenerator(AnchorTemplateGenerator):
    pattern = "governance"
    summary = "Governance program generated with SolAnchorGen"
