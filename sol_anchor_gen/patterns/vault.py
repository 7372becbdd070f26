"""Token custody vault with multi-signature withdrawals."""

from __future__ import annotations

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator


class VaultGenerator(AnchorTemplateGenerator):
    pattern = "vault"
    summary = "Vault program generated with SolAnchorGen"
