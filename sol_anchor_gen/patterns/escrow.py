"""Peer-to-peer token swap escrow."""

from __future__ import annotations

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator


class EscrowGenerator(AnchorTemplateGenerator):
    pattern = "escrow"
    summary = "Escrow program generated with SolAnchorGen"
