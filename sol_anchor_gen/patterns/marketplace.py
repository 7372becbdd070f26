"""NFT listings and sales with creator royalties."""

from __future__ import annotations

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator


class MarketplaceGenerator(AnchorTemplateGenerator):
    pattern = "marketplace"
    summary = "Marketplace program generated with SolAnchorGen"
