"""NFT collection minting with on-chain metadata."""

from __future__ import annotations

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator


class NftMintingGenerator(AnchorTemplateGenerator):
    pattern = "nft-minting"
    summary = "NFT minting program generated with SolAnchorGen"
