"""Scaffold patterns and the template registry.

Quick usage::

    from sol_anchor_gen.patterns import create_template_registry

    registry = create_template_registry()
    staking = registry.get("staking")
"""

from __future__ import annotations

from sol_anchor_gen.patterns.base import (
    AnchorTemplateGenerator,
    GeneratedFile,
    GenerationContext,
    TemplateGenerator,
)
from sol_anchor_gen.patterns.escrow import EscrowGenerator
from sol_anchor_gen.patterns.governance import GovernanceGenerator
from sol_anchor_gen.patterns.marketplace import MarketplaceGenerator
from sol_anchor_gen.patterns.nft_minting import NftMintingGenerator
from sol_anchor_gen.patterns.options import (
    OptionType,
    OptionValue,
    TemplateOption,
    coerce_option_value,
    resolve_options,
)
from sol_anchor_gen.patterns.registry import TemplateDescriptor, TemplateRegistry
from sol_anchor_gen.patterns.staking import TOKEN_DECIMALS_OPTION, StakingGenerator
from sol_anchor_gen.patterns.vault import VaultGenerator
from sol_anchor_gen.rendering import TemplateRenderer


def create_template_registry(renderer: TemplateRenderer | None = None) -> TemplateRegistry:
    """Build a fresh registry holding the six built-in templates."""
    renderer = renderer or TemplateRenderer()
    registry = TemplateRegistry()
    for descriptor in (
        TemplateDescriptor(
            id="nft-minting",
            name="NFT Minting",
            description="Complete NFT collection with metadata",
            generator=NftMintingGenerator(renderer),
        ),
        TemplateDescriptor(
            id="staking",
            name="Token Staking",
            description="Stake tokens and earn rewards",
            generator=StakingGenerator(renderer),
            options=(TOKEN_DECIMALS_OPTION,),
        ),
        TemplateDescriptor(
            id="escrow",
            name="Escrow",
            description="Secure peer-to-peer token swaps",
            generator=EscrowGenerator(renderer),
        ),
        TemplateDescriptor(
            id="governance",
            name="Governance",
            description="DAO voting and proposal system",
            generator=GovernanceGenerator(renderer),
        ),
        TemplateDescriptor(
            id="marketplace",
            name="Marketplace",
            description="Buy/sell NFTs with royalties",
            generator=MarketplaceGenerator(renderer),
        ),
        TemplateDescriptor(
            id="vault",
            name="Vault",
            description="Secure token custody with multi-sig",
            generator=VaultGenerator(renderer),
        ),
    ):
        registry.register(descriptor)
    return registry


__all__ = [
    "AnchorTemplateGenerator",
    "EscrowGenerator",
    "GeneratedFile",
    "GenerationContext",
    "GovernanceGenerator",
    "MarketplaceGenerator",
    "NftMintingGenerator",
    "OptionType",
    "OptionValue",
    "StakingGenerator",
    "TemplateDescriptor",
    "TemplateGenerator",
    "TemplateOption",
    "TemplateRegistry",
    "VaultGenerator",
    "coerce_option_value",
    "create_template_registry",
    "resolve_options",
]
