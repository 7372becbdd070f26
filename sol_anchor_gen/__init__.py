"""SolAnchorGen: scaffold Solana Anchor projects from built-in templates."""

from sol_anchor_gen.utils import VERSION

__version__ = VERSION
