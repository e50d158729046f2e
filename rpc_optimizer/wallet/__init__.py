"""Wallet integration helpers."""
from .integration import generate_network_config, generate_rainbow_link, generate_trust_wallet_link

__all__ = [
    'generate_network_config',
    'generate_rainbow_link',
    'generate_trust_wallet_link'
]
