"""
Token input loaders
"""

from .token_loader import TokenLoader, TokenLoadError, default_resolvers, parse_tokens

__all__ = [
    'TokenLoader',
    'TokenLoadError',
    'default_resolvers',
    'parse_tokens'
]
