"""
CLI Package

Argument resolution and dispatch for the command-line front end.
"""
from .tokenizer import Tokenizer, Token, TokenKind, match_alias, extract_value
from .resolver import InvocationResolver, BareTokenRole, bare_token_role, dispatch

__all__ = [
    'Tokenizer',
    'Token',
    'TokenKind',
    'match_alias',
    'extract_value',
    'InvocationResolver',
    'BareTokenRole',
    'bare_token_role',
    'dispatch',
]
