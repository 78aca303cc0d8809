"""Vercel REST API access."""

from .client import VercelAPIError, VercelClient

__all__ = ['VercelAPIError', 'VercelClient']
