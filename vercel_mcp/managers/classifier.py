"""
Query classifier - maps free text to a tool group name.

Keywords overlap across groups, so rule order is the tie-break policy:
tokens are scanned left to right and, within a token, KEYWORD_RULES in
table order. Only when no token matches are FALLBACK_RULES checked against
the whole normalized query.
"""

import re
from typing import List, Optional, Tuple

# (keyword, group) - keyword must be a substring of a query token
KEYWORD_RULES: Tuple[Tuple[str, str], ...] = (
    # Infrastructure tools
    ("edge_config", "infrastructure"),
    ("secret", "infrastructure"),
    ("env", "infrastructure"),
    ("webhook", "infrastructure"),
    ("logdrain", "infrastructure"),
    ("speed_insights", "infrastructure"),
    ("firewall", "infrastructure"),

    # Access tools
    ("user", "access"),
    ("team", "access"),
    ("auth", "access"),
    ("access_group", "access"),
    ("security", "access"),

    # Project tools
    ("project", "projects"),
    ("list_projects", "projects"),
    ("projects", "projects"),
    ("deployment", "projects"),
    ("member", "projects"),
    ("transfer", "projects"),
    ("show_projects", "projects"),
    ("get_projects", "projects"),
    ("view_projects", "projects"),
    ("display_projects", "projects"),
    ("fetch_projects", "projects"),
    ("retrieve_projects", "projects"),

    # Domain tools
    ("domain", "domains"),
    ("dns", "domains"),
    ("cert", "domains"),
    ("alias", "domains"),

    # Integration tools
    ("integration", "integrations"),
    ("marketplace", "integrations"),
    ("artifact", "integrations"),
)

# (group, substrings) - any substring found in the whole normalized query
FALLBACK_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("infrastructure", ("edge", "secret", "env", "environment", "webhook", "log", "speed", "vitals")),
    ("access", ("user", "team", "auth", "access", "firewall", "security")),
    ("projects", ("project", "projects", "deploy", "member", "transfer", "file")),
    ("domains", ("domain", "dns", "cert", "ssl", "tls", "alias")),
    ("integrations", ("integration", "marketplace", "artifact", "int_")),
)

_TOKEN_SEPARATORS = re.compile(r"[\s_-]+")


def normalize(query: str) -> str:
    """Lowercase a query."""
    return query.lower()


def tokenize(query: str) -> List[str]:
    """Split a normalized query on runs of whitespace, hyphens and underscores."""
    return [token for token in _TOKEN_SEPARATORS.split(query) if token]


def match_token(token: str) -> Optional[str]:
    """Return the group of the first keyword contained in token."""
    for keyword, group in KEYWORD_RULES:
        if keyword in token:
            return group
    return None


def match_fallback(query: str) -> Optional[str]:
    """Return the first fallback group with a substring in query."""
    for group, substrings in FALLBACK_RULES:
        if any(s in query for s in substrings):
            return group
    return None


def classify(query: str) -> Optional[str]:
    """
    Classify a free-text query into a tool group.

    Args:
        query: Arbitrary text, e.g. a user utterance or a tool name

    Returns:
        Group name, or None if no rule matched

    Example:
        >>> classify("list my projects")
        'projects'
        >>> classify("issue a certificate")
        'domains'
        >>> classify("xyz_totally_unrelated") is None
        True
    """
    normalized = normalize(query)

    for token in tokenize(normalized):
        group = match_token(token)
        if group:
            return group

    return match_fallback(normalized)
