"""Wildcard name matching for workspace and resource names."""


def match_wildcard_name(wildcard: str, name: str) -> bool:
    """
    Match a name against a pattern with an optional leading and/or trailing '*'.

    "*-suffix" matches names ending with "-suffix", "prefix-*" matches names
    starting with "prefix-", "*-infix-*" matches names containing "-infix-".
    Without a '*' the match is exact.
    """
    if len(wildcard) > 1 and wildcard.startswith("*") and wildcard.endswith("*"):
        return wildcard[1:-1] in name
    if wildcard.startswith("*"):
        return name.endswith(wildcard[1:])
    if wildcard.endswith("*"):
        return name.startswith(wildcard[:-1])
    return wildcard == name
