"""
Filter stage: drops forks and, optionally, repositories in other languages.
"""

# Language filter value that disables language matching
ALL_LANGUAGES = "all"


def filter_repos(repos, language=ALL_LANGUAGES):
    """
    Keep the non-fork repositories whose lower-cased language equals `language`.

    `language` is compared as given; only the record side is lower-cased.
    The sentinel "all" keeps every non-fork repository. Order is preserved.
    """
    filtered = []
    for repo in repos:
        if repo.is_fork:
            continue
        if language != ALL_LANGUAGES and repo.language.lower() != language:
            continue
        filtered.append(repo)
    return filtered
