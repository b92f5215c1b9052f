"""Contains utility functions for GitHub interactions."""

from typing import Any

from github_manager.schemas.users import Repository


def split_repository(repo: Repository | str | None) -> tuple[str, str]:
    """Splits a repository given as an entity or an 'owner/repo' string into owner and repository."""
    if repo is None:
        raise ValueError("A repository is required for this operation.")
    if isinstance(repo, Repository):
        if repo.owner.login and repo.name:
            return repo.owner.login, repo.name
        repo = repo.full_name
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def resolve_identifier(value: Any, attribute: str = "id") -> str:
    """Returns the path segment identifying a resource given as an entity or a raw identifier."""
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        identifier = str(value)
    else:
        identifier = str(getattr(value, attribute, "") or "")
    if not identifier:
        raise ValueError(f"Cannot determine the {attribute} of {value!r}.")
    return identifier
