"""
FastAPI dependencies for the business profile.
"""

from bizinsight.business.service import ProfileStore

_profile_store = ProfileStore()


def get_profile_store() -> ProfileStore:
    """
    Get the session's profile store.

    Created at import time so concurrent first requests share one instance.

    Returns:
        ProfileStore: The profile store singleton
    """
    return _profile_store


def set_profile_store(store: ProfileStore | None) -> None:
    """Replace the profile store, or start from the default profile when None."""
    global _profile_store
    _profile_store = store if store is not None else ProfileStore()
