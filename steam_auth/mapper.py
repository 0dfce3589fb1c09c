# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Mapping from Steam player summaries to the canonical identity."""

from .models import Identity, SteamProfile


def map_profile(profile: SteamProfile) -> Identity:
    """Map a Steam player summary to an Identity.

    Uses the full-size avatar as the image.

    Args:
        profile: Player summary from the profile resolver

    Returns:
        Identity with id, display name and image URL
    """
    return Identity(
        id=profile.steamid,
        display_name=profile.personaname,
        image_url=profile.avatarfull,
    )
