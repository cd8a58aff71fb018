"""Static override-profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from chunk_planner.config.chunking.models import ChunkingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkingConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_override_profiles() -> dict[str, ChunkingConfig]:
    """Load override profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: ChunkingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_override_profile(profile_name: str) -> ChunkingConfig | None:
    """Return the partial config for the given profile, or None if missing."""
    return load_override_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'adaptive' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "adaptive")
    return _active_profile


def resolve_user_config(
    profile_name: str | None = None,
    inline_config: dict[str, Any] | None = None,
) -> ChunkingConfig | None:
    """
    Resolve caller overrides from a named profile and/or inline values.
    Inline values are merged over the profile's. "active" selects the profile
    marked as active in static.json. Returns None when neither is given, which
    the planner reads as "no overrides". Raises ValueError for unknown profiles.
    """
    base: dict[str, Any] = {}
    if profile_name:
        name = get_active_profile_name() if profile_name == "active" else profile_name
        profile = get_override_profile(name)
        if profile is None:
            raise ValueError(f"Unknown chunking override profile: {name!r}")
        base = profile.model_dump(exclude_unset=True)
    if not inline_config and not profile_name:
        return None
    merged = {**base, **(inline_config or {})}
    return ChunkingConfig.model_validate(merged)
