"""
aura_weaver/metadata.py
Token metadata and local download

Metadata layout:
    {name, description, image, attributes[], external_url, created_at}

created_at and the "Generated At" attribute are wall-clock values; they
describe the mint, not the artifact, and never feed the renderer.
"""

import re
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_EXTERNAL_URL, GENERATOR_NAME
from .models import GenerationResult

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def _slug(mood_seed: str) -> str:
    return _NON_ALNUM.sub("", mood_seed)


def now_ms() -> int:
    """Wall-clock milliseconds, used for token and file names."""
    return int(time.time() * 1000)


def token_name(mood_seed: str, timestamp_ms: Optional[int] = None) -> str:
    """Example: token_name("calm sea", 1700000000000) -> "Aura-calmsea-1700000000000"."""
    ts = now_ms() if timestamp_ms is None else timestamp_ms
    return f"Aura-{_slug(mood_seed)}-{ts}"


def artifact_filename(mood_seed: str, timestamp_ms: Optional[int] = None) -> str:
    ts = now_ms() if timestamp_ms is None else timestamp_ms
    return f"aura-{_slug(mood_seed)}-{ts}.png"


def _iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def build_attributes(result: GenerationResult, mood_seed: str, activity_count: int,
                     generated_at: str) -> List[dict]:
    return [
        {"trait_type": "Mood", "value": mood_seed},
        {"trait_type": "Transaction Count", "value": str(activity_count)},
        {"trait_type": "Generated At", "value": generated_at},
        {"trait_type": "Generator", "value": GENERATOR_NAME},
        {"trait_type": "Palette", "value": result.palette_name},
        {"trait_type": "Rarity Score", "value": result.rarity_score},
        {"trait_type": "Rarity Tier", "value": result.rarity_tier},
        {"trait_type": "Particle Count", "value": result.particle_count},
    ]


def build_metadata(
    result: GenerationResult,
    mood_seed: str,
    activity_count: int,
    image_url: str = "",
    created_at: Optional[datetime] = None,
    external_url: str = DEFAULT_EXTERNAL_URL,
    name: Optional[str] = None,
) -> dict:
    """
    Build the metadata document pinned next to the artifact.

    Args:
        image_url: Pinned image URL; may be empty and filled in after upload
        created_at: Defaults to now (UTC)
        name: Token name; defaults to token_name(mood_seed)
    """
    created = _iso(created_at or datetime.now(timezone.utc))
    return {
        "name": name or token_name(mood_seed),
        "description": (
            f"Personal aura NFT generated from {activity_count} transactions "
            f"with mood \"{mood_seed}\""
        ),
        "image": image_url,
        "attributes": build_attributes(result, mood_seed, activity_count, created),
        "external_url": external_url,
        "created_at": created,
    }


def save_artifact(result: GenerationResult, directory, mood_seed: str,
                  timestamp_ms: Optional[int] = None) -> Path:
    """Write the PNG bytes verbatim and return the file path."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / artifact_filename(mood_seed, timestamp_ms)
    path.write_bytes(result.artifact)
    return path
