"""
aura_weaver/cli.py
Command-line interface for Aura Weaver

Usage:
    python -m aura_weaver generate --mood "calm sea" --activity 120 --output out
    python -m aura_weaver score --mood "calm sea" --activity 120
    python -m aura_weaver palettes --json
    python -m aura_weaver generate --mood "calm sea" --activity 120 --scene-json scene.json
    python -m aura_weaver preview --mood "calm sea" --activity 120
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .errors import RenderError, StorageError, ValidationError

EXIT_VALIDATION = 2
EXIT_RENDER = 3
EXIT_STORAGE = 4


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate an aura PNG (and optionally metadata / pin it)."""
    from .engine import build_scene, generate
    from .metadata import build_metadata, now_ms, save_artifact, token_name
    from .config import storage_config_from_env

    result = generate(args.mood, args.activity)
    scene = build_scene(args.mood, args.activity)
    mood = scene.mood_seed

    # One timestamp shared by the file name and the token name
    ts = now_ms()
    output_dir = Path(args.output) if args.output else Path(".")
    path = save_artifact(result, output_dir, mood, ts)

    scene_path = None
    if args.scene_json:
        scene_path = Path(args.scene_json)
        scene_path.write_text(json.dumps(scene.to_dict(), indent=2), encoding="utf-8")

    storage = storage_config_from_env()
    metadata = build_metadata(
        result, mood, args.activity,
        external_url=storage.external_url,
        name=token_name(mood, ts),
    )

    pinned = None
    if args.pin:
        from .storage import PinningClient
        pinned = PinningClient(storage).pin_generation(result, metadata, path.name)
        metadata = pinned.metadata_doc

    meta_path = None
    if args.metadata:
        meta_path = path.with_suffix(".json")
        meta_path.write_text(json.dumps(metadata, indent=2), encoding="utf-8")

    if args.json:
        out = result.summary()
        out["path"] = str(path)
        if meta_path:
            out["metadata_path"] = str(meta_path)
        if scene_path:
            out["scene_path"] = str(scene_path)
        if pinned:
            out["image_url"] = pinned.image.url
            out["metadata_url"] = pinned.metadata.url
        print(json.dumps(out, indent=2))
        return 0

    print(f"Aura Weaver {__version__}")
    print(f"  Mood:        {mood}")
    print(f"  Activity:    {args.activity}")
    print(f"  Palette:     {result.palette_name}")
    print(f"  Particles:   {result.particle_count}")
    print(f"  Rarity:      {result.rarity_score} ({result.rarity_tier})")
    print(f"  Fingerprint: {result.fingerprint}")
    print(f"  Wrote:       {path}")
    if meta_path:
        print(f"  Metadata:    {meta_path}")
    if scene_path:
        print(f"  Scene:       {scene_path}")
    if pinned:
        print(f"  Image URL:   {pinned.image.url}")
        print(f"  Meta URL:    {pinned.metadata.url}")
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Show display and ledger rarity for an input pair."""
    from .rarity import ledger_rarity, rarity_breakdown, rarity_tier
    from .validation import validate_inputs

    mood, activity = validate_inputs(args.mood, args.activity)
    breakdown = rarity_breakdown(activity, mood)
    breakdown["tier"] = rarity_tier(breakdown["score"])
    breakdown["ledger_score"] = ledger_rarity(activity, mood)

    if args.json:
        print(json.dumps(breakdown, indent=2))
        return 0

    print(f"Rarity for '{mood}' @ {activity}")
    print(f"  Base:            {breakdown['base']}")
    print(f"  Length bonus:    {breakdown['length_bonus']}")
    print(f"  Diversity bonus: {breakdown['diversity_bonus']}")
    print(f"  Score:           {breakdown['score']} ({breakdown['tier']})")
    print(f"  Ledger score:    {breakdown['ledger_score']}")
    if breakdown["ledger_score"] != breakdown["score"]:
        print("  Note: ledger formula differs from the display score")
    return 0


def cmd_palettes(args: argparse.Namespace) -> int:
    """List mood rules in match order, then every palette."""
    from .mood import MOOD_RULES
    from .palettes import DEFAULT_PALETTE, get_palette, list_palettes

    palettes = [get_palette(name) for name in list_palettes()]

    if args.json:
        print(json.dumps({
            "rules": [
                {"keyword": r.keyword, "stem": r.stem, "palette": r.palette.name}
                for r in MOOD_RULES
            ],
            "default": DEFAULT_PALETTE.name,
            "palettes": [p.to_dict() for p in palettes],
        }, indent=2))
        return 0

    print("Mood rules (first match wins):")
    for i, rule in enumerate(MOOD_RULES, 1):
        print(f"  {i}. {rule.keyword:12s} ('{rule.stem}') -> {rule.palette.name}")
    print(f"  default       -> {DEFAULT_PALETTE.name}")
    print()
    print("Palettes:")
    for p in palettes:
        swatches = " ".join("#%02x%02x%02x" % c for c in p.colors)
        print(f"  {p.name:12s} {swatches}")
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Open the animated preview window."""
    from PyQt5.QtWidgets import QApplication
    from .engine import build_scene
    from .preview import AuraPreview

    scene = build_scene(args.mood, args.activity)
    app = QApplication(sys.argv[:1])
    widget = AuraPreview(scene)
    widget.setWindowTitle(f"Aura - {scene.mood_seed}")
    widget.start()
    return app.exec_()


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="aura-weaver",
        description="Deterministic aura art and rarity from a mood and activity count",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_inputs(p):
        p.add_argument("--mood", "-m", type=str, required=True, help="Mood seed text")
        p.add_argument("--activity", "-a", type=int, required=True, help="Activity count")
        p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    gen_parser = subparsers.add_parser("generate", help="Render an aura PNG")
    add_inputs(gen_parser)
    gen_parser.add_argument("--output", "-o", type=str, help="Output directory")
    gen_parser.add_argument("--metadata", action="store_true", help="Also write metadata JSON")
    gen_parser.add_argument("--scene-json", type=str, metavar="PATH",
                            help="Also write particle/waveform layout as JSON")
    gen_parser.add_argument("--pin", action="store_true", help="Pin image + metadata")
    gen_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    gen_parser.set_defaults(func=cmd_generate)

    score_parser = subparsers.add_parser("score", help="Show rarity score")
    add_inputs(score_parser)
    score_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    score_parser.set_defaults(func=cmd_score)

    pal_parser = subparsers.add_parser("palettes", help="List mood rules and palettes")
    pal_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    pal_parser.set_defaults(func=cmd_palettes, verbose=False)

    preview_parser = subparsers.add_parser("preview", help="Animated preview window")
    add_inputs(preview_parser)
    preview_parser.set_defaults(func=cmd_preview)

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        return args.func(args)
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_VALIDATION
    except RenderError as e:
        logging.getLogger(__name__).debug(f"Render failure: {e}")
        print(f"ERROR: {RenderError.user_message}", file=sys.stderr)
        return EXIT_RENDER
    except StorageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_STORAGE


if __name__ == "__main__":
    sys.exit(main())
