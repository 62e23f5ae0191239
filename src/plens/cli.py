"""Command line interface for browsing the plenary archive."""
from __future__ import annotations

from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Iterable, List, Optional
import argparse
import json
import logging

from .archive import (
    Archive,
    RhetoricTag,
    extract_rhetoric_fragments,
    find_intervention,
    regidors_with_stats,
    render_annotated_text,
    sessions_with_stats,
    tags_with_stats,
)
from .clients import SourceError
from .config import AppConfig, load_config, save_config
from .formatting import pol_emoji
from .runtime import create_archive

LOGGER = logging.getLogger(__name__)

_COMMANDS = ["sessions", "regidors", "tags", "fragments", "render", "config"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse the Barcelona plenary transcript archive")
    parser.add_argument("command", choices=_COMMANDS, help="What to list or render")
    parser.add_argument("--config", type=Path, help="Path to an explicit configuration file")
    parser.add_argument("--data-dir", help="Directory holding the archive JSON documents")
    parser.add_argument("--base-url", help="Fetch the archive documents from this URL instead")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument(
        "--tag",
        choices=[tag.markup for tag in RhetoricTag],
        help="Only list fragments with this rhetoric tag (only used with 'fragments')",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of rows to print")
    parser.add_argument("--id", dest="intervention_id", help="Intervention to render (only used with 'render')")
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the effective configuration to the config file (only used with 'config')",
    )
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    sources = config.sources
    if args.data_dir:
        sources = replace(sources, data_dir=args.data_dir, base_url=None)
    if args.base_url:
        sources = replace(sources, base_url=args.base_url)
    return replace(config, sources=sources)


def _limited(rows: List[Any], limit: Optional[int]) -> List[Any]:
    if limit is None or limit < 0:
        return rows
    return rows[:limit]


def _print_json(rows: Iterable[Any]) -> None:
    print(json.dumps([asdict(row) for row in rows], ensure_ascii=False, indent=2))


def _list_sessions(archive: Archive, args: argparse.Namespace) -> int:
    rows = _limited(sessions_with_stats(archive), args.limit)
    if args.json:
        _print_json(rows)
        return 0
    for row in rows:
        flags = " ⚠" if row.has_hate_speech else ""
        print(
            f"{row.session_id}\t{row.session.title}\t{row.intervention_count} interventions\t"
            f"{row.agenda_item_count} punts\t{pol_emoji(row.avg_polarization) or '-'}\t"
            f"{row.rhetoric_tag_count} tags{flags}"
        )
    return 0


def _list_regidors(archive: Archive, args: argparse.Namespace) -> int:
    rows = _limited(regidors_with_stats(archive), args.limit)
    if args.json:
        _print_json(rows)
        return 0
    for row in rows:
        print(
            f"{row.slug}\t{row.regidor.name}\t{row.regidor.party}\t"
            f"{row.intervention_count} interventions\t{row.session_count} sessions"
        )
    return 0


def _list_tags(archive: Archive, args: argparse.Namespace) -> int:
    rows = _limited(tags_with_stats(archive), args.limit)
    if args.json:
        _print_json(rows)
        return 0
    for row in rows:
        print(f"{row.tag.code}\t{row.tag.name}\t{row.intervention_count} interventions\t{row.avg_polarization:g}")
    return 0


def _list_fragments(archive: Archive, args: argparse.Namespace) -> int:
    fragments = extract_rhetoric_fragments(archive)
    if args.tag:
        fragments = [fragment for fragment in fragments if fragment.tag == args.tag]
    rows = _limited(fragments, args.limit)
    if args.json:
        _print_json(rows)
        return 0
    for fragment in rows:
        print(f"{fragment.emoji} {fragment.label}\t{fragment.speaker_name}\t{fragment.intervention_anchor}\t{fragment.text}")
    return 0


def _render(archive: Archive, args: argparse.Namespace) -> int:
    if not args.intervention_id:
        LOGGER.error("The 'render' command requires --id")
        return 2
    intervention = find_intervention(archive, args.intervention_id)
    if intervention is None:
        LOGGER.error("Unknown intervention %s", args.intervention_id)
        return 1
    print(render_annotated_text(intervention.annotated_text or intervention.text))
    return 0


_HANDLERS = {
    "sessions": _list_sessions,
    "regidors": _list_regidors,
    "tags": _list_tags,
    "fragments": _list_fragments,
    "render": _render,
}


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _apply_overrides(load_config(args.config), args)
    logging.basicConfig(level=config.logging.level.upper(), format=config.logging.format)

    if args.command == "config":
        if args.save:
            target = save_config(config, args.config)
            LOGGER.info("Configuration written to %s", target)
        print(json.dumps({"sources": asdict(config.sources), "logging": asdict(config.logging)}, indent=2))
        return 0

    try:
        archive = create_archive(config)
    except SourceError as exc:
        LOGGER.error("Could not load the archive: %s", exc)
        return 1
    return _HANDLERS[args.command](archive, args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
