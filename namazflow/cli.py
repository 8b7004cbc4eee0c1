"""
Command line interface for namazflow.

Running ``namazflow`` without a subcommand fetches the prayer times of
one district and prints the record as minified JSON::

    namazflow -s 539 -v haftalik -j auto

``namazflow iller`` prints the province table instead.  All work is
delegated to the `collect`, `aggregate` and `normalize` packages; this
module only wires flags to them and turns errors into a message on
stderr and a non-zero exit status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from .aggregate.assembler import assemble_record
from .collect.runner import collect
from .config import Settings, load_settings
from .errors import NamazflowError
from .ingest.regions import regions_payload
from .normalize.write_json import auto_output_path, record_to_json, write_json_file

logger = logging.getLogger("namazflow.cli")

AUTO_PATH = "auto"


def cmd_run(args: argparse.Namespace, settings: Settings) -> None:
    """Fetch, extract and print (and optionally save) one district's times."""
    state = args.state or settings.default_state
    collected = collect(state, args.ilce or None, settings=settings)
    record = assemble_record(collected.region, collected.sub_region, collected.html, args.vakit)
    payload = record_to_json(record)
    print(payload)

    if args.json:
        path = args.json
        if path == AUTO_PATH:
            path = auto_output_path(
                collected.region.name,
                collected.sub_region.name,
                record.mode,
                root=settings.output_root,
            )
        write_json_file(payload, path)
        logger.info("Record saved to %s", path)


def cmd_list_regions(args: argparse.Namespace, settings: Settings) -> None:
    """Print the province table."""
    print(json.dumps(regions_payload(), ensure_ascii=False, separators=(",", ":")))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namazflow",
        description="Diyanet namaz vakitlerini çeken ve JSON olarak yazan CLI",
    )
    parser.add_argument("-s", "--state", help="İl ID'si (varsayılan: 516 - Bingöl)")
    parser.add_argument("-i", "--ilce", default="", help="İlçe ID'si (belirtilmezse il merkezi kullanılır)")
    parser.add_argument(
        "-v",
        "--vakit",
        default="gunluk",
        help="Vakit tipi: gunluk, haftalik, yillik (varsayılan: gunluk)",
    )
    parser.add_argument(
        "-j",
        "--json",
        default="",
        help="JSON dosyasına kaydet ('auto' ile otomatik klasör yapısı)",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default from config)")

    subparsers = parser.add_subparsers(dest="command")
    list_cmd = subparsers.add_parser("iller", help="Türkiye illerini listele")
    list_cmd.set_defaults(func=cmd_list_regions)
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
        level_name = (args.log_level or settings.log_level).upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.WARNING),
            format="[%(levelname)s] %(message)s",
        )
        func = getattr(args, "func", None) or cmd_run
        func(args, settings)
    except NamazflowError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"Hata: {exc}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
