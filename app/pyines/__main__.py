#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from pyines.cartridge import CartridgeImage
from pyines.events import EventBus, attach_logger, observed_load
from pyines.logger import console, error_console, setup_logging
from pyines.util.config import Config, load_config


def _bool(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def build_report(image: CartridgeImage, show_raw_flags: bool = True) -> Table:
    """Table of decoded header fields and section sizes."""
    header = image.header
    table = Table(title=escape(image.source or "ROM"), box=box.ROUNDED, border_style="cyan")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="right")

    table.add_row("PRG ROM units (16 KB)", str(header.prg_units))
    table.add_row("CHR ROM units (8 KB)", str(header.chr_units))
    table.add_row("Mapper", f"{header.mapper_id} ({image.mapper_name or 'unknown'})")
    table.add_row("Mirroring", header.mirroring.value)
    table.add_row("Battery-backed RAM", _bool(header.has_battery_ram))
    table.add_row("Trainer", _bool(header.has_trainer))
    table.add_row("Four-screen", _bool(header.four_screen))
    table.add_row("TV system", header.tv_system)
    if show_raw_flags:
        table.add_row("Flags 6", f"0b{header.raw_flags6:08b}")
        table.add_row("Flags 7", f"0b{header.raw_flags7:08b}")

    table.add_section()
    if image.trainer is not None:
        table.add_row("Trainer size", f"{len(image.trainer)} bytes")
    table.add_row("PRG ROM size", f"{len(image.program_rom)} bytes")
    table.add_row("CHR ROM size", f"{len(image.graphics_rom)} bytes" + (" (CHR RAM)" if image.uses_chr_ram else ""))
    return table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="pyines", description="Decode an iNES (.nes) cartridge image.")
    ap.add_argument("rom", type=Path, help="path to the .nes file")
    ap.add_argument("--debug", action="store_true", help="verbose logging")
    ap.add_argument("--config", type=Path, default=None, help="TOML config file (default: ./pyines.toml)")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config: Config = load_config(args.config)

    debug = args.debug or config["logging"]["debug"]
    log_dir = Path(config["logging"]["directory"]) if config["logging"]["file"] else None
    log = setup_logging(debug, log_dir)
    if debug:
        install(console=error_console, show_locals=True)

    bus = EventBus()
    attach_logger(bus, log, warn_trailing_bytes=config["report"]["warn_trailing_bytes"])

    result = observed_load(args.rom, bus)
    image = result.value_or(None)
    if image is None:
        error_console.print(f"[bold red]Error loading ROM:[/bold red] {escape(str(result.failure()))}")
        return 1

    console.print(f"[green]Loaded:[/green] {escape(str(args.rom))}")
    console.print(build_report(image, config["report"]["show_raw_flags"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
