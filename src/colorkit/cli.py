"""
colorkit - color science toolkit for the terminal.

Converts colors between sRGB, XYZ, Lab and Luv, builds gradients,
harmonies and palettes, and checks contrast.

Usage:
    colorkit convert "#FF8800"                      # All color space representations
    colorkit gradient "#000" "#FFF" --steps 5       # Two-color gradient
    colorkit multistop "#F00" "#0F0" "#00F"          # Gradient through several stops
    colorkit dataviz viridis --steps 12             # Data visualization scale
    colorkit harmony "#3498DB" --type triadic       # Harmony scheme
    colorkit palette sequential "#08519C"           # Light-to-base palette
    colorkit contrast "#777" "#FFF"                 # WCAG contrast check
    colorkit --json <command> ...                   # Output as JSON
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .blending import BlendMode, blend
from .color import rgba_to_lab, rgba_to_luv, rgba_to_xyz
from .config import ColorKitConfig, load_config
from .contrast import WCAGLevel, contrast_ratio, meets
from .gradient import (
    DataVisualizationType,
    GradientInterpolation,
    TemperaturePreset,
    generate_animation_gradient,
    generate_data_visualization_gradient,
    generate_gradient,
    generate_multi_stop_gradient,
    generate_temperature_gradient,
)
from .harmony import ColorHarmonyType, generate_harmony
from .hexcodec import format_hex, try_parse_hex
from .hsl import rgba_to_hsl
from .palettes import generate_diverging, generate_sequential, generate_tints_and_shades
from .perceptual import delta_e_2000
from .psychology import emotional_profile, primary_emotion
from .rgba import RGBA
from .temperature import adjust_temperature_and_tint, color_temperature
from .vision import ColorBlindnessType, simulate

logger = logging.getLogger("colorkit")

INTERPOLATION_CHOICES = [m.value for m in GradientInterpolation]


class ColorArgumentError(Exception):
    """A color given on the command line could not be parsed."""


def setup_logging(verbose: bool) -> None:
    """Route colorkit log records to stderr through rich."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def require_color(value: str) -> RGBA:
    rgba = try_parse_hex(value)
    if rgba is None:
        raise ColorArgumentError(value)
    return rgba


def _case(colors: list[str], config: ColorKitConfig) -> list[str]:
    return colors if config.uppercase else [c.lower() for c in colors]


def swatch(hex_color: str, width: int = 4) -> Text:
    """A solid block of the color, for terminals with truecolor support."""
    return Text(" " * width, style=f"on {hex_color[:7]}")


def print_colors(console: Console, title: str, colors: list[str]) -> None:
    """Print a strip of swatches followed by a numbered table."""
    strip = Text()
    for c in colors:
        strip.append_text(swatch(c, width=2))
    console.print(f"[bold]{title}[/bold]")
    console.print(strip)

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("#", style="dim", justify="right")
    table.add_column("", no_wrap=True)
    table.add_column("hex", style="bold")
    for i, c in enumerate(colors, 1):
        table.add_row(str(i), swatch(c), c)
    console.print(table)


def print_mapping(console: Console, title: str, rows: dict[str, object], colors: bool = False) -> None:
    table = Table(title=title, box=box.ROUNDED, show_header=False)
    table.add_column("", style="cyan")
    if colors:
        table.add_column("", no_wrap=True)
    table.add_column("")
    for key, value in rows.items():
        if colors:
            table.add_row(key, swatch(str(value)), str(value))
        else:
            table.add_row(key, _fmt(value))
    console.print(table)


def _fmt(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    if isinstance(value, bool):
        return "[green]pass[/]" if value else "[red]fail[/]"
    if isinstance(value, dict):
        return ", ".join(f"{k}={_fmt(v)}" for k, v in value.items())
    return str(value)


# Subcommands. Each returns a JSON-serializable payload and renders it
# unless --json was given.


def cmd_convert(args, config: ColorKitConfig, console: Console):
    rgba = require_color(args.color)
    xyz = rgba_to_xyz(rgba)
    lab = rgba_to_lab(rgba)
    luv = rgba_to_luv(rgba)
    hsl = rgba_to_hsl(rgba)
    hex_color = format_hex(rgba, include_alpha=config.include_alpha, uppercase=config.uppercase)
    output = {
        "hex": hex_color,
        "rgba": {"r": rgba.r, "g": rgba.g, "b": rgba.b, "a": rgba.a},
        "xyz": {"x": xyz.x, "y": xyz.y, "z": xyz.z},
        "lab": {"l": lab.l, "a": lab.a, "b": lab.b},
        "luv": {"l": luv.l, "u": luv.u, "v": luv.v},
        "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
    }
    if not args.json:
        console.print(swatch(hex_color, width=12))
        print_mapping(console, hex_color, {k: v for k, v in output.items() if k != "hex"})
    return output


def cmd_gradient(args, config: ColorKitConfig, console: Console):
    start = require_color(args.start)
    end = require_color(args.end)
    steps = args.steps if args.steps is not None else config.default_steps
    mode = GradientInterpolation(args.mode or config.interpolation)
    colors = _case(generate_gradient(start, end, steps, mode, config.include_alpha), config)
    if not args.json:
        print_colors(console, f"{mode.display_name} gradient", colors)
    return colors


def cmd_multistop(args, config: ColorKitConfig, console: Console):
    stops = [require_color(c) for c in args.colors]
    steps = args.steps if args.steps is not None else config.default_steps
    mode = GradientInterpolation(args.mode or config.interpolation)
    colors = _case(generate_multi_stop_gradient(stops, steps, mode, config.include_alpha), config)
    if not args.json:
        print_colors(console, f"{mode.display_name} gradient through {len(stops)} stops", colors)
    return colors


def cmd_dataviz(args, config: ColorKitConfig, console: Console):
    kind = DataVisualizationType(args.type)
    steps = args.steps if args.steps is not None else config.default_steps
    colors = _case(generate_data_visualization_gradient(kind, steps), config)
    if not args.json:
        print_colors(console, kind.display_name, colors)
        console.print(f"[dim]{kind.description}[/]")
        console.print("[dim]Use for: " + ", ".join(kind.use_cases) + "[/]")
    return colors


def cmd_temperature(args, config: ColorKitConfig, console: Console):
    preset = TemperaturePreset(args.preset)
    steps = args.steps if args.steps is not None else config.default_steps
    mode = GradientInterpolation(args.mode) if args.mode else GradientInterpolation.PERCEPTUAL
    colors = _case(generate_temperature_gradient(preset, steps, mode), config)
    if not args.json:
        print_colors(console, preset.display_name, colors)
    return colors


def cmd_animate(args, config: ColorKitConfig, console: Console):
    start = require_color(args.start)
    end = require_color(args.end)
    frames = _case(generate_animation_gradient(start, end, args.duration, args.fps), config)
    if not args.json:
        print_colors(console, f"{len(frames)} frames at {args.fps:g} fps", frames)
    return frames


def cmd_harmony(args, config: ColorKitConfig, console: Console):
    require_color(args.color)
    types = [ColorHarmonyType(args.type)] if args.type else list(ColorHarmonyType)
    output = {t.value: _case(generate_harmony(args.color, t), config) for t in types}
    if not args.json:
        for name, colors in output.items():
            strip = Text(f"{name:<20}")
            for c in colors:
                strip.append_text(swatch(c))
                strip.append(f" {c}  ")
            console.print(strip)
    return output


def cmd_palette(args, config: ColorKitConfig, console: Console):
    if args.kind == "sequential":
        require_color(args.color)
        colors = generate_sequential(args.color, args.steps if args.steps is not None else 9)
        title = "Sequential"
    elif args.kind == "diverging":
        require_color(args.start)
        require_color(args.end)
        colors = generate_diverging(args.start, args.end, args.steps if args.steps is not None else 11)
        title = "Diverging"
    else:
        require_color(args.color)
        colors = generate_tints_and_shades(args.color, args.steps if args.steps is not None else 5, args.range)
        title = "Shades and tints"
    colors = _case(colors, config)
    if not args.json:
        print_colors(console, title, colors)
    return colors


def cmd_contrast(args, config: ColorKitConfig, console: Console):
    fg = require_color(args.foreground)
    bg = require_color(args.background)
    output = {
        "ratio": contrast_ratio(fg, bg),
        "aa": meets(WCAGLevel.AA, fg, bg),
        "aaa": meets(WCAGLevel.AAA, fg, bg),
    }
    if not args.json:
        sample = Text(f"  {args.foreground} on {args.background}  ", style=f"{format_hex(fg)} on {format_hex(bg)}")
        console.print(sample)
        print_mapping(console, f"Contrast {output['ratio']:.2f}:1", {"AA": output["aa"], "AAA": output["aaa"]})
    return output


def cmd_delta_e(args, config: ColorKitConfig, console: Console):
    a = require_color(args.a)
    b = require_color(args.b)
    # The simplified formula is not symmetric, so report both orders
    output = {"a_to_b": delta_e_2000(a, b), "b_to_a": delta_e_2000(b, a)}
    if not args.json:
        print_mapping(console, "Delta E", {f"{args.a} -> {args.b}": output["a_to_b"], f"{args.b} -> {args.a}": output["b_to_a"]})
    return output


def cmd_simulate(args, config: ColorKitConfig, console: Console):
    rgba = require_color(args.color)
    types = [ColorBlindnessType(args.type)] if args.type else list(ColorBlindnessType)
    output = {t.value: format_hex(simulate(t, rgba), uppercase=config.uppercase) for t in types}
    if not args.json:
        print_mapping(console, f"Simulated {format_hex(rgba)}", output, colors=True)
    return output


def cmd_emotion(args, config: ColorKitConfig, console: Console):
    rgba = require_color(args.color)
    profile = sorted(emotional_profile(rgba).items(), key=lambda kv: kv[1], reverse=True)
    output = {
        "primary": primary_emotion(rgba).value,
        "profile": {emotion.value: score for emotion, score in profile},
    }
    if not args.json:
        console.print(swatch(format_hex(rgba), width=8), f"primary: [bold]{output['primary']}[/]")
        print_mapping(console, "Emotional profile", output["profile"])
    return output


def cmd_blend(args, config: ColorKitConfig, console: Console):
    base = require_color(args.base)
    overlay = require_color(args.overlay)
    modes = [BlendMode(args.mode)] if args.mode else list(BlendMode)
    output = {
        m.value: format_hex(blend(overlay, base, m), config.include_alpha, config.uppercase) for m in modes
    }
    if not args.json:
        print_mapping(console, f"{args.overlay} over {args.base}", output, colors=True)
    return output


def cmd_adjust(args, config: ColorKitConfig, console: Console):
    rgba = require_color(args.color)
    adjusted = adjust_temperature_and_tint(rgba, args.temperature, args.tint)
    output = {
        "input": format_hex(rgba, uppercase=config.uppercase),
        "result": format_hex(adjusted, uppercase=config.uppercase),
        "kelvin": color_temperature(adjusted),
    }
    if not args.json:
        print_mapping(console, "Temperature / tint", {"input": output["input"], "result": output["result"]}, colors=True)
        console.print(f"approx. {output['kelvin']:.0f}K")
    return output


COMMANDS = {
    "convert": cmd_convert,
    "gradient": cmd_gradient,
    "multistop": cmd_multistop,
    "dataviz": cmd_dataviz,
    "temperature": cmd_temperature,
    "animate": cmd_animate,
    "harmony": cmd_harmony,
    "palette": cmd_palette,
    "contrast": cmd_contrast,
    "delta-e": cmd_delta_e,
    "simulate": cmd_simulate,
    "emotion": cmd_emotion,
    "blend": cmd_blend,
    "adjust": cmd_adjust,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="colorkit", description="Color science toolkit")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, metavar="PATH", help="Config file (default: ~/.config/colorkit/config.json)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Show a color in every supported color space")
    p.add_argument("color")

    p = sub.add_parser("gradient", help="Gradient between two colors")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--steps", type=int)
    p.add_argument("--mode", choices=INTERPOLATION_CHOICES)

    p = sub.add_parser("multistop", help="Gradient through several color stops")
    p.add_argument("colors", nargs="+")
    p.add_argument("--steps", type=int)
    p.add_argument("--mode", choices=INTERPOLATION_CHOICES)

    p = sub.add_parser("dataviz", help="Data visualization color scale")
    p.add_argument("type", choices=[t.value for t in DataVisualizationType])
    p.add_argument("--steps", type=int)

    p = sub.add_parser("temperature", help="Temperature-themed gradient preset")
    p.add_argument("preset", choices=[t.value for t in TemperaturePreset])
    p.add_argument("--steps", type=int)
    p.add_argument("--mode", choices=INTERPOLATION_CHOICES)

    p = sub.add_parser("animate", help="Eased per-frame colors for an animation")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--duration", type=float, default=1.0, help="Seconds (default: 1.0)")
    p.add_argument("--fps", type=float, default=60.0, help="Frames per second (default: 60)")

    p = sub.add_parser("harmony", help="Color harmony schemes")
    p.add_argument("color")
    p.add_argument("--type", choices=[t.value for t in ColorHarmonyType], help="Default: all schemes")

    p = sub.add_parser("palette", help="Sequential, diverging or tint/shade palettes")
    kinds = p.add_subparsers(dest="kind", required=True)
    k = kinds.add_parser("sequential")
    k.add_argument("color")
    k.add_argument("--steps", type=int)
    k = kinds.add_parser("diverging")
    k.add_argument("start")
    k.add_argument("end")
    k.add_argument("--steps", type=int)
    k = kinds.add_parser("tints")
    k.add_argument("color")
    k.add_argument("--steps", type=int)
    k.add_argument("--range", type=float, default=0.25)

    p = sub.add_parser("contrast", help="WCAG contrast ratio and AA/AAA checks")
    p.add_argument("foreground")
    p.add_argument("background")

    p = sub.add_parser("delta-e", help="Perceptual difference between two colors")
    p.add_argument("a")
    p.add_argument("b")

    p = sub.add_parser("simulate", help="Color vision deficiency simulation")
    p.add_argument("color")
    p.add_argument("--type", choices=[t.value for t in ColorBlindnessType], help="Default: all types")

    p = sub.add_parser("emotion", help="Emotional associations of a color")
    p.add_argument("color")

    p = sub.add_parser("blend", help="Blend an overlay color onto a base color")
    p.add_argument("base")
    p.add_argument("overlay")
    p.add_argument("--mode", choices=[m.value for m in BlendMode], help="Default: all modes")

    p = sub.add_parser("adjust", help="Adjust color temperature and tint")
    p.add_argument("color")
    p.add_argument("--temperature", type=float, default=0.0, help="-100 (cool) to 100 (warm)")
    p.add_argument("--tint", type=float, default=0.0, help="-100 (green) to 100 (magenta)")

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    config = load_config(args.config)
    console = Console()

    try:
        output = COMMANDS[args.command](args, config, console)
    except ColorArgumentError as e:
        print(f"Error: invalid color: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
