"""Command-line options of the simulation and the measurement output they drive."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from dynamis.geometry import LabelSize
from dynamis.jsonm import JsonRecord

DEFAULT_FOLDER = "D:/GIT/C++/dynaMIS"


@dataclass
class Settings:
    """Options of one simulation run."""

    file: str = ""
    algo_type: str = ""
    mod_type: str = ""
    change_ratio: float = 0.0
    result_folder: str = DEFAULT_FOLDER
    tmp_dictionary: str = DEFAULT_FOLDER
    param_k: int = 4
    seed: int = 0
    greedy: bool = False
    xspecial: bool = False
    recomp: bool = False
    rectangle: bool = False
    label_width: float = 0.0
    label_height: float = 0.0

    @property
    def size(self) -> LabelSize:
        return LabelSize(self.label_width, self.label_height)


class UsageRequested(Exception):
    """Raised when the usage text should be shown instead of running."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or "usage requested")
        self.reason = reason


def _unsigned(text: str) -> int:
    match = re.fullmatch(r"(0x)?([0-9a-zA-Z]+)", text)
    if match is None:
        raise argparse.ArgumentTypeError(f"Argument '{text}' failed to parse")
    base = 16 if match.group(1) else 10
    try:
        return int(match.group(2), base)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Argument '{text}' failed to parse") from exc


def build_parser() -> argparse.ArgumentParser:
    """The option parser; unknown options are left alone by the caller."""
    parser = argparse.ArgumentParser(
        prog="dynaMIS",
        description="Geometric MIS",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-a", "--algorithm", help="Algorithm Option")
    parser.add_argument("-m", "--modification", help="modType Option")
    parser.add_argument("-r", "--changeRatio", type=float, help="changeRatio")
    parser.add_argument("-l", "--height", type=float, help="label height")
    parser.add_argument("-w", "--width", type=float, help="label width")
    parser.add_argument("-k", type=_unsigned, default=4, help="gridK")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    parser.add_argument("-p", "--problem", action="store_true", help="Rectangle Problem Model")
    parser.add_argument("-g", "--greedy", action="store_true", help="Greedy Augmentation")
    parser.add_argument("-x", "--xspecial", action="store_true", help="Greedy graph for rectangle")
    parser.add_argument("-f", "--filename", help="input file")
    parser.add_argument("-d", default=DEFAULT_FOLDER, help="dictionary")
    parser.add_argument("-t", default=DEFAULT_FOLDER, help="tmp_dictionary")
    parser.add_argument("-s", type=_unsigned, default=0, help="seed")
    parser.add_argument("-c", "--recomputation", action="store_true", help="static version")
    return parser


def _base_name(path: str) -> str:
    return path[path.rfind("/") + 1:]


def parse_init_options(
    argv: Sequence[str], measures: JsonRecord | None = None
) -> Settings:
    """Parse the arguments (without program name) and record them in measures."""
    if measures is None:
        measures = JsonRecord()
    try:
        args, _unknown = build_parser().parse_known_args(list(argv))
    except argparse.ArgumentError as exc:
        raise ValueError(str(exc)) from exc

    settings = Settings()
    if args.filename is None:
        raise UsageRequested("Input file missing")
    settings.file = args.filename
    measures.add_nested("info", "file", _base_name(settings.file))

    if args.help:
        raise UsageRequested()

    settings.xspecial = args.xspecial
    settings.greedy = args.greedy
    settings.recomp = args.recomputation
    settings.rectangle = args.problem
    settings.result_folder = args.d
    settings.tmp_dictionary = args.t
    settings.seed = args.s

    settings.param_k = args.k
    measures.add_nested("info", "param_k", str(settings.param_k))

    if args.algorithm is not None:
        settings.algo_type = args.algorithm
        measures.add_nested("info", "algo_type", settings.algo_type)
    if args.modification is not None:
        settings.mod_type = args.modification
        measures.add_nested("info", "modification", settings.mod_type)
    if args.changeRatio is not None:
        settings.change_ratio = args.changeRatio
        measures.add_nested("info", "changeRatio", f"{settings.change_ratio:f}")
    if args.height is not None:
        settings.label_height = args.height
        measures.add_nested("info", "label height", f"{settings.label_height:f}")
    if args.width is not None:
        settings.label_width = args.width
        measures.add_nested("info", "label width", f"{settings.label_width:f}")
    return settings


def format_init_options(settings: Settings) -> str:
    """A summary of the options, one per line."""
    lines = [
        "dynaMIS Initialization options ",
        f"file:{settings.file}",
        f"algorithm:{settings.algo_type}-{settings.param_k}",
        f"modType:{settings.mod_type}",
        f"changeRatio:{settings.change_ratio:g}",
        f"result_folder:{settings.result_folder}",
        f"label_width:{settings.label_width:g}",
        f"label_height:{settings.label_height:g}",
        f"greedy:{int(settings.greedy)}",
        f"rectangle:{int(settings.rectangle)}",
        f"seed:{settings.seed}",
    ]
    return "\n".join(lines) + "\n"


def usage_text() -> str:
    """The manual of the program."""
    rule = "-" * 81
    return "\n".join(
        [
            "",
            "--------dynaMIS, a dynamic MIS solver (simulation) -----------------",
            "",
            "-------------------Usage--------------------------------------------------------",
            "./dynaMIS  <instance> [options]",
            "",
            "-------------------Options------------------------------------------------------",
            "   --output, -o : output the solution",
            "   --help, -h : output this help",
            "   --greedy, -g : greedy augmentation on",
            "   --problem, -p : rectangle problem",
            "   --algorithm, -a : algorithm in use (see options below)",
            "   --sigma, -s : width of a square",
            rule,
            "",
            "-------------------algorithm options------------------------------------------------------",
            "   ors : a dynamic MIS algorithm based on orthogonal range searching ",
            "   graph: a graph-based dynamic MIS algorithm",
            "   grid: a grid-based 4-approximation algorithm ",
            "   gridK: The group-shifting based algorithm. Need a extra parameter -k",
            "   line: stabbing-line based 2-approximation algorithm",
            "",
            '   *More details see the paper "Independent Sets of Dynamic Rectangles:'
            'Algorithms and Experiments"',
            rule,
            "",
        ]
    )


def measure_appendix(settings: Settings, append: str) -> str:
    """The suffix of a measurement file name."""
    return f"-{settings.algo_type}-{settings.mod_type}{append}"


def output_measure(settings: Settings, measures: JsonRecord, append: str) -> Path:
    """Write the measurements next to the results of this run."""
    return measures.output(
        settings.result_folder,
        measure_appendix(settings, append),
        _base_name(settings.file),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    measures = JsonRecord()
    try:
        settings = parse_init_options(args, measures)
    except UsageRequested as exc:
        if exc.reason:
            print(exc.reason, file=sys.stderr)
        print(usage_text())
        return 0
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_init_options(settings), end="")
    return 0