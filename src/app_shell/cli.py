import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from src.components.numeric import (
    NumericConfig,
    calculate,
    classify_age,
    create_factorial_cache,
    divide_modes,
    solve_quadratic,
)
from src.components.rainfall import (
    RainfallConfig,
    analyze_rainfall,
    export_csv,
    sample_rainfall_data,
)
from src.components.stats import sum_even_indexes, summarize
from src.components.table import TableConfig, generate_range
from src.components.text import TextConfig, analyze_text
from src.components.weather import analyze_weather
from src.domain.errors import WorksheetError
from src.rules.loader import load_rules_or_default
from src.rules.models import WorksheetRules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"

# One memo for the whole process; factorial and ncr both read from it
factorial_cache = create_factorial_cache()


def parse_number_list(raw: str) -> list[float]:
    """'1,2.5,3' -> [1.0, 2.5, 3.0]"""
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"not a comma-separated list of numbers: {raw!r}") from err


def parse_state_readings(raw: str) -> tuple[str, list[float]]:
    """'Lagos=12,15,9' -> ('Lagos', [12.0, 15.0, 9.0])"""
    state, sep, values = raw.partition("=")
    if not sep or not state.strip():
        raise argparse.ArgumentTypeError(f"expected STATE=v1,v2,...: {raw!r}")
    return state.strip(), parse_number_list(values)


def fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


# --- Handlers ---


def handle_calc(rules: WorksheetRules, args: argparse.Namespace) -> None:
    result = calculate(args.a, args.b, args.op, NumericConfig.from_rules(rules))
    print(f"{result.operation_name}: {fmt(result.a)} {result.op} {fmt(result.b)} = {fmt(result.value)}")


def handle_factorial(rules: WorksheetRules, args: argparse.Namespace) -> None:
    print(f"{args.n}! = {factorial_cache.factorial(args.n)}")


def handle_ncr(rules: WorksheetRules, args: argparse.Namespace) -> None:
    result = factorial_cache.combinations(args.n, args.r)
    print(f"{result.n}! = {result.n_factorial}")
    print(f"{result.r}! = {result.r_factorial}")
    print(f"({result.n}-{result.r})! = {result.n_minus_r_factorial}")
    print(f"{result.n}C{result.r} = {result.value}")


def handle_quadratic(rules: WorksheetRules, args: argparse.Namespace) -> None:
    result = solve_quadratic(args.a, args.b, args.c)
    print(f"Discriminant: {fmt(result.discriminant)} ({result.kind})")
    for index, root in enumerate(result.roots, start=1):
        if root.is_real:
            print(f"x{index} = {fmt(root.real)}")
        else:
            sign = "+" if root.imaginary >= 0 else "-"
            print(f"x{index} = {fmt(root.real)} {sign} {fmt(abs(root.imaginary))}i")


def handle_divide(rules: WorksheetRules, args: argparse.Namespace) -> None:
    result = divide_modes(args.numerator, args.denominator)
    print(f"Real division:    {fmt(result.real_division)}")
    print(f"Integer division: {fmt(result.integer_division)}")
    print(f"Modulo:           {fmt(result.modulo)}")


def handle_age(rules: WorksheetRules, args: argparse.Namespace) -> None:
    band = classify_age(args.age, NumericConfig.from_rules(rules))
    print(f"Age {band.age}: {band.category} - {band.description}")


def handle_stats(rules: WorksheetRules, args: argparse.Namespace) -> None:
    summary = summarize(args.values)
    print(f"Count:    {summary.count}")
    print(f"Mean:     {fmt(summary.mean)}")
    print(f"Median:   {fmt(summary.median)}")
    print(f"Variance: {fmt(summary.variance)}")
    print(f"Std Dev:  {fmt(summary.std_dev)}")
    print(f"Min:      {fmt(summary.min)}")
    print(f"Max:      {fmt(summary.max)}")
    print(f"Range:    {fmt(summary.range)}")
    print(f"Sum at even indexes (from 2): {fmt(sum_even_indexes(args.values).total)}")


def handle_table(rules: WorksheetRules, args: argparse.Namespace) -> None:
    table = generate_range(args.start, args.end, TableConfig.from_rules(rules))
    print(f"{'n':>6} {'n^2':>10} {'sqrt(n)':>10} {'n^3':>12} {'cbrt(n)':>10}")
    for row in table.rows:
        print(
            f"{row.n:>6} {row.n_squared:>10} {row.n_square_root:>10.4f} "
            f"{row.n_cube:>12} {row.n_cube_root:>10.4f}"
        )
    for stats in table.column_stats:
        print(f"{stats.column}: min={fmt(stats.min)} max={fmt(stats.max)} avg={fmt(stats.avg)}")


def handle_words(rules: WorksheetRules, args: argparse.Namespace) -> None:
    text = Path(args.file).read_text() if args.file else " ".join(args.text)
    analysis = analyze_text(text, args.target, TextConfig.from_rules(rules))
    print(f"'{analysis.target_word}' occurs {analysis.occurrences} time(s)")
    print(f"Total words: {analysis.total_words}, unique: {analysis.unique_word_count}")
    for entry in analysis.frequency_table:
        print(f"  {entry.word:<15} {entry.count}")


def handle_weather(rules: WorksheetRules, args: argparse.Namespace) -> None:
    summary = analyze_weather(args.stations)
    for index, station_mean in enumerate(summary.station_means, start=1):
        print(f"Station {index}: mean {fmt(station_mean)}")
    print(f"Overall mean: {fmt(summary.overall_mean)}")
    print(f"Hottest: {fmt(summary.hottest)}  Coldest: {fmt(summary.coldest)}")


def handle_rainfall(rules: WorksheetRules, args: argparse.Namespace) -> None:
    readings = dict(args.states) if args.states else sample_rainfall_data()
    report = analyze_rainfall(readings, RainfallConfig.from_rules(rules))

    print(f"{'STATE':<18} {'REGION':<26} {'MOR':>8} {'STD DEV':>8}  STATUS")
    for s in report.states:
        status = "WARNING" if s.flood_warning else "OK"
        print(f"{s.state:<18} {s.region:<26} {s.mor:>8.2f} {s.std_dev:>8.2f}  {status} ({s.stability})")
    print(f"National MOR: {report.national_mor:.2f} mm over {report.total_stations} stations")
    if report.flood_warning_states:
        print("Flood warning: " + ", ".join(report.flood_warning_states))
    else:
        print("No states require a flooding warning.")

    if args.csv:
        Path(args.csv).write_text(export_csv(report))
        logger.info("Report exported to %s", args.csv)


HANDLERS = {
    "calc": handle_calc,
    "factorial": handle_factorial,
    "ncr": handle_ncr,
    "quadratic": handle_quadratic,
    "divide": handle_divide,
    "age": handle_age,
    "stats": handle_stats,
    "table": handle_table,
    "words": handle_words,
    "weather": handle_weather,
    "rainfall": handle_rainfall,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Numeric Worksheet CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # calc
    calc_parser = subparsers.add_parser("calc", help="Two-operand arithmetic")
    calc_parser.add_argument("a", type=float)
    calc_parser.add_argument("op", help="One of + - * / %%")
    calc_parser.add_argument("b", type=float)

    # factorial / ncr
    factorial_parser = subparsers.add_parser("factorial", help="n!")
    factorial_parser.add_argument("n", type=int)

    ncr_parser = subparsers.add_parser("ncr", help="Combinations nCr")
    ncr_parser.add_argument("n", type=int)
    ncr_parser.add_argument("r", type=int)

    # quadratic
    quadratic_parser = subparsers.add_parser("quadratic", help="Roots of ax^2 + bx + c = 0")
    for name in ("a", "b", "c"):
        quadratic_parser.add_argument(name, type=float)

    # divide
    divide_parser = subparsers.add_parser("divide", help="Real, integer and modulo division")
    divide_parser.add_argument("numerator", type=float)
    divide_parser.add_argument("denominator", type=float)

    # age
    age_parser = subparsers.add_parser("age", help="Classify an age")
    age_parser.add_argument("age", type=int)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Descriptive statistics")
    stats_parser.add_argument("values", type=float, nargs="+")

    # table
    table_parser = subparsers.add_parser("table", help="Powers and roots for a range")
    table_parser.add_argument("start", type=int)
    table_parser.add_argument("end", type=int)

    # words
    words_parser = subparsers.add_parser("words", help="Word occurrences and frequencies")
    words_parser.add_argument("target", help="Word to count")
    words_parser.add_argument("text", nargs="*", help="Text to analyze")
    words_parser.add_argument("--file", help="Read the text from a file instead")

    # weather
    weather_parser = subparsers.add_parser("weather", help="Per-station temperature means")
    weather_parser.add_argument(
        "stations", type=parse_number_list, nargs="+", help="One comma-separated row per station"
    )

    # rainfall
    rainfall_parser = subparsers.add_parser("rainfall", help="State rainfall analysis")
    rainfall_parser.add_argument(
        "states",
        type=parse_state_readings,
        nargs="*",
        help="STATE=v1,v2,... (sample data when omitted)",
    )
    rainfall_parser.add_argument("--csv", help="Also write the per-state table to this CSV file")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    try:
        rules = load_rules_or_default(Path(args.rules))
    except (FileNotFoundError, ValueError) as e:
        logger.error("Rules load failed: %s", e)
        return 1

    try:
        HANDLERS[args.command](rules, args)
    except WorksheetError as e:
        logger.error("%s failed: %s", args.command, e.message)
        return 1
    except OSError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
