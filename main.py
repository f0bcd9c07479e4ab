#!/usr/bin/env python3
"""
Command-line entry point for the statistics toolkit.
"""

# Forms (one subcommand each):
#   stats       single-variable summary
#   paired      paired X/Y summary with the least-squares line
#   regression  simple linear regression (optional scatter plot)
#   ttest       one-sample t-test against mu0
#   anova       one-way ANOVA over two or more groups
#   cheatsheet  statistics cheat sheet
#   tutorial    R basics tutorial
#
# Numbers may be typed inline ("4.2, 5.1 6.0") or read from a CSV column with
# --csv FILE --column NAME.

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pocketstats.analysis import (
    SIGNIFICANCE_LEVEL,
    anova_table,
    group_summary_dataframe,
    one_sample_t_test,
    one_way_anova,
    paired_stats,
    simple_regression,
    single_variable_stats,
)
from pocketstats.data_processing import (
    column_values,
    groups_from_long_table,
    load_table,
    parse_groups,
    parse_numbers,
)
from pocketstats.guides import render_cheat_sheet, render_r_basics
from pocketstats.output import result_to_frame, save_results_to_csv
from pocketstats.plotting import plot_group_means, plot_histogram, plot_regression
from pocketstats.reporting import (
    format_anova,
    format_paired_stats,
    format_regression,
    format_single_stats,
    format_t_test,
)

logger = logging.getLogger("pocketstats")


def _values(args, text_attr="data", column_attr="column"):
    """Return numbers from inline text or from a CSV column."""
    column = getattr(args, column_attr, None)
    if getattr(args, "csv", None) and column:
        return column_values(load_table(args.csv), column)
    return parse_numbers(getattr(args, text_attr, None))


def run_stats(args):
    values = _values(args)
    result = single_variable_stats(values)
    print(format_single_stats(result))
    if args.plot:
        path = plot_histogram(values, output_dir=args.output_dir)
        logger.info("Histogram: %s", path)
    if args.save:
        save_results_to_csv({"single_stats": result_to_frame(result)}, args.output_dir)


def run_paired(args):
    x = _values(args, "x", "x_column")
    y = _values(args, "y", "y_column")
    result = paired_stats(x, y)
    print(format_paired_stats(result))
    if args.save:
        save_results_to_csv({"paired_stats": result_to_frame(result)}, args.output_dir)


def run_regression(args):
    x = _values(args, "x", "x_column")
    y = _values(args, "y", "y_column")
    fit = simple_regression(x, y)
    print(format_regression(fit))
    if args.plot:
        path = plot_regression(x, y, fit, output_dir=args.output_dir)
        logger.info("Regression plot: %s", path)
    if args.save:
        save_results_to_csv({"regression": result_to_frame(fit)}, args.output_dir)


def run_ttest(args):
    values = _values(args)
    result = one_sample_t_test(
        values, args.mu0, alternative=args.alternative, alpha=args.alpha
    )
    print(format_t_test(result))
    if args.save:
        save_results_to_csv({"t_test": result_to_frame(result)}, args.output_dir)


def run_anova(args):
    if args.csv:
        groups = groups_from_long_table(
            load_table(args.csv), args.group_column, args.value_column
        )
    else:
        groups = parse_groups(args.group)
    result = one_way_anova(groups, alpha=args.alpha)
    print(format_anova(result))
    if args.plot:
        path = plot_group_means(result, output_dir=args.output_dir)
        logger.info("Group means plot: %s", path)
    if args.save:
        save_results_to_csv(
            {
                "anova_table": anova_table(result),
                "group_summary": group_summary_dataframe(result),
            },
            args.output_dir,
        )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pocketstats", description="Your pocket stats lab."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--csv", help="read values from this CSV file")
    common.add_argument("--output-dir", default="output")
    common.add_argument("--save", action="store_true", help="write result CSVs")

    p = sub.add_parser("stats", parents=[common], help="single-variable stats")
    p.add_argument("data", nargs="?", help='values, e.g. "3.2, 4.1 5.0"')
    p.add_argument("--column")
    p.add_argument("--plot", action="store_true")
    p.set_defaults(func=run_stats)

    for name, func, help_text in (
        ("paired", run_paired, "paired stats"),
        ("regression", run_regression, "simple linear regression"),
    ):
        p = sub.add_parser(name, parents=[common], help=help_text)
        p.add_argument("x", nargs="?")
        p.add_argument("y", nargs="?")
        p.add_argument("--x-column")
        p.add_argument("--y-column")
        if name == "regression":
            p.add_argument("--plot", action="store_true")
        p.set_defaults(func=func)

    p = sub.add_parser("ttest", parents=[common], help="one-sample t-test")
    p.add_argument("data", nargs="?")
    p.add_argument("--mu0", type=float, required=True, help="hypothesized mean")
    p.add_argument("--column")
    p.add_argument(
        "--alternative", choices=("two-sided", "less", "greater"), default="two-sided"
    )
    p.add_argument("--alpha", type=float, default=SIGNIFICANCE_LEVEL)
    p.set_defaults(func=run_ttest)

    p = sub.add_parser("anova", parents=[common], help="one-way ANOVA")
    p.add_argument("group", nargs="*", help='one quoted value list per group')
    p.add_argument("--group-column", default="group")
    p.add_argument("--value-column", default="value")
    p.add_argument("--alpha", type=float, default=SIGNIFICANCE_LEVEL)
    p.add_argument("--plot", action="store_true")
    p.set_defaults(func=run_anova)

    p = sub.add_parser("cheatsheet", help="statistics cheat sheet")
    p.set_defaults(func=lambda args: print(render_cheat_sheet()))

    p = sub.add_parser("tutorial", help="R basics tutorial")
    p.set_defaults(func=lambda args: print(render_r_basics()))

    return parser


def main(argv=None):
    """Parse arguments, run one form, and report invalid input."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        args.func(args)
    except (ValueError, KeyError) as e:
        logger.error("%s", e)
        print(f"⚠️ Invalid input: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
