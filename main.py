"""主程序入口 - 中缀表达式转后缀并求值"""
import argparse
import logging

import pandas as pd

from config.config import *
from core import ExpressionError, InfixConverter, RPNEvaluator, tokens_to_string, validate_alphabet
from data.data_loader import load_binding_table, load_expressions, load_variable_values
from utils.formatting import format_trace

logger = logging.getLogger(__name__)


def run_expressions(expressions, bindings, strict=False):
    """
    逐个转换并求值；单个表达式失败不影响后续表达式
    Returns:
        [{'infix', 'postfix', 'result', 'error'}, ...]
    """
    results = []
    for infix in expressions:
        postfix = None
        result = None
        error = None
        try:
            tokens = InfixConverter.convert(infix, strict=strict)
            postfix = tokens_to_string(tokens)
            result = RPNEvaluator.evaluate(tokens, bindings)
        except ExpressionError as e:
            error = str(e)
            logger.error(f"Failed to evaluate '{infix}': {error}")

        for line in format_trace(infix, bindings, postfix, result=result, error=error):
            print(line)
        results.append({'infix': infix, 'postfix': postfix, 'result': result, 'error': error})

    failed = sum(1 for r in results if r['error'] is not None)
    logger.info(f"Evaluated {len(results)} expressions, {failed} failed")
    return results


def run_batch(expressions, table, strict=False):
    """
    对绑定表的每一行求值每个表达式
    Returns:
        DataFrame，每个表达式一列；失败的表达式不出现在结果中
    """
    columns = {}
    for infix in expressions:
        try:
            tokens = InfixConverter.convert(infix, strict=strict)
            columns[infix] = RPNEvaluator.evaluate_frame(tokens, table)
            logger.info(f"{infix} -> {tokens_to_string(tokens)}: {len(table)} rows")
        except ExpressionError as e:
            logger.error(f"Batch evaluation of '{infix}' failed: {e}")
    return pd.DataFrame(columns, index=table.index)


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()
    logger.info("Starting infix to postfix evaluation")

    alphabet = validate_alphabet(args.alphabet)
    if args.expressions_path:
        expressions = load_expressions(args.expressions_path)
    else:
        expressions = list(DEFAULT_EXPRESSIONS)

    if args.bindings_csv:
        logger.info("=== Batch evaluation over binding table ===")
        table = load_binding_table(args.bindings_csv, alphabet=alphabet)
        results = run_batch(expressions, table, strict=args.strict)
        print(results.to_string())
        if args.save_results:
            logger.info(f"Saving results to {args.output_path}")
            results.to_csv(args.output_path)
        return results

    bindings = load_variable_values(args.values_path, alphabet=alphabet)
    return run_expressions(expressions, bindings, strict=args.strict)


def build_parser():
    parser = argparse.ArgumentParser(description="Infix to postfix converter and evaluator")

    parser.add_argument(
        "--values_path",
        type=str,
        default=VARIABLE_CONFIG['values_path'],
        help="File with one integer per line, in identifier order"
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=VARIABLE_CONFIG['alphabet'],
        help="Identifiers that may be bound (default: abcdef)"
    )
    parser.add_argument(
        "--expressions_path",
        type=str,
        default=DATA_CONFIG['expressions_path'],
        help="File with one infix expression per line (default: built-in list)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=CONVERTER_CONFIG['strict'],
        help="Reject unmatched parentheses and unrecognized characters"
    )
    parser.add_argument(
        "--bindings_csv",
        type=str,
        default=DATA_CONFIG['bindings_csv'],
        help="CSV with one column per variable; evaluates every row"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save batch results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=DATA_CONFIG['output_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    main(args)
