"""主程序入口 - 命令行求值算术表达式"""
import argparse
import logging
import sys

from config.config import *
from evaluator import ExpressionEvaluator, ExpressionError

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    level = logging.DEBUG if verbose else LOGGING_CONFIG['level']
    logging.basicConfig(level=level, format=LOGGING_CONFIG['format'])


def run_once(evaluator, expression, postfix=False, out=None, err=None):
    """求值单个表达式，错误转换为提示信息；返回退出码"""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        if postfix:
            print(evaluator.to_postfix(expression), file=out)
        else:
            print(evaluator.evaluate(expression), file=out)
    except ExpressionError as e:
        logger.debug(f"{type(e).__name__} for {expression!r}")
        print(f"Error: {e.message}", file=err)
        return 1
    return 0


def repl(evaluator, postfix=False, stdin=None, out=None, err=None):
    """交互循环，EOF或exit/quit退出"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    while True:
        out.write(CLI_CONFIG['prompt'])
        out.flush()
        line = stdin.readline()
        if not line:
            break
        expression = line.strip()
        if not expression:
            continue
        if expression.lower() in CLI_CONFIG['exit_commands']:
            break
        run_once(evaluator, expression, postfix=postfix, out=out, err=err)
    return 0


def main(args):
    validate_config()
    setup_logging(args.verbose)

    evaluator = ExpressionEvaluator()

    if args.expression:
        return run_once(evaluator, ' '.join(args.expression), postfix=args.postfix)

    logger.info("No expression given, starting interactive mode")
    return repl(evaluator, postfix=args.postfix)


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")

    parser.add_argument(
        "expression",
        nargs="*",
        help="Infix expression, e.g. \"(2+3)*4\". Omit to start interactive mode"
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the postfix (RPN) form instead of the value"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
