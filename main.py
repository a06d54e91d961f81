"""主程序入口 - 交互式计算器"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, LOGGING_CONFIG, validate_config
from core import EvaluationError, evaluate
from utils import format_result

logger = logging.getLogger(__name__)


def is_quit_command(line):
    return line.strip().lower() in REPL_CONFIG["quit_commands"]


def repl(stdin=None, stdout=None, stderr=None):
    """
    逐行读取表达式并输出结果，错误输出到 stderr 后继续
    Returns:
        退出码
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    while True:
        if REPL_CONFIG["prompt"]:
            stdout.write(REPL_CONFIG["prompt"])
            stdout.flush()
        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to read stdin: {e}")
            return 1

        if not line:  # EOF
            logger.info("End of input")
            return 0

        expression = line.strip()
        if is_quit_command(expression):
            return 0

        try:
            result = evaluate(expression)
        except EvaluationError as e:
            print(e, file=stderr)
            continue
        print(format_result(result), file=stdout)


def main():
    validate_config()
    logger.info("Starting calculator")
    code = repl()
    logger.info("Calculator stopped")
    return code


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Shunting-yard calculator: type an expression per line, 'q' or 'quit' to exit"
    )
    parser.parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, LOGGING_CONFIG["level"]),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main())
