import argparse
import logging
import sys

from termcolor import colored

from tinylox.errors import LoxRuntimeError
from tinylox.interpreter import Interpreter
from tinylox.parser import Parser
from tinylox.printer import AstPrinter
from tinylox.scanner import Scanner

logger = logging.getLogger(__name__)

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


class Lox:
    def __init__(self, stdout=None, stderr=None, color=False):
        self.interpreter = Interpreter(stdout)
        self.stderr = stderr
        self.color = color
        self.errors = []
        self.had_error = False
        self.had_runtime_error = False

    def run_file(self, filename):
        with open(filename, "r") as file:
            self.run(file.read())

    def run_prompt(self, prompt="> "):
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print(file=self.interpreter.stdout)
                break
            self.had_error = False
            self.had_runtime_error = False
            self.run(line)

    def run(self, source):
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()
        for error in scanner.errors:
            self.report(error)
        logger.debug("scanned %d tokens", len(tokens))

        parser = Parser(tokens, self.report)
        statements = parser.parse()

        if logger.isEnabledFor(logging.DEBUG):
            printer = AstPrinter()
            for statement in statements:
                try:
                    logger.debug("parsed %s", printer.print(statement))
                except RecursionError:
                    logger.debug("parsed a statement too deeply nested to print")

        if self.had_error:
            return

        try:
            self.interpreter.interpret(statements)
        except LoxRuntimeError as error:
            self.runtime_error(error)

    def report(self, error):
        self.errors.append(error)
        self.had_error = True
        self.write_error(error)

    def runtime_error(self, error):
        self.errors.append(error)
        self.had_runtime_error = True
        self.write_error(error)

    def write_error(self, error):
        text = str(error)
        if self.color:
            text = colored(text, "red", attrs=["bold"], force_color=True)
        print(text, file=self.stderr if self.stderr is not None else sys.stderr)

    def exit_status(self):
        if self.had_error:
            return EX_DATAERR
        if self.had_runtime_error:
            return EX_SOFTWARE
        return 0


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def make_argument_parser():
    parser = ArgumentParser(
        prog="tinylox", description="Run Lox scripts")
    parser.add_argument("script", nargs="?")
    parser.add_argument("--debug", action="store_true",
                        help="log scanned tokens and parsed syntax trees")
    parser.add_argument("--no-color", action="store_true",
                        help="never color diagnostics")
    return parser


def main(argv=None):
    args = make_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    lox = Lox(color=not args.no_color and sys.stderr.isatty())
    if args.script is not None:
        try:
            lox.run_file(args.script)
        except OSError as error:
            print(f"tinylox: cannot read '{args.script}': {error.strerror}", file=sys.stderr)
            sys.exit(EX_NOINPUT)
        sys.exit(lox.exit_status())
    lox.run_prompt()
