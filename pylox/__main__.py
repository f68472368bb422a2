import argparse
import sys

from pylox.lox import EX_USAGE, PyLox


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def main(argv=None):
    parser = ArgumentParser(
        prog="pylox", description="Run Lox scripts")
    parser.add_argument("filename", nargs="?")
    parser.add_argument(
        "--print-ast", action="store_true",
        help="print the syntax tree of the script instead of running it")
    args = parser.parse_args(argv)

    lox = PyLox()
    if args.filename is None:
        if args.print_ast:
            parser.error("--print-ast requires a script")
        lox.run_prompt()
        return 0

    if args.print_ast:
        with open(args.filename, "r") as file:
            lox.print_ast(file.read())
        return lox.exit_status()
    return lox.run_file(args.filename)


if __name__ == "__main__":
    sys.exit(main())
