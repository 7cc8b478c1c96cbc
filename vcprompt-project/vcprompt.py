import argparse
import sys
from commands import prompt
from utils.render import FORMAT_HELP


class PromptArgumentParser(argparse.ArgumentParser):
    # Usage errors print the full help (options and format codes) before exiting with status 2
    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n")


def build_parser():
    formats = "\n".join(f"  {code}  {text}" for code, text in FORMAT_HELP)
    parser = PromptArgumentParser(
        prog="vcprompt",
        description="Print version control information for use in shell prompts.",
        epilog=f"formats:\n{formats}\n\nAll other characters are expanded as-is.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # '%' must be doubled in argparse help strings
    parser.add_argument("-f", "--format", default=None,
                        help="format string (default: %%n:%%b, or 'format' in ~/.vcprompt)")
    parser.add_argument("-d", "--debug", action="store_true", help="print debug diagnostics")
    return parser

# The main entry point for vcprompt
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    prompt.run(args)

if __name__ == "__main__":
    main()
