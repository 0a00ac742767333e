import argparse
import logging
import sys
from typing import Iterable, List, Optional

from colorama import Fore

from . import calculator
from . import filetypes
from . import version
from .errors import CalculatorError
from .printer import Printer
from .rpn import Expression, parse_rpn


log = logging.getLogger('rpncalc')


def read_stdin_expressions() -> List[str]:
    return [
        line.strip() for line in sys.stdin
        if line.strip() and not line.lstrip().startswith('#')
    ]


def print_result(printer: Printer, expression_str: str, result: str, show_expression: bool = False):
    if show_expression:
        with printer.color(Fore.CYAN):
            printer.write(expression_str)
        with printer.bright().color(Fore.WHITE):
            printer.write(' = ')
    if result in ('nan', 'inf', '-inf'):
        with printer.color(Fore.YELLOW):
            printer.write(result)
    else:
        with printer.bright().color(Fore.GREEN):
            printer.write(result)
    printer.newline()


def evaluate_all(
        printer: Printer,
        expressions: Iterable[str],
        postfix: bool = False,
        rpn_only: bool = False,
        show_expression: bool = False,
        show_progress: bool = False
) -> int:
    """Evaluates and prints each expression in turn, returning the number that failed."""
    failures = 0
    if show_progress:
        expressions = printer.tqdm(expressions, desc="Evaluating", leave=False, unit=" expressions")
    for expression_str in expressions:
        try:
            if postfix:
                expression: Expression = parse_rpn(expression_str)
            else:
                expression = calculator.parse(expression_str)
            if rpn_only:
                result = str(expression)
            else:
                result = repr(expression.eval())
        except CalculatorError as e:
            log.error(f"{expression_str!r}: {e!s}")
            failures += 1
            continue
        print_result(printer, expression_str, result, show_expression=show_expression)
    return failures


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Evaluates whitespace-delimited arithmetic expressions such as `( 1 + 2 ) * 3`.'
    )
    parser.add_argument('EXPRESSION', type=str, nargs='*',
                        help='the expression to evaluate; its words are joined with spaces. If omitted, and no '
                             '`--file` is given, expressions are read one per line from STDIN')
    parser.add_argument('--file', '-f', type=str, default=None,
                        help='evaluate every expression in this file; pass \'-\' to read from STDIN')
    file_type_group = parser.add_argument_group(title='input file types')
    mime_group = file_type_group.add_mutually_exclusive_group()
    mime_group.add_argument(
        '--mime',
        type=str,
        default=None,
        help='explicitly specify the MIME type of `--file`',
        choices=filetypes.FILETYPES_BY_MIME.keys()
    )
    for typename, filetype in sorted(filetypes.FILETYPES_BY_TYPENAME.items()):
        mime = filetype.default_mimetype
        mime_group.add_argument(
            f'--{typename}',
            dest=f'mime_{typename}',
            action='store_const',
            const=mime,
            default=None,
            help=f'equivalent to `--mime {mime}`'
        )
    parser.add_argument('--postfix', '-p', action='store_true',
                        help='the input is already in reverse Polish notation, e.g. `1 2 + 3 *`')
    formatting = parser.add_argument_group(title='output formatting')
    formatting.add_argument('--rpn', '-r', action='store_true',
                            help='print the reverse Polish notation of each expression rather than its value')
    formatting.add_argument('--show-expression', '-s', action='store_true',
                            help='print each expression before its result')
    color_group = formatting.add_mutually_exclusive_group()
    color_group.add_argument(
        '--color', '-c',
        action='store_true',
        default=None,
        help='force ANSI color output; this is turned on by default only if run from a TTY'
    )
    color_group.add_argument(
        '--no-color',
        action='store_true',
        default=None,
        help='do not use ANSI color in the output'
    )
    parser.add_argument(
        '--no-status',
        action='store_true',
        help='do not display progress bars'
    )
    log_section = parser.add_argument_group(title='logging')
    log_group = log_section.add_mutually_exclusive_group()
    log_group.add_argument('--log-level', type=str, default='INFO', choices=list(
        logging.getLevelName(x)
        for x in range(1, 101)
        if not logging.getLevelName(x).startswith('Level')
    ), help='sets the log level for rpncalc (default=INFO)')
    log_group.add_argument('--debug', action='store_true', help='equivalent to `--log-level=DEBUG`')
    log_group.add_argument('--quiet', action='store_true', help='equivalent to `--log-level=CRITICAL --no-status`')
    parser.add_argument('--version', '-v', action='store_true', help='print rpncalc\'s version information to STDERR')
    parser.add_argument('-dumpversion', action='store_true',
                        help='print rpncalc\'s raw version information to STDOUT and exit')

    if argv is None:
        argv = sys.argv

    args = parser.parse_args(argv[1:])

    if args.debug:
        numeric_log_level = logging.DEBUG
    elif args.quiet:
        numeric_log_level = logging.CRITICAL
    else:
        numeric_log_level = getattr(logging, args.log_level.upper(), None)
        if not isinstance(numeric_log_level, int):
            sys.stderr.write(f'Invalid log level: {args.log_level}')
            return 1

    if args.dumpversion:
        print(' '.join(map(str, version.__version_tuple__)))
        return 0

    if args.version:
        sys.stderr.write(f"rpncalc version {version.VERSION_STRING}\n")
        if not args.EXPRESSION and args.file is None:
            return 0

    if args.no_color:
        ansi_color = False
    elif args.color:
        ansi_color = True
    else:
        ansi_color = None

    quiet = args.no_status or args.quiet

    logging.basicConfig(level=numeric_log_level, stream=Printer(
        sys.stderr,
        quiet=quiet,
    ))

    filetypes.init_mimetypes()

    mime_type: Optional[str] = args.mime
    if mime_type is None:
        for typename in filetypes.FILETYPES_BY_TYPENAME.keys():
            mime_type = getattr(args, f'mime_{typename}')
            if mime_type is not None:
                break

    if args.file is not None and args.EXPRESSION:
        log.error("An expression cannot be combined with `--file`")
        return 1
    elif args.file == '-':
        expressions = read_stdin_expressions()
    elif args.file is not None:
        try:
            expressions = filetypes.get_filetype(args.file, mime_type).load_expressions(args.file)
        except (OSError, ValueError) as e:
            log.error(str(e))
            return 1
    elif args.EXPRESSION:
        expressions = [' '.join(args.EXPRESSION)]
    else:
        expressions = read_stdin_expressions()

    printer = Printer(sys.stdout, ansi_color=ansi_color, quiet=quiet)

    try:
        with printer:
            failures = evaluate_all(
                printer,
                expressions,
                postfix=args.postfix,
                rpn_only=args.rpn,
                show_expression=args.show_expression,
                show_progress=args.file is not None
            )
    except KeyboardInterrupt:
        return 1
    finally:
        printer.close()

    if failures:
        log.debug(f"{failures} of {len(expressions)} expressions failed")
        return 1
    else:
        return 0


if __name__ == '__main__':
    sys.exit(main())
