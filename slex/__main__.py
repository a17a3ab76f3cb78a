from slex.lexer import tokenize, SourceCode
from slex.errors import CompilerError
import argparse
import logging
import sys


slex = argparse.ArgumentParser(
    description='slex, split source text into tokens',
    prog='slex'
)

slex.add_argument(
    'input',
    help='The source file to tokenize'
)

slex.add_argument(
    '-v', '--verbose', help='log debugging information to stderr',
    action='store_true'
)


def main(argv=None):
    args = slex.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s:%(name)s:%(message)s'
        )

    try:
        source = SourceCode.from_file(args.input)
    except (OSError, UnicodeDecodeError) as err:
        slex.error(str(err))

    try:
        for lexeme in tokenize(source):
            print(lexeme)
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
