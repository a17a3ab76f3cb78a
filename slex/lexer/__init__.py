from . import tokens
from . import readers
from slex.utils.scanner import Scanner, Location, SourceCode
from slex.errors import LexerError, UnexpectedCharacter

import dataclasses as dc
import logging

log = logging.getLogger(__name__)


@dc.dataclass(frozen=True)
class Lexeme:
    token: tokens.Token
    location: Location

    def __str__(self):
        return f'{self.location.line + 1:5} | {self.token!r}'


def lex(source):
    # No two readers accept the same first character
    tok_readers = [
        readers.read_number_token, readers.read_string_token,
        readers.read_char_token, readers.read_ident_token,
        readers.read_symbol_token
    ]

    scan = Scanner(str(source))

    while True:
        readers.skip_ignored(scan)

        if not scan:
            return

        location = scan.location
        for reader in tok_readers:
            tok = reader(scan)
            if tok is not None:
                yield Lexeme(tok, location)
                break
        else:
            raise UnexpectedCharacter(scan.peek(), location)


def tokenize(source):
    """Lex the whole of source, returning a list of Lexemes.

    Either every token is returned or a single LexerError is raised for
    the first problem found; nothing is returned alongside an error.
    """
    lexemes = list(lex(source))
    log.debug('lexed %d tokens from %d characters', len(lexemes), len(str(source)))
    return lexemes
