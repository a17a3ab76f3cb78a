import string
from slex.lexer import tokens
from slex.errors import (
    UnterminatedString, InvalidCharacterLiteral, MalformedNumber
)


INT_MAX = 2**63 - 1

def is_digit(char):
    return char in string.digits

# str.isspace also accepts the \x1c-\x1f separators, which are not
# whitespace here.
def is_whitespace(char):
    return char.isspace() and char not in '\x1c\x1d\x1e\x1f'

def is_ident_start(char):
    return char in string.ascii_letters

def is_ident_char(char):
    # The apostrophe is allowed after the first character (eg x'), only
    # a leading one starts a character literal.
    return char.isalpha() or char == '_' or is_digit(char) or char == "'"


def skip_ignored(scan):
    while char := scan.peek():
        if char == '!':
            # Line comment.  The newline itself is left for the next
            # round so it is counted like any other.
            scan.consume_while(lambda c: c != '\n')
        elif is_whitespace(char):
            scan.advance()
        else:
            break


def read_number_token(scan):
    if not scan.check(is_digit):
        return

    start = scan.location
    # Multiple dots are swallowed too, and rejected below when parsing
    text = scan.consume_while(lambda c: is_digit(c) or c == '.')
    if '.' in text:
        try: return tokens.LiteralToken(tokens.FloatLiteral(float(text)))
        except ValueError:
            raise MalformedNumber(text, start) from None

    # Checking the length first keeps huge runs away from int(), which
    # refuses to convert more than a few thousand digits.
    digits = text.lstrip('0') or '0'
    if len(digits) > len(str(INT_MAX)) or int(digits) > INT_MAX:
        raise MalformedNumber(text, start, 'does not fit in 64 bits')
    return tokens.LiteralToken(tokens.IntLiteral(int(digits)))


def read_string_token(scan):
    start = scan.location
    if not scan.exact('"'):
        return

    # No escape sequences: a backslash is just a backslash
    text = scan.consume_while(lambda c: c != '"')
    if not scan.exact('"'):
        raise UnterminatedString(start)
    return tokens.LiteralToken(tokens.StringLiteral(text))


def read_char_token(scan):
    start = scan.location
    if not scan.exact("'"):
        return

    text = scan.consume_while(lambda c: c != "'")
    if not scan.exact("'"):
        raise InvalidCharacterLiteral.unterminated(text, start)
    if len(text) != 1:
        raise InvalidCharacterLiteral(text, start)
    return tokens.LiteralToken(tokens.CharLiteral(text))


bool_literals = {'true': True, 'false': False}

def read_ident_token(scan):
    if not scan.check(is_ident_start):
        return

    ident = scan.consume_while(is_ident_char)
    if ident in bool_literals:
        return tokens.LiteralToken(tokens.BoolLiteral(bool_literals[ident]))
    return tokens.Ident(ident)


# Longest first, so that -> wins over -
symbol_tokens = sorted(
    tokens.enum_tokens, key=lambda tok: len(str(tok)), reverse=True
)

def read_symbol_token(scan):
    for symbol in symbol_tokens:
        if scan.exact(str(symbol)):
            return symbol
