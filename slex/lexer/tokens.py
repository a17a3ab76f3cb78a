import enum
import dataclasses as dc


class Literal:
    pass


@dc.dataclass(frozen=True)
class IntLiteral(Literal):
    value: int


@dc.dataclass(frozen=True)
class FloatLiteral(Literal):
    value: float


@dc.dataclass(frozen=True)
class CharLiteral(Literal):
    value: str


@dc.dataclass(frozen=True)
class BoolLiteral(Literal):
    value: bool


@dc.dataclass(frozen=True)
class StringLiteral(Literal):
    value: str


class Token:
    pass


@dc.dataclass(frozen=True)
class LiteralToken(Token):
    literal: Literal

    @property
    def value(self):
        return self.literal.value

    def __repr__(self):
        return f'<LiteralToken {self.literal!r}>'


# Keywords are not special at this level, so `if` and `while` are
# plain identifiers too.  The parser decides what they mean.
@dc.dataclass(frozen=True)
class Ident(Token):
    name: str

    def __repr__(self):
        return f'<IdentToken {self.name}>'

    def __str__(self):
        return self.name


class EnumToken(Token, enum.Enum):
    # Enums with mixins behave differently between Python 3.10 and
    # 3.11 unless __new__ sets _value_ on the new member itself.
    def __new__(cls, val):
        member = Token.__new__(cls)
        member._value_ = val
        return member

    def __str__(self):
        return self.value


enum_tokens = set()
def include_enum(cls):
    enum_tokens.update(cls)
    return cls


@include_enum
class OpToken(EnumToken):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    CARET = '^'
    LT = '<'
    GT = '>'
    AND = '&'
    EQ = '='


@include_enum
class BracToken(EnumToken):
    LPAREN = '('
    RPAREN = ')'
    LCURLY = '{'
    RCURLY = '}'

    @property
    def pair(self):
        alt_name = 'RL'['LR'.index(self.name[0])] + self.name[1:]
        return type(self)[alt_name]


@include_enum
class SepToken(EnumToken):
    COLON = ':'
    SEMICOLON = ';'
    ARROW = '->'
