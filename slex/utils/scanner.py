from dataclasses import dataclass
from collections.abc import Sequence


@dataclass
class SourceCode(Sequence):
    filename: str
    text: str

    @classmethod
    def from_file(cls, filename):
        with open(filename, encoding='utf-8', newline='') as file:
            return cls(filename, file.read())

    @classmethod
    def from_string(cls, string, filename='<string>'):
        return cls(filename, string)

    @property
    def lines(self):
        return self.text.split('\n')

    def __getitem__(self, item):
        return self.lines[item]

    def __len__(self):
        return len(self.lines)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f'SourceCode.from_file({self.filename!r})'


@dataclass(frozen=True, order=True)
class Location:
    line: int


@dataclass
class Scanner:
    text: str
    pos: int = 0
    line: int = 0

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def advance(self):
        char = self.peek()
        if char is not None:
            self.pos += 1
            if char == '\n':
                self.line += 1
        return char

    def check(self, condition):
        char = self.peek()
        return char is not None and condition(char)

    def exact(self, string):
        if self.text.startswith(string, self.pos):
            for _ in string:
                self.advance()
            return True
        return False

    def consume_while(self, condition):
        # Stops in front of the first rejected character, leaving it
        # for the caller to inspect.
        start = self.pos
        while self.check(condition):
            self.advance()
        return self.text[start:self.pos]

    @property
    def location(self):
        return Location(self.line)

    def __bool__(self):
        # Is there any more to read?
        return self.pos < len(self.text)

    def __repr__(self):
        return f'<Scanner L{self.line+1} {self.text[self.pos:self.pos+20]!r}>'
