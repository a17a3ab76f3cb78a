class CompilerError(Exception):
    def __init__(self, message, location):
        super().__init__(message)
        self.location = location

    def get_info(self, source):
        # Mimic gcc error messages
        line = self.location.line
        message = f'{source.filename}:{line + 1}: {self}'
        if 0 <= line < len(source):
            message += f'\n{line + 1:5} | {source[line]}'
        return message


class LexerError(CompilerError):
    pass


class UnexpectedCharacter(LexerError):
    def __init__(self, char, location):
        super().__init__(f'Unexpected character: {char}', location)
        self.char = char


class UnterminatedString(LexerError):
    def __init__(self, location):
        super().__init__('Unterminated string', location)


class InvalidCharacterLiteral(LexerError):
    def __init__(self, content, location, message=None):
        if message is None:
            message = f'Invalid character literal: {content}'
        super().__init__(message, location)
        self.content = content

    @classmethod
    def unterminated(cls, content, location):
        return cls(content, location, f"Unterminated character literal: '{content}")


class MalformedNumber(LexerError):
    def __init__(self, text, location, reason=None):
        message = f'Malformed number: {text}'
        if reason is not None:
            message += f' ({reason})'
        super().__init__(message, location)
        self.text = text
