from slang.reader.lexer import Token, lex
from slang.reader.parser import TokenStream, parse, parse_all

__all__ = ["Token", "lex", "TokenStream", "parse", "parse_all"]
