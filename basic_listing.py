# -*- coding: utf-8 -*-
"""
Program listing <-> (line number, text) entries.
Used by LOAD/SAVE and by the REPL to split a typed numbered line.
필요 패키지: pip install lark
"""

from typing import List, Tuple

from lark import Lark, Transformer, v_args, Token

# -----------------------------
# Lark grammar (LALR, contextual lexer)
# -----------------------------
GRAMMAR = r"""
start: [entry] (_NL [entry])*

?entry: LINENUM TEXT?       -> line
      | JUNK                -> junk

LINENUM: /\d+/
TEXT: /[^\r\n]+/
// lines that do not start with a number are skipped
JUNK: /[^\d \t\r\n][^\r\n]*/
_NL: /\r?\n/

%import common.WS_INLINE
%ignore WS_INLINE
"""

Entry = Tuple[int, str]


@v_args(inline=True)
class ListingTransformer(Transformer):
    def start(self, *entries):
        return [e for e in entries if e is not None]

    def line(self, num, text=None):
        s = text.value if isinstance(text, Token) else (text or '')
        return (int(num), s.strip())

    def junk(self, _tok):
        return None


_parser = None


def get_parser():
    global _parser
    if _parser is None:
        _parser = Lark(GRAMMAR, parser="lalr", start="start", lexer="contextual")
    return _parser


def parse_listing(text) -> List[Entry]:
    """Listing text -> [(number, text), ...] in file order. Raises lark UnexpectedInput."""
    tree = get_parser().parse(text)
    return ListingTransformer().transform(tree)


def parse_line(line):
    """A single typed line -> (number, text) or None when it carries no line number."""
    entries = parse_listing(line.rstrip('\r\n'))
    return entries[0] if entries else None


def format_listing(entries) -> str:
    return ''.join(f"{num} {text}\n" for num, text in entries)
