"""
Custom Pygments lexer for picture masks

Highlights picture masks on the terminal (command line output, error
messages) so the structure of a dense mask such as
"[(*3#*2[#]) ]*3#-*4#" is readable at a glance.

Token types:
- Keyword.Type: Character classes (# ? & ! @)
- Operator: Iteration operator (*)
- Number.Integer: Iteration counts
- Punctuation: Group brackets and braces
- Operator.Word: Alternative separator (,)
- String.Escape: Escaped characters (;x)
- String: Literals
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Keyword,
    Number,
    Operator,
    Punctuation,
    String,
)


class PictureMaskLexer(RegexLexer):
    """
    Lexer for picture masks

    Example:
        ##/##/##[##]

    Tokens:
        #  → Keyword.Type
        /  → String
        [  → Punctuation
        ]  → Punctuation
    """

    name = 'Picture mask'
    aliases = ['picmask', 'picture-mask']
    filenames = []

    tokens = {
        'root': [
            # Escape: ';' and the character it protects
            (r';.', String.Escape),

            # Iteration operator with optional count
            (r'(\*)([0-9]+)', bygroups(Operator, Number.Integer)),
            (r'\*', Operator),

            # Character classes
            (r'[#?&!@]', Keyword.Type),

            # Groups and alternatives
            (r'[\[\]{}]', Punctuation),
            (r',', Operator.Word),

            # Everything else is a literal
            (r'[^;*#?&!@\[\]{},]+', String),
        ],
    }


def get_lexer() -> PictureMaskLexer:
    """
    Get the PictureMaskLexer instance

    Returns:
        PictureMaskLexer instance ready for use with Pygments
    """
    return PictureMaskLexer()


def mask_highlight(mask: str, style: str = "light") -> str:
    """
    Render a mask with terminal colours

    Args:
        mask: Picture mask to render
        style: TerminalFormatter background ("light" or "dark")

    Returns:
        Mask with ANSI colour codes, without trailing newline
    """
    return highlight(mask, get_lexer(), TerminalFormatter(bg=style)).rstrip('\n')
