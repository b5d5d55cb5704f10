"""Static mapping tables.

All tables are read-only and shared by every translation.
"""

from types import MappingProxyType
from typing import Final, Mapping

from rippertok.ripper import PrimitiveKind
from rippertok.tokens import OutputKind

KEYWORDS: Final[Mapping[str, OutputKind]] = MappingProxyType(
    {
        "__LINE__": OutputKind.KW_LINE,
        "__FILE__": OutputKind.KW_FILE,
        "__ENCODING__": OutputKind.KW_ENCODING,
        "BEGIN": OutputKind.KW_L_BEGIN,
        "END": OutputKind.KW_L_END,
        "alias": OutputKind.KW_ALIAS,
        "and": OutputKind.KW_AND,
        "begin": OutputKind.KW_BEGIN,
        "break": OutputKind.KW_BREAK,
        "case": OutputKind.KW_CASE,
        "class": OutputKind.KW_CLASS,
        "def": OutputKind.KW_DEF,
        "defined?": OutputKind.KW_DEFINED,
        "do": OutputKind.KW_DO,
        "else": OutputKind.KW_ELSE,
        "elsif": OutputKind.KW_ELSIF,
        "end": OutputKind.KW_END,
        "ensure": OutputKind.KW_ENSURE,
        "false": OutputKind.KW_FALSE,
        "for": OutputKind.KW_FOR,
        "in": OutputKind.KW_IN,
        "module": OutputKind.KW_MODULE,
        "next": OutputKind.KW_NEXT,
        "nil": OutputKind.KW_NIL,
        "not": OutputKind.KW_NOT,
        "or": OutputKind.KW_OR,
        "redo": OutputKind.KW_REDO,
        "retry": OutputKind.KW_RETRY,
        "return": OutputKind.KW_RETURN,
        "self": OutputKind.KW_SELF,
        "super": OutputKind.KW_SUPER,
        "then": OutputKind.KW_THEN,
        "true": OutputKind.KW_TRUE,
        "undef": OutputKind.KW_UNDEF,
        "when": OutputKind.KW_WHEN,
        "yield": OutputKind.KW_YIELD,
    }
)

# (block form, modifier form)
MODIFIER_KEYWORDS: Final[Mapping[str, tuple[OutputKind, OutputKind]]] = MappingProxyType(
    {
        "if": (OutputKind.KW_IF, OutputKind.KW_IF_MOD),
        "unless": (OutputKind.KW_UNLESS, OutputKind.KW_UNLESS_MOD),
        "while": (OutputKind.KW_WHILE, OutputKind.KW_WHILE_MOD),
        "until": (OutputKind.KW_UNTIL, OutputKind.KW_UNTIL_MOD),
        "rescue": (OutputKind.KW_RESCUE, OutputKind.KW_RESCUE_MOD),
    }
)

OPERATORS: Final[Mapping[str, OutputKind]] = MappingProxyType(
    {
        "~": OutputKind.TILDE,
        "?": OutputKind.EH,
        ":": OutputKind.COLON,
        "!": OutputKind.BANG,
        "!=": OutputKind.NEQ,
        "!~": OutputKind.NMATCH,
        "*": OutputKind.STAR,
        "**": OutputKind.DSTAR,
        "/": OutputKind.DIVIDE,
        "&.": OutputKind.ANDDOT,
        "&&": OutputKind.ANDOP,
        "%": OutputKind.PERCENT,
        "^": OutputKind.CARET,
        "+": OutputKind.PLUS,
        "<": OutputKind.LT,
        "<<": OutputKind.LSHFT,
        "<=": OutputKind.LEQ,
        "<=>": OutputKind.CMP,
        "=": OutputKind.EQL,
        "==": OutputKind.EQ,
        "===": OutputKind.EQQ,
        "=>": OutputKind.ASSOC,
        "=~": OutputKind.MATCH,
        ">": OutputKind.GT,
        ">=": OutputKind.GEQ,
        ">>": OutputKind.RSHFT,
        "|": OutputKind.PIPE,
        "||": OutputKind.OROP,
        "[]": OutputKind.AREF,
        "[]=": OutputKind.ASET,
    }
)

OP_ASSIGN: Final[frozenset[str]] = frozenset(
    {"+=", "-=", "*=", "/=", "%=", "**=", "^=", "<<=", ">>=", "|=", "||=", "&=", "&&="}
)

DIRECT_KINDS: Final[Mapping[str, OutputKind]] = MappingProxyType(
    {
        PrimitiveKind.BACKTICK: OutputKind.XSTRING_BEG,
        PrimitiveKind.COMMA: OutputKind.COMMA,
        PrimitiveKind.CONST: OutputKind.CONSTANT,
        PrimitiveKind.CVAR: OutputKind.CVAR,
        PrimitiveKind.EMBEXPR_BEG: OutputKind.STRING_DBEG,
        PrimitiveKind.EMBEXPR_END: OutputKind.STRING_DEND,
        PrimitiveKind.GVAR: OutputKind.GVAR,
        PrimitiveKind.IVAR: OutputKind.IVAR,
        PrimitiveKind.PERIOD: OutputKind.DOT,
        PrimitiveKind.RBRACE: OutputKind.RCURLY,
        PrimitiveKind.RBRACKET: OutputKind.RBRACK,
        PrimitiveKind.REGEXP_BEG: OutputKind.REGEXP_BEG,
        PrimitiveKind.RPAREN: OutputKind.RPAREN,
        PrimitiveKind.SEMICOLON: OutputKind.SEMI,
        PrimitiveKind.TLAMBDA: OutputKind.LAMBDA,
        PrimitiveKind.TLAMBEG: OutputKind.LAMBEG,
        PrimitiveKind.TSTRING_CONTENT: OutputKind.STRING_CONTENT,
        PrimitiveKind.TSTRING_END: OutputKind.STRING_END,
    }
)

WORD_LIST_OPENERS: Final[Mapping[str, OutputKind]] = MappingProxyType(
    {
        PrimitiveKind.WORDS_BEG: OutputKind.WORDS_BEG,
        PrimitiveKind.QWORDS_BEG: OutputKind.QWORDS_BEG,
        PrimitiveKind.SYMBOLS_BEG: OutputKind.SYMBOLS_BEG,
        PrimitiveKind.QSYMBOLS_BEG: OutputKind.QSYMBOLS_BEG,
    }
)

# Whitespace the target grammar never sees.
DROPPED_KINDS: Final[frozenset[str]] = frozenset({PrimitiveKind.SP, PrimitiveKind.IGNORED_SP})
