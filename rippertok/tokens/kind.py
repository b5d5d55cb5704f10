"""Token kinds of the target grammar."""

from enum import StrEnum


class OutputKind(StrEnum):
    """Token vocabulary of the whitequark ``parser`` grammar.

    Values are the grammar's own token names, so ``str(kind)`` is what the
    grammar expects.
    """

    # -------------------------
    # Identifiers / variables
    # -------------------------
    IDENTIFIER = "tIDENTIFIER"
    FID = "tFID"
    CONSTANT = "tCONSTANT"
    IVAR = "tIVAR"
    CVAR = "tCVAR"
    GVAR = "tGVAR"
    NTH_REF = "tNTH_REF"
    BACK_REF = "tBACK_REF"
    LABEL = "tLABEL"
    LABEL_END = "tLABEL_END"

    # -------------------------
    # Literals
    # -------------------------
    INTEGER = "tINTEGER"
    FLOAT = "tFLOAT"
    RATIONAL = "tRATIONAL"
    IMAGINARY = "tIMAGINARY"
    UNARY_NUM = "tUNARY_NUM"
    CHARACTER = "tCHARACTER"
    STRING = "tSTRING"
    SYMBOL = "tSYMBOL"

    # -------------------------
    # String-like begin/content/end
    # -------------------------
    STRING_BEG = "tSTRING_BEG"
    STRING_CONTENT = "tSTRING_CONTENT"
    STRING_END = "tSTRING_END"
    STRING_DBEG = "tSTRING_DBEG"
    STRING_DEND = "tSTRING_DEND"
    STRING_DVAR = "tSTRING_DVAR"
    XSTRING_BEG = "tXSTRING_BEG"
    SYMBEG = "tSYMBEG"
    REGEXP_BEG = "tREGEXP_BEG"
    REGEXP_OPT = "tREGEXP_OPT"
    WORDS_BEG = "tWORDS_BEG"
    QWORDS_BEG = "tQWORDS_BEG"
    SYMBOLS_BEG = "tSYMBOLS_BEG"
    QSYMBOLS_BEG = "tQSYMBOLS_BEG"
    SPACE = "tSPACE"

    # -------------------------
    # Layout
    # -------------------------
    NL = "tNL"
    COMMENT = "tCOMMENT"
    SEMI = "tSEMI"
    COMMA = "tCOMMA"
    DOT = "tDOT"

    # -------------------------
    # Brackets (state dependent openers)
    # -------------------------
    LCURLY = "tLCURLY"
    LBRACE = "tLBRACE"
    LBRACE_ARG = "tLBRACE_ARG"
    RCURLY = "tRCURLY"
    LBRACK = "tLBRACK"
    LBRACK2 = "tLBRACK2"
    RBRACK = "tRBRACK"
    LPAREN = "tLPAREN"
    LPAREN_ARG = "tLPAREN_ARG"
    LPAREN2 = "tLPAREN2"
    RPAREN = "tRPAREN"
    LAMBDA = "tLAMBDA"
    LAMBEG = "tLAMBEG"

    # -------------------------
    # Operators
    # -------------------------
    TILDE = "tTILDE"
    EH = "tEH"
    COLON = "tCOLON"
    COLON2 = "tCOLON2"
    COLON3 = "tCOLON3"
    BANG = "tBANG"
    NEQ = "tNEQ"
    NMATCH = "tNMATCH"
    DSTAR = "tDSTAR"
    STAR = "tSTAR"
    DIVIDE = "tDIVIDE"
    ANDDOT = "tANDDOT"
    ANDOP = "tANDOP"
    AMPER = "tAMPER"
    AMPER2 = "tAMPER2"
    PERCENT = "tPERCENT"
    CARET = "tCARET"
    PLUS = "tPLUS"
    MINUS = "tMINUS"
    UMINUS = "tUMINUS"
    LT = "tLT"
    LSHFT = "tLSHFT"
    LEQ = "tLEQ"
    CMP = "tCMP"
    EQL = "tEQL"
    EQ = "tEQ"
    EQQ = "tEQQ"
    ASSOC = "tASSOC"
    MATCH = "tMATCH"
    GT = "tGT"
    GEQ = "tGEQ"
    RSHFT = "tRSHFT"
    PIPE = "tPIPE"
    OROP = "tOROP"
    AREF = "tAREF"
    ASET = "tASET"
    OP_ASGN = "tOP_ASGN"
    DOT2 = "tDOT2"
    DOT3 = "tDOT3"
    BDOT2 = "tBDOT2"
    BDOT3 = "tBDOT3"

    # -------------------------
    # Keywords
    # -------------------------
    KW_LINE = "k__LINE__"
    KW_FILE = "k__FILE__"
    KW_ENCODING = "k__ENCODING__"
    KW_L_BEGIN = "klBEGIN"
    KW_L_END = "klEND"
    KW_ALIAS = "kALIAS"
    KW_AND = "kAND"
    KW_BEGIN = "kBEGIN"
    KW_BREAK = "kBREAK"
    KW_CASE = "kCASE"
    KW_CLASS = "kCLASS"
    KW_DEF = "kDEF"
    KW_DEFINED = "kDEFINED"
    KW_DO = "kDO"
    KW_ELSE = "kELSE"
    KW_ELSIF = "kELSIF"
    KW_END = "kEND"
    KW_ENSURE = "kENSURE"
    KW_FALSE = "kFALSE"
    KW_FOR = "kFOR"
    KW_IN = "kIN"
    KW_MODULE = "kMODULE"
    KW_NEXT = "kNEXT"
    KW_NIL = "kNIL"
    KW_NOT = "kNOT"
    KW_OR = "kOR"
    KW_REDO = "kREDO"
    KW_RETRY = "kRETRY"
    KW_RETURN = "kRETURN"
    KW_SELF = "kSELF"
    KW_SUPER = "kSUPER"
    KW_THEN = "kTHEN"
    KW_TRUE = "kTRUE"
    KW_UNDEF = "kUNDEF"
    KW_WHEN = "kWHEN"
    KW_YIELD = "kYIELD"

    # Keywords with a modifier form
    KW_IF = "kIF"
    KW_IF_MOD = "kIF_MOD"
    KW_UNLESS = "kUNLESS"
    KW_UNLESS_MOD = "kUNLESS_MOD"
    KW_WHILE = "kWHILE"
    KW_WHILE_MOD = "kWHILE_MOD"
    KW_UNTIL = "kUNTIL"
    KW_UNTIL_MOD = "kUNTIL_MOD"
    KW_RESCUE = "kRESCUE"
    KW_RESCUE_MOD = "kRESCUE_MOD"
