from enum import StrEnum


class SupportedLanguage(StrEnum):
    GO = "go"


class TreeSitterModule(StrEnum):
    GO = "tree_sitter_go"


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class DeclarationKind(StrEnum):
    FUNCTION = "function"
    METHOD = "method"
    OTHER = "other"


class Color(StrEnum):
    RED = "red"


class StyleModifier(StrEnum):
    BOLD = "bold"
    NONE = ""


APP_NAME = "cyclorank"
ENCODING_UTF8 = "utf-8"
QUERY_LANGUAGE = "language"

GO_EXTENSIONS = (".go",)
GO_TEST_FILE_SUFFIX = "_test"
DEFAULT_EXCLUDE_DIRS = frozenset({"vendor", "testdata", ".git", "node_modules"})

# tree-sitter-go node types and fields read by the declaration parser
TS_GO_PACKAGE_CLAUSE = "package_clause"
TS_GO_PACKAGE_IDENTIFIER = "package_identifier"
TS_GO_FUNCTION_DECLARATION = "function_declaration"
TS_GO_METHOD_DECLARATION = "method_declaration"
TS_GO_PARAMETER_DECLARATION = "parameter_declaration"
TS_GO_TYPE_IDENTIFIER = "type_identifier"
TS_GO_POINTER_TYPE = "pointer_type"
TS_GO_POINTER_TOKEN = "*"
TS_GO_COMMENT = "comment"

FIELD_NAME = "name"
FIELD_RECEIVER = "receiver"
FIELD_TYPE = "type"
FIELD_OPERATOR = "operator"

LOGICAL_OPERATORS = frozenset({"&&", "||"})
BAD_RECEIVER = "BADRECV"

RECORD_LINE = "{complexity} {package} {function} {position}"
POSITION_FORMAT = "{filename}:{line}:{column}"
AVERAGE_LINE = "Average: {average}"
AVERAGE_SIGNIFICANT_DIGITS = 3

EXIT_OVER_THRESHOLD = 1
EXIT_ERROR = 1

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
LOG_LEVEL_VERBOSE = "DEBUG"
LOG_LEVEL_QUIET = "ERROR"

JSON_KEY_FUNCTIONS = "functions"
JSON_KEY_PASSED = "passed"
JSON_KEY_TOTAL = "total"
JSON_KEY_AVERAGE = "average"
