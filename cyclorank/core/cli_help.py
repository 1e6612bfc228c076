APP_DESCRIPTION = (
    "Calculate cyclomatic complexities of Go functions.\n\n"
    "The output fields for each line are: "
    "<complexity> <package> <function> <file:row:column>"
)

HELP_PATHS = "Go files or directories to analyze."
HELP_OVER = (
    "Show functions with complexity > N only and exit with status 1 "
    "if the output is non-empty."
)
HELP_TOP = "Show the top N most complex functions only."
HELP_AVG = (
    "Show the average complexity over all functions, "
    "not depending on whether --over or --top are set."
)
HELP_RECURSIVE = "Descend into sub-directories of the given directories."
HELP_SKIP_TESTS = "Ignore *_test.go files found in directories."
HELP_EXCLUDE = "Directory name to skip while descending (repeatable)."
HELP_FORMAT = "Output format."
HELP_VERBOSE = "Log debug information to stderr."
HELP_QUIET = "Only log errors."
