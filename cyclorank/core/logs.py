# Grammar loading
IMPORTING_MODULE = "Importing grammar module {module}"
LIB_NOT_AVAILABLE = "Grammar library for {lang} is not installed"
GRAMMAR_LOADED = "Loaded {lang} grammar"
GRAMMAR_LOAD_FAILED = "Failed to load {lang} grammar: {error}"

# File discovery
SCANNING_DIRECTORY = "Scanning directory {path} (recursive={recursive})"
SKIPPING_TEST_FILE = "Skipping test file {path}"
SKIPPING_EXCLUDED = "Skipping excluded path {path}"

# Analysis
PARSING_FILE = "Parsing {path}"
FILE_ANALYZED = "Analyzed {path}: {count} function(s)"
RUN_COMPLETE = "Analyzed {files} file(s), {functions} function(s)"
RANKED = "Ranked {total} record(s): {passed} over {over}, {kept} retained"
NO_FUNCTIONS_FOR_AVERAGE = "No functions were analyzed; skipping average"

# Timing
FUNC_TIMING = "{func} took {time:.2f} ms"
