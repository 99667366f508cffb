import os
import sys

# Tests import the top-level modules (lexer, parser, ...) directly, so the
# repository root must be importable regardless of where pytest is started.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
