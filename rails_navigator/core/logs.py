FUNC_TIMING = "{func} took {time:.2f} ms"

# Path resolution
ROOTS_RESOLVED = "Resolved {count} root(s) for '{identity}': {roots}"
CANDIDATES_BUILT = "Built {count} {kind} candidate(s) for '{target}'"
PROBE_FAILED = "Existence probe failed for {path}: {error}"
PROBE_UNEXPECTED = "Existence probe raised for {path}: {error}"
FIRST_EXISTING = "First existing candidate: {path}"
NO_EXISTING = "None of {count} candidate(s) exist"

# Method detection
NO_DEF_BEFORE_CURSOR = "No method definition before offset {offset}"
METHOD_CLOSED = "Method '{name}' closed at line {line} before offset {offset}"
ENCLOSING_METHOD = "Cursor at offset {offset} is inside '{name}'"
METHOD_LOCATED = "Located 'def {name}' at offset {offset}"
METHOD_NOT_LOCATED = "No 'def {name}' in document"

# Dispatch
CLASSIFIED = "Classified {path} as {kind}"
NAVIGATION_START = "Toggling from {path} (cursor {offset})"
NAVIGATION_FAILED = "Navigation failed ({kind}): {message}"
NAVIGATION_DONE = "Navigation finished ({status}): {message}"

# Host
HOST_INIT = "Local editor host with workspace folders: {folders}"
HOST_OPEN = "Opening document {path}"
HOST_OPEN_FAILED = "Could not read {path}: {error}"
HOST_REVEAL = "Cursor moved to offset {offset} in {path}"
