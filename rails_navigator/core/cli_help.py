APP_DESCRIPTION = (
    "Jump between a Rails controller action and its view template, "
    "including engines nested under domains/ and apps/."
)

CMD_TOGGLE = (
    "Open the counterpart of FILE: the view of the action at the cursor, "
    "or the controller action of a view."
)
CMD_CANDIDATES = (
    "List the counterpart candidates of FILE in precedence order with their existence status."
)

HELP_FILE = "The focused document (controller or view)."
HELP_LINE = "1-based cursor line."
HELP_COLUMN = "1-based cursor column."
HELP_OFFSET = "0-based cursor character offset (instead of --line/--column)."
HELP_WORKSPACE = "Workspace folder; repeat for multi-root workspaces. Defaults to the current directory."
HELP_JSON = "Print the outcome as JSON."
HELP_QUIET = "Only log errors."
HELP_VERBOSE = "Log debug details, including every probed candidate."
