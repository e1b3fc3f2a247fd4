"""Command lines shared by the parser test suites."""

# '/' prefix, ':' value separator, space separated
SLASH_SWITCHES = (
    'arg1 arg2 /loglevel:H "arg3a arg3b arg3c" /B: /C:"Wiggly woo" '
    '/D:D:"\\My Folder"'
)

# default '-' prefix with a '--' sentinel part way through
STOP_SWITCHES = "arg1 arg2 -loglevel:H -- ~docs/wiggly -A -B -C"

# ',' separated, no prefix, ':' value separator
COMMA_NO_PREFIX = "arg1, arg2, a:1st, b:2nd, arg3, c:3rd"

# ',' separated, no prefix, '=' value separator, quoted comma in a value
NAME_VALUE_PAIRS = (
    'name=Jane Doe ,  age=41,   address="123 Railway Cuttings, Camberwick Green"'
)
