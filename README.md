# tinyshell

The building blocks of a small POSIX command shell. It provides the stages
that turn a typed line into something ready to run: splitting it into tokens,
checking where pipes and redirections are placed, expanding `~`, `$NAME` and
`$?`, matching `*` wildcards, looking commands up on `PATH`, and handling
Ctrl-C and Ctrl-\ at the terminal. It has no dependencies beyond the standard
library.

## Modules

- `tinyshell.tokens`: `tokenize(text)` returns a list of `Token` objects.
  Each has a `type` (`TokenType.WORD`, `REDIRECT`, `PIPE` or `NONE`), its
  `content`, and flags for quoting (`in_quote`: `NO_QUOTE`, `SINGLE_QUOTE`
  or `DOUBLE_QUOTE`), `concat` (part of a run of adjacent pieces),
  `space_after` and `is_var`.
- `tinyshell.syntax`: `check_syntax(tokens)` returns the tokens unchanged or
  raises `ShellSyntaxError`. The error carries the offending `token` and
  `status = 2`.
- `tinyshell.expansion`: `replace_tilde(tokens, home)` and
  `replace_env_vars(tokens, env, status)` rewrite tokens in place.
- `tinyshell.env`: `Environment`, an ordered table of `KEY=value` entries
  and of names declared without a value, plus `is_valid_key(key)`.
- `tinyshell.wildcard`: `matches(name, pattern)` for `*` patterns.
- `tinyshell.commands`: `Command`, `FileRedirect` and `Redirection`, which
  describe a pipeline stage and its redirections.
- `tinyshell.pathsearch`: `find_in_path(name, path_value)` and
  `resolve_command_paths(commands, env)`.
- `tinyshell.signals`: `SignalState`, `install_handlers(state)`,
  `hide_quit_echo(fd)` and `show_quit_echo(fd)`.

## Tokenizing and checking a line

```python
from tinyshell.tokens import tokenize
from tinyshell.syntax import check_syntax, ShellSyntaxError

tokens = tokenize("ls -l | wc > out")
print([t.content for t in tokens])   # ['ls', '-l', '|', 'wc', '>', 'out']

try:
    check_syntax(tokenize("ls |"))
except ShellSyntaxError as exc:
    print(exc)          # syntax error near unexpected token `newline'
    print(exc.status)   # 2
```

Quotes only count when they are closed later on the line. Inside single
quotes nothing is special; inside double quotes `$NAME` is still recognised.

## Expansion

```python
from tinyshell.env import Environment
from tinyshell.expansion import replace_env_vars, replace_tilde
from tinyshell.tokens import tokenize

env = Environment(["HOME=/home/alice", "USER=alice"])
tokens = tokenize("echo $USER ~/notes $?")
replace_tilde(tokens, env.get("HOME"))
replace_env_vars(tokens, env, status=0)
print([t.content for t in tokens])
```

A `~` is replaced only when it is unquoted, stands alone or is followed by
`/`, and is not glued to another piece. `$?` becomes the status you pass in,
followed by whatever came after the `?`. An unknown variable expands to an
empty string. Single-quoted tokens are left alone.

## The environment

```python
from tinyshell.env import Environment, is_valid_key

env = Environment(["HOME=/home/alice", "PATH=/usr/bin:/bin"])
env.set("EDITOR", "vi")
env.set("PENDING", "", declare_only=True)   # declared without a value

env.get("EDITOR")      # 'vi'
env.get("MISSING")     # ''
env.has("PENDING")     # False: declared, but no value
"PENDING" in env       # True
env.exported()         # only the entries that have a value, as a dict
env.sorted_entries()   # every entry, sorted in byte order
env.unset("EDITOR")

is_valid_key("MY_VAR")   # True
is_valid_key("1ABC")     # False
```

With `declare_only=True`, an existing entry is left untouched.

## Wildcards

```python
from tinyshell.wildcard import matches

matches("notes.txt", "*.txt")   # True
matches(".profile", "*")        # False: hidden names need a leading dot
matches(".profile", ".*")       # True
```

## Commands and PATH lookup

```python
from tinyshell.commands import Command, FileRedirect, Redirection
from tinyshell.env import Environment
from tinyshell.pathsearch import find_in_path, resolve_command_paths

cmd = Command(argv=["ls", "-l"])
cmd.add_redirect(FileRedirect("out.txt", Redirection.from_operator(">")))

env = Environment(["PATH=/usr/local/bin:/usr/bin:/bin"])
resolve_command_paths([cmd], env)
print(cmd.argv[0])   # for example /usr/bin/ls, if it exists there

print(find_in_path("ls", "/usr/bin:/bin"))
```

Names that contain a slash, empty names and the names `echo`, `cd`, `pwd`,
`export`, `unset`, `env` and `exit` are left as they are. A name that is
found in no `PATH` directory is also left unchanged, and `find_in_path`
returns `None` for it.

## Signals

```python
from tinyshell.signals import SignalState, install_handlers, hide_quit_echo, show_quit_echo

state = SignalState()
previous = install_handlers(state)   # SIGINT and SIGQUIT now go to state
hide_quit_echo(0)                    # returns False if fd 0 is not a terminal
with state.reading_input():
    ...                              # an interrupt here raises KeyboardInterrupt
show_quit_echo(0)
```

`state.received` is `NO_SIGNAL`, `INTERRUPTED` or `QUIT`. Call `reset()` to
clear it. On an interrupt the handler writes a newline, and on a quit it
writes `Quit (core dumped)`.

## What this package does not do

There is no interactive shell to start and no command-line program. The
package does not build commands from tokens, does not expand `*` against the
directory, does not read here-document text, has no builtin commands, and
does not open redirection files or start processes. It provides the
individual stages; putting them together into a running shell is left to
the caller.