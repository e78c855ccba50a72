# minibash

A small interactive shell. It reads a command line, splits it into tokens,
builds a command tree and runs it. Commands that are not built in are started
as external programs.

## Installing

```
pip install .
```

## Running

```
minibash
```

The shell prints `Welcome to my Bash Shell!`, asks for a user name and a
password, then shows a prompt of the form `user@host:path$ `. When the
current directory starts with the value of `HOME`, that part is shown as `~`.

Type `exit` to leave; the shell prints `logout`. End of input also ends the
session.

## What it understands

- Plain commands: `ls -l /tmp`
- Pipelines of any length: `ls | sort | head`
- Sequences: `cd /tmp ; ls`
- Conditional lists: `make && echo ok`, `test -f x || echo missing`
- Background commands: `sleep 5 &` or `& sleep 5`

The operators recognised are `|`, `||`, `&`, `&&` and `;`. Words are
separated by spaces, tabs and newlines. Operators bind from left to right:
`|` binds tighter than `;`, `&&` and `||`, which all have the same
precedence. A line may hold at most 127 tokens; a longer line is reported as
an error and not run.

## Built-in commands

When a line holds a single command (no `;`, `&&` or `||`), these are handled
by the shell itself:

| Command    | Effect                                               |
|------------|------------------------------------------------------|
| `exit`     | prints `logout` and leaves the shell                 |
| `pwd`      | prints the current directory                         |
| `cd DIR`   | changes the current directory                        |
| `ls`       | lists the current directory, hiding dot files        |
| `ls -a`    | lists the current directory including dot files      |
| `cat FILE` | prints a file followed by a newline                  |

Run in the background, `pwd`, `ls` and `cat` print nothing. Inside command
lists, `cd` and `exit` still act on the shell; every other command, `pwd`,
`ls` and `cat` included, is started as an external program.

## Using it from Python

```python
from minibash.parser import tokenize, parse_input

tokens = tokenize("ls -a | sort && echo done")
tree = parse_input(tokens)
print(tree.format_tree(0))
```

The pieces:

- `minibash.parser`: `tokenize`, `is_multi_command`, `parse_input` and the
  `Parser` class with `parse_command`, `parse_pipeline` and `parse_sequence`.
- `minibash.command`: the `Command` tree node, the `CommandType` enum and
  `format_tokens`.
- `minibash.builtins`: `pwd`, `cd`, `ls`, `cat` and the `ShellExit`
  exception.
- `minibash.executor`: `Executor.execute` runs a command tree and returns the
  exit status of the last command it ran.
- `minibash.shell`: `get_user_info`, `UserInfo`, and `Shell`, which runs lines
  one at a time with `run_line`, or reads and runs them until `exit` or end of
  input with `run`.

## What it does not do

- No quoting, escaping, globbing, variable expansion or `~` expansion in
  arguments.
- No redirection (`<`, `>`), subshells or grouping with parentheses.
- No job control: background commands are started and left running; there is
  no `jobs`, `fg` or `wait`.
- `cd` with no argument does not go to the home directory; it reports an
  error.
- No history or line editing.
- The password asked for at start-up is read as plain text and is not checked
  against anything.