# hshell

A small command shell for Unix-like systems. It reads command lines from
the terminal or from a script file. It runs programs found on `PATH` and
provides a few builtins.

## Installing

```
pip install .
```

## Running

Interactive use:

```
hshell
```

When standard input is a terminal, the shell prints the prompt `$ ` before
each line. Ctrl-C while the shell waits for input prints a fresh prompt.
End of input (Ctrl-D) leaves the shell.

Running a script, one command line per line:

```
hshell script.sh
```

If the file does not exist, the shell prints `<name>: 0: Can't open script.sh`
on standard error and exits with status 127. `<name>` is the name the shell
was started under. If access to the file is refused, it exits with status
126. When it reads a script or piped input, the shell exits with the status
of the last command.

## Features

- **Command lookup**: a command name is looked for in each directory of
  `PATH`. An empty entry in `PATH` stands for the current directory. A name
  written as `./prog` is run as given if it exists. An absolute name such as
  `/bin/ls` is run as given.
- **Chaining**: `;` runs commands one after another. `&&` runs the next
  command only if the previous one exited with status 0. `||` runs it only
  if the previous one failed. When a command is skipped this way, the rest
  of the line is skipped too.
- **Comments**: a `#` at the start of a line, or a `#` that follows a space,
  begins a comment. The comment runs to the end of the line.
- **Variables**: a word that is exactly `$?` becomes the last exit status.
  `$$` becomes the shell's process id. `$NAME` becomes the value of the
  environment variable `NAME`. An unknown variable becomes the empty string.
  Only whole words are expanded.
- **Aliases**: the first word of a command is replaced by its alias value.
  This repeats up to ten times.
- **History**: every line read is recorded after its comment is removed. At
  start-up the shell loads `$HOME/.simple_shell_history`. When it leaves, it
  writes the whole history back to that file. While loading, a history that
  reaches 4096 entries is cut to the newest 4095.
- **Environment**: programs receive the shell's own copy of the environment,
  including changes made with `setenv` and `unsetenv`.

## Builtins

| Command                    | Effect                                               |
|----------------------------|------------------------------------------------------|
| `env`                      | print every `NAME=value` entry                       |
| `setenv NAME VALUE`        | set or change an environment variable                |
| `unsetenv NAME ...`        | remove environment variables                         |
| `history`                  | print the history as `N: line`, numbered from 0      |
| `alias`                    | print every alias as `name='value'`                  |
| `alias name`               | print one alias                                      |
| `alias name=value`         | define an alias; an empty value removes it           |

## Errors

A command that cannot be found is reported on standard error as

```
<name>: 3: foo: not found
```

The number counts the command lines read so far, and the status becomes
127. A command that is found but may not be run gives status 126 and the
message `Permission denied`.

## What it does not do

The shell has no `exit`, `cd` or `help` builtin. To leave it, end the input.
The working directory cannot be changed from inside the shell. It has no
pipes, redirections, quoting or globbing. Words are split on spaces and tabs
only.

## Using it from Python

```python
import io
from hshell.shell import Shell

out = io.StringIO()
shell = Shell(name="hshell", env={"PATH": "/bin:/usr/bin"}, output=out)
shell.execute_line("alias greet=echo")
shell.execute_line("greet hello && echo world")
```

`Shell.execute_line` runs one line, including its chained commands.
`Shell.run_command` runs a single command. Both return the resulting status.
`Shell.run` reads lines from the input stream until it ends.
`hshell.shell.main` is the command-line entry point.

The parts the shell is built from can be used on their own:

- `hshell.text`: `split_words`, `starts_with`, `atoi`, `erratoi`,
  `convert_number` and `remove_comments`.
- `hshell.environment.Environment`: an ordered table of `NAME=value` entries.
- `hshell.history.History` and `history_file`: the history list and its file.
- `hshell.aliases.AliasTable`: the alias table.
- `hshell.chain`: `split_chain`, `should_run`, `expand_variables`, `ChainOp`
  and `Command`.
- `hshell.path`: `find_path` and `is_command`.