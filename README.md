# oslabs

This package holds three small operating-systems exercises:

- `oslabs.shell` is a toy interactive shell.
- `oslabs.matrix` multiplies matrices using threads.
- `oslabs.caltrain` is a train-boarding monitor built on locks and condition variables.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run `pytest`:

```
pip install .[test]
pytest
```

## The shell

```
oslabs-shell
```

This command shows the prompt `myshell> ` and reads commands from standard input. It stops at end of input or when you type `exit`.

### Built-in commands

- `exit` quits the shell.
- `cd [dir]` changes directory.
  - With no argument, or with `~`, it goes to `$HOME`.
  - If the directory cannot be entered, it prints `cd: <reason>`.
- `export NAME=VALUE` sets an environment variable.
  - Double quotes around the value are stripped.
  - A line such as `export NAME` with no `=` prints `export: invalid format, use export VAR=VALUE`.
- `echo ...` prints its arguments. Each argument is followed by a space.

### External programs

Any other command runs as an external program, using the shell's environment.

- **In the foreground**, the shell waits for the program. If the program exits with a non-zero status, it prints `Command failed with exit code N`.
- **In the background**, add a separate `&` to the line. The shell then prints `backgroundHandler process with pid N` and returns at once.

### Words and variables

Double quotes group several words into one argument.

An argument that starts with `$` is replaced by the value of that variable:

- A value that contains spaces becomes several arguments.
- An unknown variable is left as written.

### Log file

Each time a child process is seen to finish, the line `Child process was terminated` is added to `assem.log` in the working directory. For a background child this happens at the next command or when the shell closes.

### Using the shell from Python

```python
import io
from oslabs.shell import Shell, tokenize

cmd = tokenize('echo "hello world" &', {})
# cmd.args == ["echo", "hello world"], cmd.background is True

out = io.StringIO()
with Shell(log_path="session.log", environ={}, stdout=out) as shell:
    shell.execute("export GREETING=hi")
    shell.execute("echo $GREETING")
# out.getvalue() == "hi \n"
```

These functions and methods are available:

- `substitute_variables(args, environ)` performs the `$` expansion on its own.
- `Shell.run_builtin(args)` runs a built-in command.
- `Shell.run_external(args, background)` runs an external program.
- `Shell.repl(stream)` runs the prompt loop over any text stream.

`exit` raises `SystemExit(0)` from `execute`. `repl` catches it and ends the loop.

### What the shell does not do

The shell has no pipes (`|`), no input or output redirection (`<`, `>`), no command separators (`;`, `&&`), no globbing and no job control beyond starting a program in the background.

## Threaded matrix multiplication

```
oslabs-matrix [a.txt] [b.txt] [prefix]
```

Each input file starts with a `row=R col=C` header, followed by the integers in row order:

```
row=2 col=2
1 2
3 4
```

The command multiplies the first matrix by the second in three ways:

1. One thread for the whole matrix.
2. One thread per result row.
3. One thread per result element.

It writes the results to `<prefix>_per_matrix.txt`, `<prefix>_per_row.txt` and `<prefix>_per_element.txt`, in the same format. It also prints the time each method took.

When arguments are left out, the defaults are `a.txt`, `b.txt` and `c`. If a file cannot be opened, is malformed, or the sizes do not match, the command prints an error and exits with status 1.

### Using the matrix functions from Python

```python
from oslabs.matrix import multiply_per_row, read_matrix, write_matrix

multiply_per_row([[1, 2]], [[3], [4]])  # [[11]]
```

These functions are available:

- `multiply_per_matrix`, `multiply_per_row` and `multiply_per_element` each return the same product. They raise `ValueError` when the inner dimensions differ.
- `read_matrix(path)` and `write_matrix(path, matrix)` read and write the file format above.
- `measure_time(func, label)` calls `func`, prints the elapsed time and returns it in seconds.

## Caltrain boarding monitor

`oslabs.caltrain.Station` coordinates trains and passengers.

- **Passenger threads** call `wait_for_train()`, which blocks until a train with a free seat arrives and takes a seat. They then call `on_board()`.
- **A train thread** calls `load_train(count)`. It returns once the train is full, or once no one is left waiting, and every seated passenger has called `on_board()`.

```python
from oslabs.caltrain import Station

station = Station()
station.load_train(0)  # returns at once: no seats
```

The counters `seats_available`, `passengers_waiting` and `boarded_passengers` can be read on the station.