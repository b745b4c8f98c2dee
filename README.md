# warpshell

A small interactive shell for POSIX systems. It runs programs from `/bin` in
the foreground or background and has a few built-in commands for moving
around the file system, listing and searching directories, inspecting
processes and recalling earlier command lines.

## Installing

```
pip install .
```

## Starting the shell

```
warpshell
```

The directory the shell is started in becomes its home directory, shown as
`~` in the prompt. The prompt has the form

```
<user@host:~/sub/dir>
```

When the previous foreground command took more than two seconds, its name and
duration in whole seconds are added before the closing `>`. The shell stops
on `exit` or at the end of its input.

## Command lines

Several commands can be written on one line, separated by `;` or `&`. A
command followed by `&` runs in the background in a session of its own: its
process id is printed straight away, and before a later prompt a message
says whether it ended successfully, failed, or was terminated by a signal.
Other commands run in the foreground; one that runs longer than two seconds
is followed by `Time taken :N seconds`. A program name is looked up in `/bin`
only; when it cannot be started, `Invalid Command` is printed.

Built-in commands followed by `&` are not run as built-ins but looked up in
`/bin` like any other program.

## Built-in commands

- `warp [dir ...]` changes directory to each argument in turn and prints the
  new working directory after each. `~` means the home directory and `-` the
  previous directory. With no argument it goes home.
- `peek [flags] [dir]` lists a directory (by default the current one) in
  sorted order. Directories are shown in blue and executables in green. The
  flags are `-l`, `-a`, `-la` and `-al`; they are read up to the first word
  that is not one of them, which is taken as the directory. `-a` includes
  hidden entries, `.` and `..`; `-l` prints a `total` block count and adds
  permissions, link count, owner, group, size and modification time. `~` and
  `-` are understood as in `warp`.
- `seek [-e] [-d | -f] target [dir]` searches recursively under `dir` (or the
  current directory) for entries whose names start with `target`, printing
  their paths relative to the search root. Hidden entries are skipped. `-d`
  restricts the search to directories and `-f` to files; giving both is an
  error. With `-e`, when exactly one entry matches and it is a directory the
  shell changes into it, provided it may be entered. `No matches found !` is
  printed when nothing matches.
- `proclore [pid]` shows a process's id, status (with `+` when it is in the
  shell's process group), process group, virtual memory size and executable
  path. Without a pid it describes the shell itself. It reads from `/proc`,
  so it needs Linux.
- `pastevents` prints the recorded command lines, oldest first. At most the
  fifteen most recent are kept, and a line identical to the most recent one
  is not recorded again. Lines that contain the word `pastevents` are never
  recorded. `pastevents purge` clears the record and `pastevents execute N`
  runs the N-th most recent line again. The record is kept in
  `events_data.txt` in the home directory.
- `exit` leaves the shell.

## Using it from Python

`warpshell.shell.Shell` takes a `warpshell.state.ShellState` and optional
input and output streams. `Shell.run_line(line)` runs one command line and
`Shell.run()` runs the read–run loop until `exit` or end of input. The
pieces the built-ins are made of are available on their own, for example
`warpshell.parser.split_commands`, `warpshell.history.History`,
`warpshell.peek.list_entries`, `warpshell.seek.find_matches` and
`warpshell.proclore.read_process_info`.

## What it does not do

There are no pipes, redirections, quoting, variables or globbing: words are
split on whitespace only. Programs are not looked up on `PATH`, and there is
no job control beyond starting background commands and reporting when they
end.

## Running the tests

```
pip install .[test]
pytest
```