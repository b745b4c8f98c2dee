"""The interactive loop: reading lines and running built-ins or programs."""

from __future__ import annotations

import argparse
import io
import os
import subprocess
import sys
import time
from typing import TextIO

from warpshell.history import History, HistoryError
from warpshell.parser import Command, parse_history_index, should_record, split_commands
from warpshell.peek import parse_peek_args, peek
from warpshell.proclore import format_process_info, parse_pid, read_process_info
from warpshell.prompt import render_prompt
from warpshell.seek import SeekError, parse_seek_args, seek
from warpshell.state import BackgroundJob, ShellState
from warpshell.warp import WarpError, warp

PROGRAM_DIR = "/bin/"
REPORT_THRESHOLD = 2


class Shell:
    """A shell session bound to an input and an output stream."""

    def __init__(
        self,
        state: ShellState,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.state = state
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.history = History(state.history_path)
        self.last_duration = 0
        self.last_command: str | None = None
        self.exited = False
        self._builtins = {
            "warp": self._warp,
            "peek": self._peek,
            "pastevents": self._pastevents,
            "proclore": self._proclore,
            "seek": self._seek,
        }

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    @staticmethod
    def _error(text: str) -> None:
        print(text, file=sys.stderr)

    def reap_jobs(self) -> list[str]:
        """Report and forget background jobs that have finished."""
        messages = []
        for pid, job in list(self.state.jobs.items()):
            if job.process is not None:
                code = job.process.poll()
                if code is None:
                    continue
            else:
                try:
                    done, status = os.waitpid(pid, os.WNOHANG)
                except ChildProcessError:
                    del self.state.jobs[pid]
                    continue
                if done == 0:
                    continue
                code = os.waitstatus_to_exitcode(status)
            del self.state.jobs[pid]
            if code == 0:
                message = f"{job.name} with ({job.pid}) ended sucessfully"
            elif code > 0:
                message = f"{job.name} with ({job.pid}) did not end sucessfully"
            else:
                message = f"{job.name} with ({job.pid}) was terminated by a signal"
            messages.append(message)
            self._write(message + "\n")
        return messages

    def run_line(self, line: str) -> str | None:
        """Run every command of ``line``.

        Returns a line fetched by ``pastevents execute`` that is to be run
        next, or None.
        """
        if should_record(line):
            self.history.add(line)
        follow_up = None
        for command in split_commands(line):
            if self.exited:
                break
            result = self._dispatch(command)
            if result is not None:
                follow_up = result
        return follow_up

    def _dispatch(self, command: Command) -> str | None:
        name = command.name
        args = command.args
        if name == "exit":
            self.exited = True
            return None
        handler = self._builtins.get(name)
        if handler is not None and not command.background:
            return handler(args[1:])
        if command.background:
            self._run_background(args)
        else:
            self._run_foreground(args)
        return None

    def _warp(self, args: list[str]) -> None:
        for address in args or [self.state.home_dir]:
            try:
                self._write(warp(self.state, address) + "\n")
            except WarpError as exc:
                self._error(str(exc))

    def _peek(self, args: list[str]) -> None:
        long, show_all, address = parse_peek_args(args)
        try:
            self._write(peek(self.state, address, long, show_all))
        except OSError as exc:
            self._error(f"Error: {exc.strerror or exc}")

    def _pastevents(self, args: list[str]) -> str | None:
        if not args:
            self._write(self.history.render())
            return None
        if args[0] == "purge":
            self.history.purge()
            return None
        if args[0] == "execute":
            try:
                index = parse_history_index(args[1] if len(args) > 1 else None)
                return self.history.get(index)
            except ValueError as exc:
                self._write(f"{exc}\n")
            except HistoryError as exc:
                self._write(f"{exc}\n")
        return None

    def _proclore(self, args: list[str]) -> None:
        try:
            info = read_process_info(parse_pid(args))
        except ValueError as exc:
            self._error(f"Error in proclore: {exc}")
            return
        except OSError as exc:
            self._error(f"Error in proclore: {exc.strerror or exc}")
            return
        self._write(format_process_info(info))

    def _seek(self, args: list[str]) -> None:
        try:
            execute, files_only, dirs_only, target, base = parse_seek_args(args)
        except SeekError as exc:
            self._write(f"{exc}\n")
            return
        try:
            self._write(seek(self.state, target, base, execute, files_only, dirs_only))
        except WarpError as exc:
            self._error(str(exc))

    def _child_streams(self) -> tuple[object, object]:
        stdin = None if self.stdin is sys.stdin else subprocess.DEVNULL
        try:
            self.stdout.fileno()
        except (AttributeError, OSError, io.UnsupportedOperation):
            return stdin, subprocess.PIPE
        self.stdout.flush()
        return stdin, None

    def _run_foreground(self, args: list[str]) -> None:
        stdin, stdout = self._child_streams()
        started = time.monotonic()
        try:
            completed = subprocess.run(
                args,
                executable=PROGRAM_DIR + args[0],
                stdin=stdin,
                stdout=stdout,
                check=False,
            )
        except OSError:
            self._write("Invalid Command\n")
            return
        if completed.stdout:
            self._write(completed.stdout.decode(errors="replace"))
        elapsed = int(time.monotonic() - started)
        if elapsed > REPORT_THRESHOLD:
            self._write(f"Time taken :{elapsed} seconds\n")
            self.last_duration = elapsed
            self.last_command = args[0]

    def _run_background(self, args: list[str]) -> None:
        self.stdout.flush()
        try:
            process = subprocess.Popen(
                args,
                executable=PROGRAM_DIR + args[0],
                stdin=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError:
            self._write("Invalid command \n")
            return
        self.state.jobs[process.pid] = BackgroundJob(process.pid, args[0], process)
        self._write(f"{process.pid}\n")

    def run(self) -> int:
        """Read and run lines until ``exit`` or end of input."""
        pending: str | None = None
        while not self.exited:
            if pending is None:
                self.reap_jobs()
                self._write(render_prompt(self.state, self.last_duration, self.last_command))
                self.stdout.flush()
                self.last_duration = 0
                line = self.stdin.readline()
                if not line:
                    break
            else:
                line = pending
            pending = self.run_line(line)
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session whose home is the current directory."""
    parser = argparse.ArgumentParser(prog="warpshell", description="A small interactive shell.")
    parser.parse_args(argv)
    return Shell(ShellState.from_cwd()).run()


if __name__ == "__main__":
    raise SystemExit(main())