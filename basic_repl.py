import argparse
import sys

from lark.exceptions import UnexpectedInput

from basic_interpreter import Interpreter
from basic_listing import format_listing, parse_line, parse_listing

BANNER = (
    "Tiny BASIC Interpreter\n"
    "Commands: LOAD, SAVE, RUN, LIST, NEW, QUIT\n"
    "Statements: PRINT, LET, GOTO, IF, END, DIM\n"
    "Variables: A-Z (integers). Type line number + statement to add a line.\n"
)
PROMPT = "> "
# any byte loads; SAVE writes the same bytes back
LISTING_ENCODING = 'latin-1'

COMMANDS = ('RUN', 'LIST', 'NEW', 'QUIT', 'LOAD', 'SAVE')


def split_command(line):
    """'LOAD prog.bas' -> ('LOAD', 'prog.bas'); ('', line) when no command keyword."""
    for cmd in COMMANDS:
        if line.startswith(cmd):
            rest = line[len(cmd):]
            if rest == '' or rest[0] in ' \t':
                return cmd, rest.strip(' \t')
    return '', line


class Repl:
    def __init__(self, interp=None, out=print):
        self.interp = interp or Interpreter()
        self.out = out
        self.done = False

    # ----- commands -----
    def cmd_run(self, arg):
        if not self.interp.run():
            self.out("No program.")

    def cmd_list(self, arg):
        for num, text in self.interp.list():
            self.out(f"{num} {text}")

    def cmd_new(self, arg):
        self.interp.clear_program()
        self.out("Program cleared.")

    def cmd_quit(self, arg):
        self.done = True

    def cmd_load(self, filename):
        if not filename:
            self.out("Usage: LOAD filename")
            return False
        try:
            with open(filename, 'r', encoding=LISTING_ENCODING) as f:
                text = f.read()
        except OSError:
            self.out(f"Cannot open file: {filename}")
            return False
        try:
            entries = parse_listing(text)
        except UnexpectedInput as e:
            self.out(f"Syntax error in {filename} (line {e.line}, column {e.column})")
            return False
        self.interp.load(entries)
        self.out(f"Loaded {filename}")
        return True

    def cmd_save(self, filename):
        if not filename:
            self.out("Usage: SAVE filename")
            return
        try:
            with open(filename, 'w', encoding=LISTING_ENCODING) as f:
                f.write(format_listing(self.interp.save()))
        except OSError:
            self.out(f"Cannot create file: {filename}")
            return
        self.out(f"Saved {filename}")

    # ----- dispatch -----
    def process(self, line):
        line = line.rstrip('\r\n').lstrip(' \t')
        if not line.strip():
            return
        if '0' <= line[0] <= '9':
            entry = parse_line(line)
            if entry is not None:
                self.interp.edit_or_delete(*entry)
            return
        cmd, arg = split_command(line)
        if cmd:
            getattr(self, 'cmd_' + cmd.lower())(arg)
        else:
            self.interp.execute_direct(line)

    def loop(self, read=input):
        self.out(BANNER)
        while not self.done:
            try:
                line = read(PROMPT)
            except EOFError:
                break
            except KeyboardInterrupt:
                self.out("\nBreak")
                continue
            try:
                self.process(line)
            except KeyboardInterrupt:
                self.out("\nBreak")
        self.out("Goodbye.")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Tiny BASIC interpreter')
    parser.add_argument('filename', nargs='?', help='program listing to load and RUN')
    args = parser.parse_args(argv)

    repl = Repl()
    if args.filename:
        if not repl.cmd_load(args.filename):
            return 1
        repl.cmd_run('')
        return 0
    repl.loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
