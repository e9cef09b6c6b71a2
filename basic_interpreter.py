"""
Interpreter aggregate: program store + variable store + run state, and the
controller that drives a RUN through the statement executor.
"""

import sys
from enum import Enum
from typing import Iterable, List, Tuple

from basic_exec import HALT, StatementExecutor
from basic_program import MAX_LINE_LENGTH, MAX_LINES, ProgramLine, ProgramStore
from basic_vars import MAX_ARRAY_SIZE, VariableStore

# number given to the one-line view used by direct mode; never a jump target
DIRECT_LINE = -1


class RunState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'


class Interpreter:
    def __init__(self, output=None, max_lines=MAX_LINES, max_array_size=MAX_ARRAY_SIZE):
        self.output = output if output is not None else sys.stdout.write
        self.program = ProgramStore(max_lines)
        self.store = VariableStore(max_array_size)
        self.state = RunState.IDLE
        self.executor = StatementExecutor(self.store, self._emit)

    def _emit(self, s):
        self.output(s)

    @property
    def running(self):
        return self.state is RunState.RUNNING

    # ----- editing -----
    def edit_or_delete(self, number, text):
        text = (text or '').strip()
        if text:
            self.program.upsert(number, text)
        else:
            self.program.delete(number)

    def clear_program(self):
        self.program.clear()
        self.store.reset()

    def list(self) -> List[Tuple[int, str]]:
        return [(ln.number, ln.text) for ln in self.program]

    def save(self) -> List[Tuple[int, str]]:
        return self.list()

    def load(self, entries: Iterable[Tuple[int, str]]):
        self.program.clear()
        for number, text in entries:
            if text and text.strip():
                self.program.upsert(number, text.strip())

    # ----- execution -----
    def run(self):
        """Run the stored program from its first line. False if nothing ran."""
        if self.running or not len(self.program):
            return False
        self.store.reset()
        lines = self.program.snapshot()
        self.state = RunState.RUNNING
        try:
            pc = 0
            while 0 <= pc < len(lines):
                pc = self.executor.execute(lines[pc].text, pc, lines)
                if pc == HALT:
                    break
        finally:
            self.state = RunState.IDLE
        return True

    def execute_direct(self, text):
        """One statement outside the program; GOTO/IF have nowhere to go."""
        text = text[:MAX_LINE_LENGTH]
        view = (ProgramLine(DIRECT_LINE, text),)
        self.executor.execute(text, 0, view)
